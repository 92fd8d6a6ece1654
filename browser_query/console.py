"""Console message listing tool."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field

from .context import Context
from .pagination import FilterParams, PaginationParams, apply_pagination, apply_text_filter
from .tab import ConsoleMessage
from .tool import ToolFeature, listing_response, mcp_tool

module_logger = logging.getLogger(__name__)

ConsoleMessageType = Literal["log", "error", "warn", "info", "debug", "trace"]


class ConsoleMessagesParams(PaginationParams, FilterParams):
    type: Optional[ConsoleMessageType] = Field(default=None, description="Filter by message type")


def render_console_message(message: ConsoleMessage) -> str:
    return f"[{message.type.upper()}] {message.text}"


class ConsoleFeature(ToolFeature):
    """List console messages captured on the current tab."""

    def __init__(self, context: Context, logger: Any = None):
        super().__init__()
        self.context = context
        self.logger = logger or module_logger

    def list_console_messages(
        self,
        *,
        type: Optional[str] = None,
        filter: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Dict[str, Any]:
        messages: List[ConsoleMessage] = self.context.current_tab_or_die().console_messages()

        if type:
            messages = [message for message in messages if message.type == type]

        if filter:
            messages = apply_text_filter(
                messages,
                filter,
                lambda message: f"{message.type} {message.text}",
            )

        result = apply_pagination(messages, {"limit": limit, "offset": offset})
        self.logger.debug(
            "Console listing: total=%s offset=%s limit=%s",
            result.metadata.total,
            result.metadata.offset,
            result.metadata.limit,
        )
        log = "\n".join(render_console_message(message) for message in result.items)
        return listing_response(log, result.metadata)

    @mcp_tool(
        name="browser_console_messages",
        title="Get console messages",
        args_schema=ConsoleMessagesParams,
        examples=[
            "browser_console_messages(limit=50, offset=0)",
            "browser_console_messages(type='error', filter='failed')",
        ],
    )
    async def mcp_browser_console_messages(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filter: Optional[str] = None,
        type: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Returns all console messages

        Args:
            limit (optional): Max messages to return in this page.
                Range: [1..1000]. Default: `50`.
            offset (optional): Zero-based index of first message. Default: `0`.
            filter (optional): Case-insensitive text searched in "<type> <text>".
            type (optional): Exact message type filter.
                Allowed values: [`log`, `error`, `warn`, `info`, `debug`, `trace`].

        Returns:
            Dict envelope:
            - ok (bool): Whether query succeeded.
            - content (list[dict]): Text blocks; one `[TYPE] text` line per message,
              then the pagination summary.
            - metadata (dict): total, limit, offset, has_more.
        """
        return self.list_console_messages(type=type, filter=filter, limit=limit, offset=offset)
