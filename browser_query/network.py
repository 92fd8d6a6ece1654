"""Network request listing tool."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from pydantic import Field

from .context import Context
from .pagination import FilterParams, PaginationParams, apply_pagination, apply_text_filter
from .tool import ToolFeature, listing_response, mcp_tool

module_logger = logging.getLogger(__name__)

RequestEntry = Tuple[Any, Optional[Any]]


class NetworkRequestsParams(PaginationParams, FilterParams):
    method: Optional[str] = Field(default=None, description="Filter by HTTP method (GET, POST, etc.)")
    status: Optional[int] = Field(default=None, ge=100, le=599, description="Filter by HTTP status code")
    url: Optional[str] = Field(default=None, description="Filter by URL pattern")


def request_search_text(entry: RequestEntry) -> str:
    request, response = entry
    status = response.status if response is not None else None
    status_text = response.status_text if response is not None else None
    return f"{request.method} {request.url} {status or ''} {status_text or ''}"


def render_request(request: Any, response: Optional[Any]) -> str:
    result = [f"[{request.method.upper()}] {request.url}"]
    if response is not None:
        result.append(f"=> [{response.status}] {response.status_text}")
    return " ".join(result)


def filter_requests(
    entries: List[RequestEntry],
    *,
    method: Optional[str] = None,
    status: Optional[int] = None,
    url: Optional[str] = None,
) -> List[RequestEntry]:
    """Apply the structured filters. Runs before the free-text filter."""
    if method:
        method_norm = method.upper()
        entries = [(req, resp) for req, resp in entries if req.method.upper() == method_norm]

    if status:
        entries = [(req, resp) for req, resp in entries if resp is not None and resp.status == status]

    if url:
        url_norm = url.lower()
        entries = [(req, resp) for req, resp in entries if url_norm in req.url.lower()]

    return entries


class NetworkFeature(ToolFeature):
    """List network requests captured on the current tab."""

    def __init__(self, context: Context, logger: Any = None):
        super().__init__()
        self.context = context
        self.logger = logger or module_logger

    def list_requests(
        self,
        *,
        method: Optional[str] = None,
        status: Optional[int] = None,
        url: Optional[str] = None,
        filter: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> Dict[str, Any]:
        entries: List[RequestEntry] = list(self.context.current_tab_or_die().requests().items())
        entries = filter_requests(entries, method=method, status=status, url=url)

        if filter:
            entries = apply_text_filter(entries, filter, request_search_text)

        result = apply_pagination(entries, {"limit": limit, "offset": offset})
        self.logger.debug(
            "Network listing: total=%s offset=%s limit=%s",
            result.metadata.total,
            result.metadata.offset,
            result.metadata.limit,
        )
        log = "\n".join(render_request(request, response) for request, response in result.items)
        return listing_response(log, result.metadata)

    @mcp_tool(
        name="browser_network_requests",
        title="List network requests",
        args_schema=NetworkRequestsParams,
        examples=[
            "browser_network_requests(limit=50, offset=0)",
            "browser_network_requests(method='POST', url='/api/')",
            "browser_network_requests(status=404)",
        ],
    )
    async def mcp_browser_network_requests(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filter: Optional[str] = None,
        method: Optional[str] = None,
        status: Optional[int] = None,
        url: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Returns all network requests since loading the page

        Args:
            limit (optional): Max requests to return in this page.
                Range: [1..1000]. Default: `50`.
            offset (optional): Zero-based index of first request. Default: `0`.
            filter (optional): Case-insensitive text searched in
                "<method> <url> <status> <status text>".
            method (optional): HTTP method, compared case-insensitively.
            status (optional): Exact HTTP status code in [100..599].
                Requests still waiting for a response never match.
            url (optional): Case-insensitive URL substring.

        Returns:
            Dict envelope:
            - ok (bool): Whether query succeeded.
            - content (list[dict]): Text blocks; one
              `[METHOD] url => [status] status text` line per request, then the
              pagination summary.
            - metadata (dict): total, limit, offset, has_more.
        """
        return self.list_requests(
            method=method,
            status=status,
            url=url,
            filter=filter,
            limit=limit,
            offset=offset,
        )
