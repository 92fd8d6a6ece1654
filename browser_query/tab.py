"""Per-page capture of console messages and network requests."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

module_logger = logging.getLogger(__name__)

_PAGE_EVENTS = ("console", "pageerror", "request", "response", "requestfailed")

# Playwright reports console.warn() as "warning".
_CONSOLE_TYPE_ALIASES = {"warning": "warn"}


@dataclass
class ConsoleMessage:
    """Normalized browser console message."""

    type: str
    text: str
    location: Dict[str, Any] = field(default_factory=dict)
    ts: float = field(default_factory=time.time)

    @classmethod
    def from_playwright(cls, msg: Any) -> "ConsoleMessage":
        location: Dict[str, Any] = {}
        try:
            location = dict(getattr(msg, "location", {}) or {})
        except (TypeError, ValueError):
            location = {}
        msg_type = str(getattr(msg, "type", "") or "log")
        return cls(
            type=_CONSOLE_TYPE_ALIASES.get(msg_type, msg_type),
            text=str(getattr(msg, "text", "") or ""),
            location=location,
        )

    @classmethod
    def from_page_error(cls, err: Any) -> "ConsoleMessage":
        # Uncaught page exceptions surface as console errors.
        text = getattr(err, "message", None) or str(err or "")
        return cls(type="error", text=str(text))

    def to_search_text(self) -> str:
        return f"{self.type} {self.text}"


class Tab:
    """Wrap one Playwright page and record what it logs and fetches."""

    def __init__(
        self,
        page: Any,
        *,
        capture_console: bool = True,
        capture_network: bool = True,
        timeout_ms: int = 30000,
        logger: Any = None,
    ):
        self.page = page
        self.capture_console = bool(capture_console)
        self.capture_network = bool(capture_network)
        self.timeout_ms = int(timeout_ms)
        self.logger = logger or module_logger
        self._console_messages: List[ConsoleMessage] = []
        self._requests: Dict[Any, Optional[Any]] = {}
        self._handlers: Dict[str, Any] = {}

    @property
    def url(self) -> str:
        return str(getattr(self.page, "url", "") or "")

    def console_messages(self) -> List[ConsoleMessage]:
        return list(self._console_messages)

    def requests(self) -> Dict[Any, Optional[Any]]:
        """Requests in issue order, mapped to their response or None."""
        return dict(self._requests)

    def clear_collected(self) -> None:
        self._console_messages.clear()
        self._requests.clear()

    def attach_listeners(self) -> None:
        if self._handlers:
            return
        handlers = {
            "console": self._on_console,
            "pageerror": self._on_page_error,
            "request": self._on_request,
            "response": self._on_response,
            "requestfailed": self._on_request_failed,
        }
        for event in _PAGE_EVENTS:
            self.page.on(event, handlers[event])
        self._handlers = handlers

    def detach_listeners(self) -> None:
        for event, handler in self._handlers.items():
            try:
                self.page.remove_listener(event, handler)
            except Exception as e:
                self.logger.warning("Failed to detach %s listener: %s", event, e)
        self._handlers = {}

    async def navigate(self, url: str) -> Any:
        target = str(url or "").strip()
        if not target:
            raise ValueError("URL is required")
        self.clear_collected()
        return await self.page.goto(target, wait_until="domcontentloaded", timeout=self.timeout_ms)

    def _on_console(self, msg: Any) -> None:
        if not self.capture_console:
            return
        try:
            self._console_messages.append(ConsoleMessage.from_playwright(msg))
        except Exception as e:
            self.logger.warning("Failed to record console message: %s", e)

    def _on_page_error(self, err: Any) -> None:
        if not self.capture_console:
            return
        try:
            self._console_messages.append(ConsoleMessage.from_page_error(err))
        except Exception as e:
            self.logger.warning("Failed to record page error: %s", e)

    def _on_request(self, request: Any) -> None:
        if not self.capture_network:
            return
        self._requests[request] = None

    def _on_response(self, response: Any) -> None:
        if not self.capture_network:
            return
        request = getattr(response, "request", None)
        if request is None:
            self.logger.warning("Response without request: %s", getattr(response, "url", ""))
            return
        self._requests[request] = response

    def _on_request_failed(self, request: Any) -> None:
        if not self.capture_network:
            return
        # Keep failed requests listed without a response.
        self._requests.setdefault(request, None)
