from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

import pytest


class FakeRequest:
    def __init__(self, method: str, url: str) -> None:
        self.method = method
        self.url = url


class FakeResponse:
    def __init__(self, request: FakeRequest, status: int, status_text: str = "") -> None:
        self.request = request
        self.status = status
        self.status_text = status_text
        self.url = request.url


class FakePage:
    """Minimal stand-in for a Playwright page event emitter."""

    def __init__(self, url: str = "about:blank") -> None:
        self.url = url
        self.listeners: Dict[str, List[Callable[[Any], None]]] = {}
        self.goto_calls: List[Dict[str, Any]] = []

    def on(self, event: str, handler: Callable[[Any], None]) -> None:
        self.listeners.setdefault(event, []).append(handler)

    def remove_listener(self, event: str, handler: Callable[[Any], None]) -> None:
        self.listeners.get(event, []).remove(handler)

    def emit(self, event: str, payload: Any) -> None:
        for handler in list(self.listeners.get(event, [])):
            handler(payload)

    async def goto(self, url: str, wait_until: str = "load", timeout: Optional[int] = None) -> None:
        self.goto_calls.append({"url": url, "wait_until": wait_until, "timeout": timeout})
        self.url = url


class FakeTab:
    def __init__(self, console_messages=None, requests=None) -> None:
        self._console_messages = list(console_messages or [])
        self._requests = dict(requests or {})

    def console_messages(self):
        return list(self._console_messages)

    def requests(self):
        return dict(self._requests)


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def make_request() -> Callable[..., FakeRequest]:
    return FakeRequest


@pytest.fixture
def make_response() -> Callable[..., FakeResponse]:
    return FakeResponse


@pytest.fixture
def make_tab() -> Callable[..., FakeTab]:
    return FakeTab
