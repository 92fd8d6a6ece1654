"""Tab registry shared by the query tools."""

from __future__ import annotations

from typing import List, Optional

from .tab import Tab


class NoActiveTabError(RuntimeError):
    """Raised when a tool needs a page but none is open."""


class Context:
    """Track open tabs and which one the tools read from."""

    def __init__(self) -> None:
        self._tabs: List[Tab] = []
        self._current_tab: Optional[Tab] = None

    @property
    def tabs(self) -> List[Tab]:
        return list(self._tabs)

    def current_tab(self) -> Optional[Tab]:
        return self._current_tab

    def current_tab_or_die(self) -> Tab:
        if self._current_tab is None:
            raise NoActiveTabError("No open pages available. Open a page first.")
        return self._current_tab

    def add_tab(self, tab: Tab, *, select: bool = True) -> Tab:
        self._tabs.append(tab)
        if select or self._current_tab is None:
            self._current_tab = tab
        return tab

    def select_tab(self, index: int) -> Tab:
        if index < 0 or index >= len(self._tabs):
            raise ValueError(f"Tab {index} not found")
        self._current_tab = self._tabs[index]
        return self._current_tab

    def close_tab(self, tab: Tab) -> None:
        if tab not in self._tabs:
            return
        index = self._tabs.index(tab)
        self._tabs.remove(tab)
        if self._current_tab is tab:
            # Fall back to the neighbour on the left, as browsers do.
            self._current_tab = self._tabs[max(0, index - 1)] if self._tabs else None
