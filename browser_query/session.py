"""Playwright session lifecycle."""

from __future__ import annotations

import logging
import time
from typing import Any, Optional

from playwright.async_api import async_playwright

from .context import Context
from .models import RunConfig, RunState
from .tab import Tab

module_logger = logging.getLogger(__name__)


class BrowserSessionManager:
    """Manage Playwright browser/context/page lifecycle and register tabs."""

    def __init__(self, context: Context, logger: Any = None):
        self.context = context
        self.logger = logger or module_logger

    async def start(self, run_config: RunConfig) -> RunState:
        pw = await async_playwright().start()
        state = RunState(
            run_id=run_config.run_id,
            playwright=pw,
            metadata={
                "timeout_ms": int(run_config.timeout_ms),
                "headless": bool(run_config.headless),
                "capture_console": bool(run_config.capture_console),
                "capture_network": bool(run_config.capture_network),
            },
        )
        try:
            state.browser = await pw.chromium.launch(
                headless=bool(run_config.headless),
                args=[
                    "--no-sandbox",
                    "--disable-dev-shm-usage",
                ],
            )
            browser_context = await state.browser.new_context()
            state.browser_context = browser_context
            browser_context.set_default_timeout(float(run_config.timeout_ms))
            browser_context.set_default_navigation_timeout(float(run_config.timeout_ms))

            tab = await self.new_tab(state)
            if run_config.start_url:
                await tab.navigate(run_config.start_url)
                state.current_url = tab.url or run_config.start_url
        except Exception as e:
            self.logger.warning("Browser start failed for run %s, releasing resources: %s", run_config.run_id, e)
            await self.shutdown(state)
            raise

        state.active = True
        state.started_at = time.time()
        return state

    async def new_tab(self, run_state: RunState) -> Tab:
        browser_context = getattr(run_state, "browser_context", None)
        if browser_context is None:
            raise RuntimeError("Browser context is not initialized")

        metadata = run_state.metadata or {}
        page = await browser_context.new_page()
        tab = Tab(
            page,
            capture_console=bool(metadata.get("capture_console", True)),
            capture_network=bool(metadata.get("capture_network", True)),
            timeout_ms=int(metadata.get("timeout_ms", 30000)),
            logger=self.logger,
        )
        # Listeners go on before any navigation so nothing is missed.
        tab.attach_listeners()
        self.context.add_tab(tab)
        run_state.tab = tab
        run_state.current_url = tab.url or run_state.current_url
        return tab

    async def shutdown(self, run_state: Optional[RunState]) -> None:
        if run_state is None:
            return

        for tab in self.context.tabs:
            tab.detach_listeners()
            self.context.close_tab(tab)

        try:
            if run_state.browser_context is not None:
                await run_state.browser_context.close()
        except Exception as e:
            self.logger.warning("Failed to close browser context: %s", e)

        try:
            if run_state.browser is not None:
                await run_state.browser.close()
        except Exception as e:
            self.logger.warning("Failed to close browser: %s", e)

        try:
            if run_state.playwright is not None:
                await run_state.playwright.stop()
        except Exception as e:
            self.logger.warning("Failed to stop playwright: %s", e)

        run_state.tab = None
        run_state.active = False
        run_state.ended_at = time.time()
