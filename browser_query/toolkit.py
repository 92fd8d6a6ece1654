"""Wire the session runtime and the query tools together."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from langchain_core.tools import StructuredTool

from .console import ConsoleFeature
from .context import Context
from .models import RunConfig, RunState
from .network import NetworkFeature
from .session import BrowserSessionManager

module_logger = logging.getLogger(__name__)


class BrowserQueryToolkit:
    """Own one browser run and expose the read-only listing tools."""

    def __init__(self, *, context: Optional[Context] = None, logger: Any = None):
        self.logger = logger or module_logger
        self.context = context or Context()
        self.session_manager = BrowserSessionManager(self.context, logger=self.logger)
        self.console = ConsoleFeature(self.context, logger=self.logger)
        self.network = NetworkFeature(self.context, logger=self.logger)
        self.run_state: Optional[RunState] = None

    def get_tools(self) -> List[StructuredTool]:
        return [*self.console.get_tools(), *self.network.get_tools()]

    async def start(self, run_config: RunConfig) -> RunState:
        if self.run_state is not None:
            raise RuntimeError(f"Run {self.run_state.run_id} is already active")
        try:
            self.run_state = await self.session_manager.start(run_config)
        except Exception as e:
            self.logger.error("Failed to start browser run %s: %s", run_config.run_id, e)
            raise
        return self.run_state

    async def shutdown(self) -> None:
        run_state = self.run_state
        self.run_state = None
        await self.session_manager.shutdown(run_state)

    async def __aenter__(self) -> "BrowserQueryToolkit":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.shutdown()
