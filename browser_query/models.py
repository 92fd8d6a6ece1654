"""Shared models for the browser query runtime."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class RunConfig:
    """Immutable run-level configuration."""

    run_id: str
    start_url: Optional[str] = None
    headless: bool = True
    timeout_ms: int = 30000
    capture_network: bool = True
    capture_console: bool = True


@dataclass
class RunState:
    """Mutable runtime state for an active run."""

    run_id: str
    active: bool = False
    started_at: Optional[float] = None
    ended_at: Optional[float] = None
    current_url: Optional[str] = None
    playwright: Any = None
    browser: Any = None
    browser_context: Any = None
    tab: Any = None
    metadata: Dict[str, Any] = field(default_factory=dict)
