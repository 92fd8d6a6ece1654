"""Read-only console and network query tools over a Playwright session."""

from .config import run_config_from_dict
from .console import ConsoleFeature, ConsoleMessagesParams
from .context import Context, NoActiveTabError
from .models import RunConfig, RunState
from .network import NetworkFeature, NetworkRequestsParams
from .pagination import (
    FilterParams,
    PageRequest,
    PaginatedResult,
    PaginationMetadata,
    PaginationParams,
    apply_pagination,
    apply_text_filter,
    format_pagination_info,
)
from .session import BrowserSessionManager
from .tab import ConsoleMessage, Tab
from .toolkit import BrowserQueryToolkit

__all__ = [
    "BrowserQueryToolkit",
    "BrowserSessionManager",
    "ConsoleFeature",
    "ConsoleMessage",
    "ConsoleMessagesParams",
    "Context",
    "FilterParams",
    "NetworkFeature",
    "NetworkRequestsParams",
    "NoActiveTabError",
    "PageRequest",
    "PaginatedResult",
    "PaginationMetadata",
    "PaginationParams",
    "RunConfig",
    "RunState",
    "Tab",
    "apply_pagination",
    "apply_text_filter",
    "format_pagination_info",
    "run_config_from_dict",
]
