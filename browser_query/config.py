"""Build run configuration from plain config dicts."""

from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

from .models import RunConfig


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        norm = value.strip().lower()
        if norm in {"1", "true", "yes", "on"}:
            return True
        if norm in {"0", "false", "no", "off"}:
            return False
        return default
    return bool(value)


def run_config_from_dict(
    cfg: Optional[Dict[str, Any]] = None,
    *,
    run_id: Optional[str] = None,
) -> RunConfig:
    """Read the ``browser_runtime`` section (or a bare dict) into a RunConfig.

    Malformed values fall back to the RunConfig defaults.
    """
    root = cfg if isinstance(cfg, dict) else {}
    runtime_cfg = root.get("browser_runtime") if isinstance(root.get("browser_runtime"), dict) else root
    defaults = RunConfig(run_id="")

    try:
        timeout_ms = max(1, int(runtime_cfg.get("timeout_ms", defaults.timeout_ms)))
    except (TypeError, ValueError):
        timeout_ms = defaults.timeout_ms

    start_url = str(runtime_cfg.get("start_url") or "").strip() or None

    return RunConfig(
        run_id=str(run_id or runtime_cfg.get("run_id") or uuid.uuid4()),
        start_url=start_url,
        headless=_as_bool(runtime_cfg.get("headless"), defaults.headless),
        timeout_ms=timeout_ms,
        capture_network=_as_bool(runtime_cfg.get("capture_network"), defaults.capture_network),
        capture_console=_as_bool(runtime_cfg.get("capture_console"), defaults.capture_console),
    )
