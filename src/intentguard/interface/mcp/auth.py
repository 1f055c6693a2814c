"""MCP auth: review vs operator scope. Gate and reject unauthorized."""

from __future__ import annotations

import os


def require_operator_scope() -> None:
    """Require operator scope. Raises PermissionError if not allowed."""
    from ...config.runtime import get_settings

    settings = get_settings()
    if not settings.require_operator_key:
        return
    if not os.environ.get("INTENTGUARD_OPERATOR_KEY"):
        raise PermissionError("Operator surface requires INTENTGUARD_OPERATOR_KEY to be set")


def check_scope(mode: str) -> None:
    """Check scope for the given server mode. Call at server start."""
    if mode == "operator":
        require_operator_scope()
    elif mode == "review":
        return
    else:
        raise ValueError(f"Unknown mode: {mode!r}")
