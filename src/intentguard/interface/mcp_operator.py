"""Operator entrypoint.

Starts the MCP server that can create negatives in the account store.
Use for scheduled jobs or trusted operators.

Usage:
    python -m intentguard.interface.mcp_operator
    # or:
    intentguard-operator
"""

from __future__ import annotations

from ..config.runtime import get_settings
from .logging_config import configure_logging
from .mcp.auth import check_scope
from .mcp.server import create_server


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    check_scope("operator")
    server = create_server(mode="operator")
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
