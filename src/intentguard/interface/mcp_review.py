"""Review entrypoint.

Starts the read-only MCP server (classification and dry-run previews).

Usage:
    python -m intentguard.interface.mcp_review
    # or via the script entrypoint:
    intentguard-review
"""

from __future__ import annotations

from .mcp.server import create_server


def main() -> None:
    from .mcp.auth import check_scope
    check_scope("review")
    server = create_server(mode="review")
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
