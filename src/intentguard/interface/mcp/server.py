"""MCP server factory.

Creates either a Review or an Operator server depending on the requested
mode. Each surface registers only its own tool set.
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from .tools import register_operator_tools, register_review_tools

_SERVER_NAMES = {
    "review": "intentguard-review",
    "operator": "intentguard-operator",
}


def create_server(mode: str = "review") -> FastMCP:
    """Build and return a configured FastMCP server.

    Args:
        mode: ``"review"`` for the read-only surface (classification and
            previews) or ``"operator"`` for runs that write negatives.

    Returns:
        A FastMCP instance with the appropriate tools registered.
    """
    if mode not in _SERVER_NAMES:
        raise ValueError(f"Unknown MCP mode {mode!r}; expected 'review' or 'operator'")

    server = FastMCP(_SERVER_NAMES[mode])
    if mode == "review":
        register_review_tools(server)
    else:
        register_operator_tools(server)
    return server


if __name__ == "__main__":
    server = create_server("review")
    server.run(transport="stdio")
