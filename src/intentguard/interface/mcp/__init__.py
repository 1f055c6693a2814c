"""MCP servers: read-only review surface and operator surface."""
