"""Interface layer: CLI and MCP servers."""
