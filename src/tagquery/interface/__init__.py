"""External interfaces: CLI, MCP server, boundary validation, observability."""
