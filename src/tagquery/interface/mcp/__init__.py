"""MCP interface."""
