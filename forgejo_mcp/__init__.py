"""MCP server exposing Forgejo repositories, issues and file contents as tools."""

__version__ = "0.1.0"
