"""Forgejo MCP Server - Main Entry Point.

Exposes a Forgejo (or Gitea-compatible) instance as MCP tools over stdio.

Usage:
    # Configure through the environment:
    FORGEJO_BASE_URL=https://codeberg.org FORGEJO_TOKEN=... python -m forgejo_mcp

    # Or through flags / a YAML file:
    python -m forgejo_mcp --base-url https://git.example.com --config ~/.config/forgejo-mcp.yaml
"""

import argparse
import asyncio
import logging
import os
import sys

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool

from . import __version__
from .config import ForgejoConfig, load_config
from .dispatcher import ToolDispatcher
from .http_client import forgejo_client

DEFAULT_SERVER_NAME = "forgejo-mcp-server"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure logging to stderr (stdout is for JSON-RPC)."""
    handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[handler],
    )
    return logging.getLogger(__name__)


def create_mcp_server(dispatcher: ToolDispatcher, name: str = DEFAULT_SERVER_NAME) -> Server:
    """
    Create a low-level MCP server wired to the dispatcher.

    Args:
        dispatcher: Tool dispatcher holding the API client
        name: Server name reported during initialization

    Returns:
        Configured Server instance
    """
    server: Server = Server(name, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return dispatcher.list_tools()

    # Registered directly: McpError must propagate as a JSON-RPC error, and
    # arguments are checked by the dispatcher, not by jsonschema.
    async def call_tool(req: types.CallToolRequest) -> types.ServerResult:
        content = await dispatcher.call_tool(req.params.name, req.params.arguments)
        return types.ServerResult(types.CallToolResult(content=content, isError=False))

    server.request_handlers[types.CallToolRequest] = call_tool

    return server


async def run_mcp_server(config: ForgejoConfig, name: str = DEFAULT_SERVER_NAME) -> None:
    """Run the MCP server in stdio mode until the client disconnects."""
    logger = logging.getLogger(__name__)

    async with forgejo_client(config) as client:
        dispatcher = ToolDispatcher(client)
        server = create_mcp_server(dispatcher, name=name)

        async with stdio_server() as (read_stream, write_stream):
            logger.info("Forgejo MCP server started")
            await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Forgejo MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  FORGEJO_BASE_URL   Instance URL, e.g. https://codeberg.org
  FORGEJO_TOKEN      API access token
  FORGEJO_TIMEOUT    Optional HTTP timeout in seconds (default: none)
  FORGEJO_CONFIG     Optional YAML file with a 'forgejo:' section
        """,
    )
    parser.add_argument("--base-url", default=None, help="Forgejo instance URL (overrides FORGEJO_BASE_URL)")
    parser.add_argument("--token", default=None, help="API token (overrides FORGEJO_TOKEN)")
    parser.add_argument("--config", default=None, help="YAML config file (overrides FORGEJO_CONFIG)")
    parser.add_argument(
        "--log-level",
        default=os.getenv("FORGEJO_LOG_LEVEL", "INFO"),
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--name",
        default=DEFAULT_SERVER_NAME,
        help=f"Server name (default: {DEFAULT_SERVER_NAME})",
    )

    args = parser.parse_args()
    logger = setup_logging(args.log_level)

    try:
        config = load_config(config_file=args.config, base_url=args.base_url, token=args.token)
        logger.info(f"Using Forgejo instance at {config.base_url or '<unset>'}")
        asyncio.run(run_mcp_server(config, name=args.name))
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
