"""Tool Dispatcher.

Routes a tools/call request by name: validate arguments, map them to one API
request, issue it through the client and format the decoded JSON.
"""

import logging
from typing import Any, Protocol

from mcp.types import TextContent, Tool

from .arguments import (
    CreateIssueArgs,
    GetFileContentArgs,
    GetRepositoryArgs,
    ListIssuesArgs,
    ListRepositoriesArgs,
    parse_arguments,
)
from .catalog import CREATE_ISSUE, GET_FILE_CONTENT, GET_REPOSITORY, LIST_ISSUES, LIST_REPOSITORIES
from .endpoints import ApiRequest, build_request
from .errors import ForgejoAPIError, ToolNotFoundError
from .formatters import (
    format_created_issue,
    format_file_content,
    format_issue_list,
    format_repository,
    format_repository_list,
)
from .tool_registry import ToolRegistry

logger = logging.getLogger(__name__)


class ForgejoClient(Protocol):
    """Anything that can send one request to the Forgejo API."""

    async def request(
        self,
        method: Any,
        endpoint: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any: ...


class ToolDispatcher:
    """Dispatches MCP tool calls to the five Forgejo handlers.

    The client is injected so tests can pass a double instead of APIClient.
    """

    def __init__(self, client: ForgejoClient):
        self.client = client
        self.registry = ToolRegistry()
        self._register_tools()

    def list_tools(self) -> list[Tool]:
        """Return the catalog in registration order."""
        return self.registry.list_tools()

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        """Run one tool and return a single text block.

        Raises:
            ToolNotFoundError: unknown tool name
            InvalidArgumentsError: arguments failed validation
            ForgejoAPIError: the API answered with a non-2xx status
        """
        if name not in self.registry:
            logger.warning(f"Unknown tool requested: {name}")
            raise ToolNotFoundError(name)

        args = parse_arguments(name, arguments)
        handler = self.registry.get(name)
        logger.info(f"Calling tool {name}")

        try:
            text = await handler(args)
        except ForgejoAPIError as e:
            logger.warning(f"Tool {name} failed: {e}")
            raise

        return [TextContent(type="text", text=text)]

    async def _send(self, request: ApiRequest) -> Any:
        logger.debug(f"{request.method} {request.endpoint}")
        return await self.client.request(request.method, request.endpoint, json=request.body)

    def _register_tools(self) -> None:
        registry = self.registry

        @registry.tool(LIST_REPOSITORIES)
        async def list_repositories(args: ListRepositoriesArgs) -> str:
            data = await self._send(build_request(args))
            return format_repository_list(data)

        @registry.tool(GET_REPOSITORY)
        async def get_repository(args: GetRepositoryArgs) -> str:
            data = await self._send(build_request(args))
            return format_repository(data)

        @registry.tool(LIST_ISSUES)
        async def list_issues(args: ListIssuesArgs) -> str:
            data = await self._send(build_request(args))
            return format_issue_list(data, args.owner, args.repo, args.state)

        # Not idempotent: every call creates a new issue
        @registry.tool(CREATE_ISSUE)
        async def create_issue(args: CreateIssueArgs) -> str:
            data = await self._send(build_request(args))
            return format_created_issue(data)

        @registry.tool(GET_FILE_CONTENT)
        async def get_file_content(args: GetFileContentArgs) -> str:
            data = await self._send(build_request(args))
            return format_file_content(data, args.path, args.ref)
