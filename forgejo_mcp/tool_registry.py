"""Tool Registration Helper.

Provides a decorator-based registry pairing each catalog descriptor with the
coroutine that handles it.

Usage:
    from forgejo_mcp.tool_registry import ToolRegistry

    registry = ToolRegistry()

    @registry.tool(GET_REPOSITORY)
    async def get_repository(args: GetRepositoryArgs) -> str:
        return "result"

    handler = registry.get("get_repository")
"""

from typing import Any, Awaitable, Callable

from mcp.types import Tool

from .errors import ToolNotFoundError

Handler = Callable[[Any], Awaitable[str]]


class ToolRegistry:
    """Registry for tool descriptors and their handlers.

    Attributes:
        tools: Registered descriptors in registration order
    """

    def __init__(self) -> None:
        self.tools: list[Tool] = []
        self._handlers: dict[str, Handler] = {}

    def tool(self, descriptor: Tool) -> Callable[[Handler], Handler]:
        """Decorator to register a handler under ``descriptor.name``.

        Raises:
            ValueError: if the name is already registered
        """

        def decorator(func: Handler) -> Handler:
            if descriptor.name in self._handlers:
                raise ValueError(f"Tool already registered: {descriptor.name}")
            self.tools.append(descriptor)
            self._handlers[descriptor.name] = func
            return func

        return decorator

    def get(self, tool_name: str) -> Handler:
        """Look up a handler by tool name.

        Raises:
            ToolNotFoundError: if no handler is registered under that name
        """
        try:
            return self._handlers[tool_name]
        except KeyError:
            raise ToolNotFoundError(tool_name) from None

    @property
    def count(self) -> int:
        """Get the number of registered tools."""
        return len(self.tools)

    def list_tools(self) -> list[Tool]:
        """Get registered descriptors in registration order."""
        return self.tools.copy()

    def __len__(self) -> int:
        """Support len() on the registry."""
        return self.count

    def __contains__(self, tool_name: str) -> bool:
        """Support 'in' operator for checking if a tool is registered."""
        return tool_name in self._handlers
