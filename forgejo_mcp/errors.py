"""Error kinds surfaced to MCP clients.

Every error raised out of a tool call is an ``McpError`` so the protocol
layer can report a code alongside the message:

- METHOD_NOT_FOUND: the requested tool is not registered
- INVALID_PARAMS: arguments failed validation before any HTTP call
- INTERNAL_ERROR: the Forgejo API answered with a non-2xx status
"""

from typing import Any

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, METHOD_NOT_FOUND, ErrorData


class ToolNotFoundError(McpError):
    """Raised when a call names a tool that is not in the catalog."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {tool_name}"))


class InvalidArgumentsError(McpError):
    """Raised when tool arguments are missing or have the wrong shape."""

    def __init__(self, tool_name: str, detail: str):
        self.tool_name = tool_name
        self.detail = detail
        super().__init__(
            ErrorData(
                code=INVALID_PARAMS,
                message=f"Invalid arguments for {tool_name}: {detail}",
            )
        )


class ForgejoAPIError(McpError):
    """Raised by the API client for any non-2xx response."""

    def __init__(self, status_code: int, status_text: str):
        self.status_code = status_code
        self.status_text = status_text
        data: dict[str, Any] = {"status": status_code, "status_text": status_text}
        super().__init__(
            ErrorData(
                code=INTERNAL_ERROR,
                message=f"Forgejo API error: {status_code} {status_text}",
                data=data,
            )
        )
