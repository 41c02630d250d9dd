"""Static tool catalog served for tools/list.

The input schemas are advertised to the client as-is; argument checking
happens in ``forgejo_mcp.arguments``.
"""

from mcp.types import Tool

OWNER_PROPERTY = {"type": "string", "description": "Repository owner"}
REPO_PROPERTY = {"type": "string", "description": "Repository name"}

ISSUE_STATES = ("open", "closed", "all")
DEFAULT_ISSUE_STATE = "open"
# TODO: resolve the repository's default_branch instead of assuming "main"
DEFAULT_REF = "main"

LIST_REPOSITORIES = Tool(
    name="list_repositories",
    description="Get list of user repositories",
    inputSchema={
        "type": "object",
        "properties": {
            "username": {
                "type": "string",
                "description": "Username (optional, defaults to current user)",
            },
        },
    },
)

GET_REPOSITORY = Tool(
    name="get_repository",
    description="Get repository information",
    inputSchema={
        "type": "object",
        "properties": {
            "owner": OWNER_PROPERTY,
            "repo": REPO_PROPERTY,
        },
        "required": ["owner", "repo"],
    },
)

LIST_ISSUES = Tool(
    name="list_issues",
    description="Get list of repository issues",
    inputSchema={
        "type": "object",
        "properties": {
            "owner": OWNER_PROPERTY,
            "repo": REPO_PROPERTY,
            "state": {
                "type": "string",
                "enum": list(ISSUE_STATES),
                "description": "Issue state",
                "default": DEFAULT_ISSUE_STATE,
            },
        },
        "required": ["owner", "repo"],
    },
)

CREATE_ISSUE = Tool(
    name="create_issue",
    description="Create a new issue",
    inputSchema={
        "type": "object",
        "properties": {
            "owner": OWNER_PROPERTY,
            "repo": REPO_PROPERTY,
            "title": {"type": "string", "description": "Issue title"},
            "body": {"type": "string", "description": "Issue description"},
        },
        "required": ["owner", "repo", "title"],
    },
)

GET_FILE_CONTENT = Tool(
    name="get_file_content",
    description="Get file content from repository",
    inputSchema={
        "type": "object",
        "properties": {
            "owner": OWNER_PROPERTY,
            "repo": REPO_PROPERTY,
            "path": {"type": "string", "description": "File path"},
            "ref": {
                "type": "string",
                "description": "Branch or commit (defaults to main)",
                "default": DEFAULT_REF,
            },
        },
        "required": ["owner", "repo", "path"],
    },
)

TOOL_CATALOG: tuple[Tool, ...] = (
    LIST_REPOSITORIES,
    GET_REPOSITORY,
    LIST_ISSUES,
    CREATE_ISSUE,
    GET_FILE_CONTENT,
)
