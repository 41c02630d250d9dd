"""Typed tool arguments.

``parse_arguments`` turns the untyped argument object of a tools/call request
into one member of the ``ToolArguments`` union, raising InvalidArgumentsError
before any HTTP call is made.
"""

from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Union

from .catalog import (
    CREATE_ISSUE,
    DEFAULT_ISSUE_STATE,
    DEFAULT_REF,
    GET_FILE_CONTENT,
    GET_REPOSITORY,
    ISSUE_STATES,
    LIST_ISSUES,
    LIST_REPOSITORIES,
)
from .errors import InvalidArgumentsError, ToolNotFoundError


@dataclass(frozen=True)
class ListRepositoriesArgs:
    tool: ClassVar[str] = LIST_REPOSITORIES.name

    username: str | None = None


@dataclass(frozen=True)
class GetRepositoryArgs:
    tool: ClassVar[str] = GET_REPOSITORY.name

    owner: str
    repo: str


@dataclass(frozen=True)
class ListIssuesArgs:
    tool: ClassVar[str] = LIST_ISSUES.name

    owner: str
    repo: str
    state: str = DEFAULT_ISSUE_STATE


@dataclass(frozen=True)
class CreateIssueArgs:
    tool: ClassVar[str] = CREATE_ISSUE.name

    owner: str
    repo: str
    title: str
    body: str = ""


@dataclass(frozen=True)
class GetFileContentArgs:
    tool: ClassVar[str] = GET_FILE_CONTENT.name

    owner: str
    repo: str
    path: str
    ref: str = DEFAULT_REF


ToolArguments = Union[
    ListRepositoriesArgs,
    GetRepositoryArgs,
    ListIssuesArgs,
    CreateIssueArgs,
    GetFileContentArgs,
]


class _Reader:
    """Pulls typed fields out of a raw argument mapping for one tool."""

    def __init__(self, tool: str, raw: dict[str, Any]):
        self.tool = tool
        self.raw = raw

    def required(self, key: str) -> str:
        value = self.raw.get(key)
        if value is None:
            raise InvalidArgumentsError(self.tool, f"missing required argument '{key}'")
        if not isinstance(value, str):
            raise InvalidArgumentsError(self.tool, f"'{key}' must be a string")
        if not value.strip():
            raise InvalidArgumentsError(self.tool, f"'{key}' must not be empty")
        return value

    def optional(self, key: str, default: str | None) -> str | None:
        value = self.raw.get(key)
        if value is None or value == "":
            return default
        if not isinstance(value, str):
            raise InvalidArgumentsError(self.tool, f"'{key}' must be a string")
        return value


def _list_repositories(r: _Reader) -> ListRepositoriesArgs:
    return ListRepositoriesArgs(username=r.optional("username", None))


def _get_repository(r: _Reader) -> GetRepositoryArgs:
    return GetRepositoryArgs(owner=r.required("owner"), repo=r.required("repo"))


def _list_issues(r: _Reader) -> ListIssuesArgs:
    owner = r.required("owner")
    repo = r.required("repo")
    state = r.optional("state", DEFAULT_ISSUE_STATE)
    if state not in ISSUE_STATES:
        raise InvalidArgumentsError(r.tool, f"'state' must be one of {', '.join(ISSUE_STATES)}, got '{state}'")
    return ListIssuesArgs(owner=owner, repo=repo, state=state)


def _create_issue(r: _Reader) -> CreateIssueArgs:
    # body may legitimately be an empty string
    body = r.raw.get("body", "")
    if body is None:
        body = ""
    if not isinstance(body, str):
        raise InvalidArgumentsError(r.tool, "'body' must be a string")
    return CreateIssueArgs(
        owner=r.required("owner"),
        repo=r.required("repo"),
        title=r.required("title"),
        body=body,
    )


def _get_file_content(r: _Reader) -> GetFileContentArgs:
    return GetFileContentArgs(
        owner=r.required("owner"),
        repo=r.required("repo"),
        path=r.required("path"),
        ref=r.optional("ref", DEFAULT_REF),
    )


PARSERS: dict[str, Callable[[_Reader], ToolArguments]] = {
    ListRepositoriesArgs.tool: _list_repositories,
    GetRepositoryArgs.tool: _get_repository,
    ListIssuesArgs.tool: _list_issues,
    CreateIssueArgs.tool: _create_issue,
    GetFileContentArgs.tool: _get_file_content,
}


def parse_arguments(tool_name: str, raw: dict[str, Any] | None) -> ToolArguments:
    """Validate raw arguments for ``tool_name``.

    Args:
        tool_name: Name from the tools/call request
        raw: Argument object; None is treated as empty

    Raises:
        ToolNotFoundError: tool_name is not in the catalog
        InvalidArgumentsError: a required field is missing or a value has the wrong type
    """
    parser = PARSERS.get(tool_name)
    if parser is None:
        raise ToolNotFoundError(tool_name)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise InvalidArgumentsError(tool_name, "arguments must be an object")

    return parser(_Reader(tool_name, raw))
