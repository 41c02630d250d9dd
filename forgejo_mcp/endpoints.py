"""Map validated tool arguments to a Forgejo API request.

Pure functions only: nothing here touches the network, so the mapping can be
tested without an HTTP client.
"""

from dataclasses import dataclass
from functools import singledispatch
from typing import Any
from urllib.parse import quote, urlencode

from .arguments import (
    CreateIssueArgs,
    GetFileContentArgs,
    GetRepositoryArgs,
    ListIssuesArgs,
    ListRepositoriesArgs,
)
from .http_client import Method


@dataclass(frozen=True)
class ApiRequest:
    """One outbound call: method, path below /api/v1 (query included), body."""

    method: Method
    endpoint: str
    body: dict[str, Any] | None = None


def _seg(value: str) -> str:
    """Percent-encode a single path segment."""
    return quote(value, safe="")


def _repo_path(owner: str, repo: str) -> str:
    return f"/repos/{_seg(owner)}/{_seg(repo)}"


@singledispatch
def build_request(args: Any) -> ApiRequest:
    raise TypeError(f"No endpoint mapping for {type(args).__name__}")


@build_request.register
def _(args: ListRepositoriesArgs) -> ApiRequest:
    if args.username:
        return ApiRequest("GET", f"/users/{_seg(args.username)}/repos")
    return ApiRequest("GET", "/user/repos")


@build_request.register
def _(args: GetRepositoryArgs) -> ApiRequest:
    return ApiRequest("GET", _repo_path(args.owner, args.repo))


@build_request.register
def _(args: ListIssuesArgs) -> ApiRequest:
    query = urlencode({"state": args.state})
    return ApiRequest("GET", f"{_repo_path(args.owner, args.repo)}/issues?{query}")


@build_request.register
def _(args: CreateIssueArgs) -> ApiRequest:
    return ApiRequest(
        "POST",
        f"{_repo_path(args.owner, args.repo)}/issues",
        body={"title": args.title, "body": args.body},
    )


@build_request.register
def _(args: GetFileContentArgs) -> ApiRequest:
    # Keep "/" so nested paths map onto nested URL segments
    path = quote(args.path.lstrip("/"), safe="/")
    query = urlencode({"ref": args.ref})
    return ApiRequest("GET", f"{_repo_path(args.owner, args.repo)}/contents/{path}?{query}")
