"""Data types for Forgejo API responses.

Each type is a read-only copy of one JSON object returned by the API.
Unknown keys are ignored; missing optional keys fall back to defaults.
"""

import base64
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Repository:
    """A repository as returned by /repos/{owner}/{repo} and the list endpoints."""

    id: int
    name: str
    full_name: str
    html_url: str = ""
    description: str | None = None
    private: bool = False
    fork: bool = False
    created_at: str = ""
    updated_at: str = ""
    size: int = 0
    language: str | None = None
    default_branch: str = ""

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Repository":
        return Repository(
            id=d.get("id", 0),
            name=d.get("name", ""),
            full_name=d.get("full_name", ""),
            html_url=d.get("html_url", ""),
            description=d.get("description"),
            private=bool(d.get("private", False)),
            fork=bool(d.get("fork", False)),
            created_at=d.get("created_at", ""),
            updated_at=d.get("updated_at", ""),
            size=d.get("size", 0),
            language=d.get("language"),
            default_branch=d.get("default_branch", ""),
        )


@dataclass(frozen=True)
class IssueUser:
    """Author of an issue."""

    id: int
    login: str
    full_name: str = ""

    @staticmethod
    def from_dict(d: dict[str, Any] | None) -> "IssueUser":
        d = d or {}
        return IssueUser(
            id=d.get("id", 0),
            login=d.get("login", ""),
            full_name=d.get("full_name", ""),
        )


@dataclass(frozen=True)
class Issue:
    """An issue. ``create_issue`` receives one back from the POST."""

    id: int
    number: int
    title: str
    body: str = ""
    state: str = ""  # "open" or "closed"
    html_url: str = ""
    created_at: str = ""
    updated_at: str = ""
    user: IssueUser | None = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Issue":
        return Issue(
            id=d.get("id", 0),
            number=d.get("number", 0),
            title=d.get("title", ""),
            body=d.get("body") or "",
            state=d.get("state", ""),
            html_url=d.get("html_url", ""),
            created_at=d.get("created_at", ""),
            updated_at=d.get("updated_at", ""),
            user=IssueUser.from_dict(d.get("user")) if d.get("user") else None,
        )


@dataclass(frozen=True)
class FileContent:
    """File metadata and base64 payload from /repos/{owner}/{repo}/contents/{path}."""

    content: str
    size: int
    name: str = ""
    path: str = ""
    sha: str = ""
    type: str = "file"
    encoding: str = "base64"

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "FileContent":
        return FileContent(
            content=d.get("content") or "",
            size=d.get("size", 0),
            name=d.get("name", ""),
            path=d.get("path", ""),
            sha=d.get("sha", ""),
            type=d.get("type", "file"),
            encoding=d.get("encoding") or "base64",
        )

    def decoded_text(self) -> str:
        """Decode the base64 payload as UTF-8.

        The API wraps base64 at 60 columns; the embedded newlines are
        ignored. Bytes that are not valid UTF-8 are replaced.
        """
        raw = base64.b64decode(self.content)
        return raw.decode("utf-8", errors="replace")
