"""Render Forgejo API responses as tool output text."""

from typing import Any

from .models import FileContent, Issue, Repository

NO_DESCRIPTION = "No description"


def format_repository_list(data: list[dict[str, Any]]) -> str:
    repos = [Repository.from_dict(d) for d in data]
    lines = [f"• {repo.full_name} - {repo.description or NO_DESCRIPTION}" for repo in repos]
    return f"Found {len(repos)} repositories:\n\n" + "\n".join(lines)


def format_repository(data: dict[str, Any]) -> str:
    repo = Repository.from_dict(data)
    return f"Repository: {repo.full_name}\n" f"ID: {repo.id}\n" f"Description: {repo.description or NO_DESCRIPTION}"


def format_issue_list(data: list[dict[str, Any]], owner: str, repo: str, state: str) -> str:
    issues = [Issue.from_dict(d) for d in data]
    lines = [f"#{issue.number}: {issue.title} [{issue.state}]" for issue in issues]
    return f"Issues in repository {owner}/{repo} ({state}):\n\n" + "\n".join(lines)


def format_created_issue(data: dict[str, Any]) -> str:
    issue = Issue.from_dict(data)
    return (
        "Issue created successfully!\n"
        f"Number: #{issue.number}\n"
        f"Title: {issue.title}\n"
        f"URL: {issue.html_url}"
    )


def format_file_content(data: dict[str, Any], path: str, ref: str) -> str:
    """Show the decoded file, fenced, with the size reported by the API.

    The whole file is embedded; there is no size cap.
    """
    file = FileContent.from_dict(data)
    return f"File: {path} (branch: {ref})\n" f"Size: {file.size} bytes\n\n" f"Content:\n```\n{file.decoded_text()}\n```"
