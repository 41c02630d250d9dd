"""Tests for forgejo_mcp.formatters and forgejo_mcp.models."""

from forgejo_mcp.formatters import (
    format_created_issue,
    format_file_content,
    format_issue_list,
    format_repository,
    format_repository_list,
)
from forgejo_mcp.models import FileContent, Issue


class TestRepositoryFormatting:
    """Tests for repository output."""

    def test_repository_list(self):
        text = format_repository_list(
            [
                {"id": 1, "name": "a", "full_name": "alice/a", "description": "First"},
                {"id": 2, "name": "b", "full_name": "alice/b", "description": ""},
            ]
        )
        assert text == "Found 2 repositories:\n\n• alice/a - First\n• alice/b - No description"

    def test_empty_repository_list(self):
        assert format_repository_list([]) == "Found 0 repositories:\n\n"

    def test_repository(self):
        text = format_repository({"id": 42, "name": "r", "full_name": "o/r", "description": None})
        assert text == "Repository: o/r\nID: 42\nDescription: No description"


class TestIssueFormatting:
    """Tests for issue output."""

    def test_issue_list(self):
        text = format_issue_list(
            [
                {"id": 10, "number": 1, "title": "Bug", "state": "open"},
                {"id": 11, "number": 2, "title": "Feature", "state": "closed"},
            ],
            "o",
            "r",
            "all",
        )
        assert text == "Issues in repository o/r (all):\n\n#1: Bug [open]\n#2: Feature [closed]"

    def test_created_issue(self):
        text = format_created_issue(
            {"id": 99, "number": 5, "title": "New", "html_url": "https://git.example.com/o/r/issues/5"}
        )
        assert text == (
            "Issue created successfully!\n" "Number: #5\n" "Title: New\n" "URL: https://git.example.com/o/r/issues/5"
        )

    def test_issue_model_reads_author(self):
        issue = Issue.from_dict(
            {"id": 1, "number": 3, "title": "t", "body": None, "user": {"id": 7, "login": "bob", "full_name": "Bob"}}
        )
        assert issue.body == ""
        assert issue.user is not None
        assert issue.user.login == "bob"


class TestFileFormatting:
    """Tests for file content output."""

    def test_decodes_utf8_exactly(self, b64):
        original = "héllo wörld\n— ✓ 日本語\n"
        text = format_file_content({"content": b64(original), "size": 28}, "notes.txt", "main")
        assert text == f"File: notes.txt (branch: main)\nSize: 28 bytes\n\nContent:\n```\n{original}\n```"

    def test_decodes_wrapped_base64(self, b64):
        original = "line\n" * 40
        encoded = b64(original)
        wrapped = "\n".join(encoded[i : i + 60] for i in range(0, len(encoded), 60))
        assert FileContent(content=wrapped, size=len(original)).decoded_text() == original

    def test_invalid_utf8_is_replaced(self):
        file = FileContent(content="/w==", size=1)  # single 0xff byte
        assert file.decoded_text() == "�"
