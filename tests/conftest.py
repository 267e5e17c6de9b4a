"""Shared pytest fixtures for ghcache tests."""

import json

import pytest


def _user(login: str) -> dict:
    return {"login": login, "html_url": f"https://github.com/{login}", "id": 1}


@pytest.fixture
def issues_payload() -> bytes:
    """Return a two-element issues array as sent by the GitHub API."""
    issues = [
        {
            "number": 1,
            "id": 10,
            "html_url": "https://github.com/o/r/issues/1",
            "title": "First issue",
            "state": "open",
            "created_at": "2024-01-02T03:04:05Z",
            "user": _user("alice"),
            "assignee": None,
            "body": "Something is broken",
            "labels": [],
        },
        {
            "number": 2,
            "id": 11,
            "html_url": "https://github.com/o/r/issues/2",
            "title": "Second issue",
            "state": "closed",
            "created_at": "2024-02-03T04:05:06Z",
            "user": _user("bob"),
            "assignee": _user("carol"),
            "body": None,
        },
    ]
    return json.dumps(issues).encode("utf-8")


@pytest.fixture
def milestones_payload() -> bytes:
    """Return a one-element milestones array as sent by the GitHub API."""
    milestones = [
        {
            "number": 3,
            "id": 30,
            "html_url": "https://github.com/o/r/milestone/3",
            "title": "v1.0",
            "description": "First release",
            "creator": _user("alice"),
            "state": "open",
            "created_at": "2024-03-04T05:06:07Z",
            "open_issues": 4,
        },
    ]
    return json.dumps(milestones).encode("utf-8")
