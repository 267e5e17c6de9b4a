"""Tests for the ghcache.report module."""

from datetime import datetime, timezone

import pytest

from ghcache.models import Issue, Milestone, User
from ghcache.report import render_issue, render_issues, render_milestone, render_milestones


def _issue(number: int, assignee: User | None = None) -> Issue:
    return Issue(
        number=number,
        id=number * 10,
        html_url=f"https://github.com/o/r/issues/{number}",
        title=f"Issue {number}",
        state="open",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        user=User(login="alice", html_url="https://github.com/alice"),
        assignee=assignee,
    )


class TestRenderIssue:
    """Tests for render_issue."""

    def test_unassigned(self):
        assert render_issue(_issue(1)) == (
            "------------------\n"
            "Number:   1\n"
            "Title:    Issue 1\n"
            "State:    open\n"
            "User:     alice\n"
            "Assignee: Unassigned\n"
        )

    def test_assigned(self):
        bob = User(login="bob", html_url="https://github.com/bob")
        assert "Assignee: bob\n" in render_issue(_issue(2, assignee=bob))


class TestRenderIssues:
    """Tests for render_issues."""

    def test_default_limit_selects_first_ten(self):
        issues = [_issue(number) for number in range(1, 16)]

        text = render_issues(issues)

        assert text.count("------------------") == 10
        assert "Number:   10\n" in text
        assert "Number:   11\n" not in text

    def test_limit_larger_than_sequence(self):
        text = render_issues([_issue(1), _issue(2)], limit=10)
        assert text.count("------------------") == 2

    def test_no_limit(self):
        text = render_issues([_issue(n) for n in range(20)], limit=None)
        assert text.count("------------------") == 20

    def test_preserves_order(self):
        text = render_issues([_issue(3), _issue(1)])
        assert text.index("Number:   3") < text.index("Number:   1")

    def test_negative_limit(self):
        with pytest.raises(ValueError):
            render_issues([_issue(1)], limit=-1)


class TestRenderMilestone:
    """Tests for render_milestone and render_milestones."""

    def test_render(self):
        milestone = Milestone(
            number=3,
            id=30,
            html_url="https://github.com/o/r/milestone/3",
            title="v1.0",
            description="First release",
            creator=User(login="carol", html_url="https://github.com/carol"),
            state="closed",
            created_at=datetime(2024, 3, 4, 5, 6, 7, tzinfo=timezone.utc),
        )

        assert render_milestone(milestone) == (
            "------------------\n"
            "Number:      3\n"
            "Title:       v1.0\n"
            "Description: First release\n"
            "State:       closed\n"
            "Creator:     carol\n"
            "Created:     2024-03-04T05:06:07+00:00\n"
        )
        assert render_milestones([milestone, milestone]).count("Number:      3") == 2

    def test_empty(self):
        assert render_milestones([]) == ""
