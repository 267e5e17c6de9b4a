"""Module rendering plain-text reports of issues and milestones."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .models import Issue, Milestone

SEPARATOR = "------------------"

DEFAULT_ISSUES_LIMIT = 10


def render_issue(issue: Issue) -> str:
    """Render a single issue as a text block."""
    assignee = issue.assignee.login if issue.assignee is not None else "Unassigned"
    return (
        f"{SEPARATOR}\n"
        f"Number:   {issue.number}\n"
        f"Title:    {issue.title}\n"
        f"State:    {issue.state}\n"
        f"User:     {issue.user.login}\n"
        f"Assignee: {assignee}\n"
    )


def render_milestone(milestone: Milestone) -> str:
    """Render a single milestone as a text block."""
    return (
        f"{SEPARATOR}\n"
        f"Number:      {milestone.number}\n"
        f"Title:       {milestone.title}\n"
        f"Description: {milestone.description}\n"
        f"State:       {milestone.state}\n"
        f"Creator:     {milestone.creator.login}\n"
        f"Created:     {milestone.created_at.isoformat()}\n"
    )


def render_issues(issues: Sequence[Issue], limit: int | None = DEFAULT_ISSUES_LIMIT) -> str:
    """
    Render the first `limit` issues, in order.

    A limit of None renders all the issues. A limit larger than
    the number of issues renders all of them.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    selected = issues if limit is None else issues[:limit]
    return "".join(render_issue(issue) for issue in selected)


def render_milestones(milestones: Iterable[Milestone]) -> str:
    """Render all the milestones, in order."""
    return "".join(render_milestone(milestone) for milestone in milestones)
