"""
Typed entities decoded from the cached JSON documents.

Each cache file contains a JSON array exactly as returned by the
remote API. The decode_* functions turn such an array into a list
of frozen dataclasses, preserving the array order:

    >>> issues = decode_issues(cache.fetch(ResourceKind.ISSUES))
    >>> issues[0].number

Unknown JSON fields are ignored. A null `assignee` means the issue
is unassigned, while a null `body` or `description` decodes to "".
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, TypeVar

from dacite import Config, DaciteError, from_dict
from dateutil.parser import isoparse

from .errors import DecodeError


@dataclass(frozen=True, kw_only=True)
class User:
    """
    Account owning or referenced by an issue or milestone.

    Attributes:
        login: the account name.
        html_url: the account web page.
    """

    login: str
    html_url: str


@dataclass(frozen=True, kw_only=True)
class Issue:
    """
    Issue of a repository.

    Attributes:
        number: number unique within the repository.
        id: globally unique identifier.
        html_url: the issue web page.
        title: the issue title.
        state: either "open" or "closed".
        created_at: creation timestamp.
        user: the account that opened the issue.
        assignee: the assigned account or None when unassigned.
        body: the issue description.
    """

    number: int
    id: int
    html_url: str
    title: str
    state: str
    created_at: datetime
    user: User
    assignee: User | None = None
    body: str = ""


@dataclass(frozen=True, kw_only=True)
class Milestone:
    """
    Milestone of a repository.

    Attributes:
        number: number unique within the repository.
        id: globally unique identifier.
        html_url: the milestone web page.
        title: the milestone title.
        description: the milestone description.
        creator: the account that created the milestone.
        state: either "open" or "closed".
        created_at: creation timestamp.
    """

    number: int
    id: int
    html_url: str
    title: str
    creator: User
    state: str
    created_at: datetime
    description: str = ""


def _parse_timestamp(value: Any) -> Any:
    if not isinstance(value, str):
        return value  # dacite reports the wrong type
    return isoparse(value)


# GitHub sends null for an empty body or description.
_NULLABLE_STRING_FIELDS = ("body", "description")


def _null_strings_to_empty(value: dict[str, Any]) -> dict[str, Any]:
    return {
        key: "" if key in _NULLABLE_STRING_FIELDS and item is None else item
        for key, item in value.items()
    }


_DACITE_CONFIG = Config(type_hooks={datetime: _parse_timestamp})

T = TypeVar("T")


def _decode_array(data: bytes | str, data_class: type[T]) -> list[T]:
    try:
        values = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
        raise DecodeError(f"invalid JSON: {exc}") from exc

    if not isinstance(values, list):
        raise DecodeError(f"expected a JSON array, got {type(values).__name__}")

    results: list[T] = []
    for index, value in enumerate(values):
        if not isinstance(value, dict):
            raise DecodeError(f"element {index}: expected a JSON object")
        value = _null_strings_to_empty(value)
        try:
            results.append(from_dict(data_class, value, config=_DACITE_CONFIG))
        except (DaciteError, ValueError, OverflowError) as exc:
            raise DecodeError(f"element {index}: {exc}") from exc
    return results


def decode_issues(data: bytes | str) -> list[Issue]:
    """
    Decode a JSON array of issues.

    Raises:
        DecodeError: if data is not a JSON array of issue objects.
    """
    return _decode_array(data, Issue)


def decode_milestones(data: bytes | str) -> list[Milestone]:
    """
    Decode a JSON array of milestones.

    Raises:
        DecodeError: if data is not a JSON array of milestone objects.
    """
    return _decode_array(data, Milestone)
