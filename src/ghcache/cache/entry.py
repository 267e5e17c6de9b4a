"""Module defining the on-disk layout of the resource cache."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Final

from filelock import BaseFileLock, FileLock

from ..errors import CacheIOError, PathError

CACHE_FILE_SUFFIX: Final[str] = ".json"
CACHE_LOCK_SUFFIX: Final[str] = ".lock"

_SEGMENT_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


class ResourceKind(str, Enum):
    """Enumerate the cacheable sub-resources of a repository."""

    ISSUES = "issues"
    MILESTONES = "milestones"

    @property
    def endpoint(self) -> str:
        """Return the suffix appended to the repository URI."""
        return self.value

    @property
    def filename(self) -> str:
        """Return the name of the cache file inside the repository directory."""
        return f"{self.value}{CACHE_FILE_SUFFIX}"


def validate_repo(repo: str) -> str:
    """
    Ensure that the repository identifier is safe to use as a relative path.

    The identifier is a sequence of `/`-separated segments (e.g., `owner/name`)
    and none of them may be empty, `.` or `..`.

    Raises:
        PathError: if the identifier is not valid.
    """
    if not repo or repo.startswith("/"):
        raise PathError(f"Invalid repository identifier: {repo!r}")
    for segment in repo.split("/"):
        if segment in (".", "..") or not _SEGMENT_RE.match(segment):
            raise PathError(f"Invalid repository identifier: {repo!r}")
    return repo


@dataclass(frozen=True, kw_only=True)
class CacheEntry:
    """
    Reference to the cache file holding one resource of one repository.

    The entry is lazy: the file may not exist until the owning
    RepoCache materializes it.

    Attributes:
        cache_dir: the Path that points to the cache root
        repo: the repository identifier (e.g., `owner/name`)
        kind: the resource kind
    """

    cache_dir: Path
    repo: str
    kind: ResourceKind

    def __post_init__(self):
        validate_repo(self.repo)

    def dir_path(self) -> Path:
        """Returns the directory containing the cache files of the repository."""
        return self.cache_dir.joinpath(*PurePosixPath(self.repo).parts)

    def file_path(self) -> Path:
        """Returns the path to the cached JSON document."""
        return self.dir_path() / self.kind.filename

    def lock(self) -> BaseFileLock:
        """Return a FileLock guarding the materialization of the entry."""
        lock_file_path = self.dir_path() / f".{self.kind.filename}{CACHE_LOCK_SUFFIX}"
        return FileLock(lock_file_path)

    def exists(self) -> bool:
        """
        Return True if the cache file exists, False otherwise.

        Raises:
            CacheIOError: if the file cannot be checked for a reason
                other than not existing (e.g., permission denied).
        """
        try:
            self.file_path().stat()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise CacheIOError(f"cannot stat {self.file_path()}: {exc}") from exc
        return True

    def __str__(self) -> str:
        return f"{self.repo}/{self.kind.filename}"
