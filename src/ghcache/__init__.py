"""Write-once local cache for GitHub repository resources.

This library fetches repository resources (issues, milestones) from the
GitHub REST API, stores the raw JSON bodies on disk on first access, and
serves every subsequent request from the local copy.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from .cache import CacheEntry, RepoCache, ResourceKind
from .errors import CacheError, CacheIOError, DecodeError, PathError, TransportError
from .models import Issue, Milestone, User, decode_issues, decode_milestones
from .transport import RequestsTransport

try:
    __version__ = version("ghcache")
except PackageNotFoundError:  # pragma: no cover - running from a source tree
    __version__ = "0.0.0"

logging.getLogger("ghcache").addHandler(logging.NullHandler())

__all__ = [
    "CacheEntry",
    "CacheError",
    "CacheIOError",
    "DecodeError",
    "Issue",
    "Milestone",
    "PathError",
    "RepoCache",
    "RequestsTransport",
    "ResourceKind",
    "TransportError",
    "User",
    "decode_issues",
    "decode_milestones",
    "__version__",
]
