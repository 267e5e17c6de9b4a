"""Package implementing the write-once resource cache.

The `RepoCache` class fetches the resources of a repository from the
remote API and stores the raw response bodies on disk.

Cache Layout
------------

Each resource is stored as a single JSON document:

    $cachedir/<owner>/<name>/<kind>.json

where `<kind>` is the value of a `ResourceKind` (e.g., `issues`). The
bytes are exactly the ones received from the remote API.

By default $cachedir is `data` in the current working directory.

Files are written to a temporary directory next to their final location
and atomically renamed into place, so a failed download never leaves a
truncated document behind. Once a document exists it is served forever:
there is no expiry and no revalidation.
"""

from .cache import RepoCache
from .entry import CacheEntry, ResourceKind, validate_repo

__all__ = [
    "CacheEntry",
    "RepoCache",
    "ResourceKind",
    "validate_repo",
]
