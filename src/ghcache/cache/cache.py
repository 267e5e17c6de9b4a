"""Module containing the RepoCache implementation."""

from __future__ import annotations

import logging
import os
from contextlib import closing
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import BinaryIO

from tqdm import tqdm

from ..config import DEFAULT_API_BASE, DEFAULT_CHUNK_SIZE, cache_dir_or_default
from ..errors import CacheIOError, PathError
from ..models import Issue, Milestone, decode_issues, decode_milestones
from ..transport import ByteStream, RequestsTransport, Transport
from .entry import CacheEntry, ResourceKind, validate_repo

log = logging.getLogger("ghcache.cache")


class RepoCache:
    """
    Write-once cache for the resources of a single repository.

    The first fetch of a resource streams the response body to
    $cachedir/<repo>/<kind>.json and every subsequent fetch reads
    that file without touching the network. Files are never
    revalidated, refreshed or deleted.
    """

    def __init__(
        self,
        repo: str,
        *,
        cache_dir: str | Path | None = None,
        api_base: str = DEFAULT_API_BASE,
        transport: Transport | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        progress: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize the cache for the given repository.

        Parameters:
            repo: repository identifier (e.g., `owner/name`).
            cache_dir: cache root directory. If None, defaults
                to `data/` in current working directory.
            api_base: base URL of the remote API.
            transport: optional Transport (default: RequestsTransport).
            chunk_size: size of the buffer used to copy the response.
            progress: whether to show a progress bar while downloading.
            logger: optional logger (default: the `ghcache.cache` logger).

        Raises:
            PathError: if repo is not a valid identifier.
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self.repo = validate_repo(repo)
        self.cache_dir = cache_dir_or_default(cache_dir)
        self.api_base = api_base.rstrip("/")
        self.transport = transport if transport is not None else RequestsTransport()
        self.chunk_size = chunk_size
        self.progress = progress
        self.log = logger if logger is not None else log

    def entry(self, kind: ResourceKind) -> CacheEntry:
        """Return the (possibly not yet materialized) entry for kind."""
        return CacheEntry(cache_dir=self.cache_dir, repo=self.repo, kind=ResourceKind(kind))

    def uri_for(self, kind: ResourceKind) -> str:
        """Return the remote URI serving the given kind."""
        return f"{self.api_base}/repos/{self.repo}/{ResourceKind(kind).endpoint}"

    def fetch(self, kind: ResourceKind) -> bytes:
        """
        Return the raw bytes of the given resource, downloading
        them the first time they are requested.

        Raises:
            PathError: if the cache directory cannot be created.
            TransportError: if the download fails.
            CacheIOError: if reading or writing the cache file fails.
        """
        entry = self.materialize(kind)
        try:
            return entry.file_path().read_bytes()
        except OSError as exc:
            raise CacheIOError(f"cannot read {entry.file_path()}: {exc}") from exc

    def issues(self) -> list[Issue]:
        """Fetch and decode the repository issues."""
        return decode_issues(self.fetch(ResourceKind.ISSUES))

    def milestones(self) -> list[Milestone]:
        """Fetch and decode the repository milestones."""
        return decode_milestones(self.fetch(ResourceKind.MILESTONES))

    def materialize(self, kind: ResourceKind) -> CacheEntry:
        """
        Ensure the cache file for kind exists on disk and return its entry.

        This method does not read the file back, so the memory used
        is bounded by chunk_size regardless of the resource size.
        """
        entry = self.entry(kind)
        if entry.exists():
            self.log.debug("cache hit for %s", entry)
            return entry

        self.log.debug("cache miss for %s", entry)
        try:
            entry.dir_path().mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PathError(f"cannot create {entry.dir_path()}: {exc}") from exc

        # Serialize downloads of the same entry and check again since
        # someone else may have downloaded it while we were waiting.
        try:
            lock = entry.lock()
            lock.acquire()
        except OSError as exc:
            raise CacheIOError(f"cannot lock {entry}: {exc}") from exc
        try:
            if not entry.exists():
                self._download(entry)
        finally:
            lock.release()
        return entry

    def _download(self, entry: CacheEntry) -> None:
        uri = self.uri_for(entry.kind)
        dest_path = entry.file_path()
        self.log.info("fetching %s... start", entry)
        try:
            # Operate inside a temporary directory in the destination directory so
            # `os.replace()` is atomic and a failed copy never leaves dest_path behind.
            with TemporaryDirectory(dir=dest_path.parent) as tmp_dir:
                tmp_file = Path(tmp_dir) / dest_path.name
                self._write_tmp(uri, tmp_file)
                os.replace(tmp_file, dest_path)
        except OSError as exc:
            self.log.warning("fetching %s... failure: %s", entry, exc)
            raise CacheIOError(f"cannot write {dest_path}: {exc}") from exc
        except Exception as exc:
            self.log.warning("fetching %s... failure: %s", entry, exc)
            raise
        self.log.info("fetching %s... ok", entry)

    def _write_tmp(self, uri: str, tmp_file: Path) -> None:
        with open(tmp_file, "wb") as filep:
            with closing(self.transport.get_stream(uri)) as stream:
                self._copy(stream, filep, desc=tmp_file.name)

    def _copy(self, stream: ByteStream, filep: BinaryIO, *, desc: str) -> None:
        with tqdm(
            unit="B",
            unit_scale=True,
            unit_divisor=1024,
            desc=desc,
            leave=True,
            disable=not self.progress,
        ) as pbar:
            while chunk := stream.read(self.chunk_size):
                filep.write(chunk)
                pbar.update(len(chunk))
