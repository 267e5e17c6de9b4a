"""Errors raised by the ghcache library."""


class CacheError(RuntimeError):
    """Base class for all the ghcache errors."""


class PathError(CacheError):
    """The cache path cannot be resolved or its directories cannot be created."""


class TransportError(CacheError):
    """The remote request could not be completed."""


class CacheIOError(CacheError):
    """Reading or writing a cache file failed after resolving its path."""


class DecodeError(CacheError):
    """The cached bytes are not a JSON array of the expected shape."""
