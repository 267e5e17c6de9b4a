"""Helpers to log command failures and convert them to exit codes."""

from __future__ import annotations

from ..errors import CacheError
from .logger import log


class Interceptor:
    """
    Context manager to intercept cache errors.

    Use as a context manager:

        interceptor = Interceptor()
        with interceptor:
            cache.issues()
        sys.exit(interceptor.exitcode())

    CacheError exceptions are logged as warnings and suppressed, so
    the caller can continue with the next operation. Any other
    exception propagates. The failed field tells you whether there
    were any intercepted errors.
    """

    def __init__(self):
        self.failed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            return False
        if not issubclass(exc_type, CacheError):
            return False
        log.warning("operation failed: %s", exc_value)
        self.failed = True
        return True  # suppress the exception

    def exitcode(self) -> int:
        """
        Return the exitcode to pass to sys.exit.

        Zero on success, 1 on failure.
        """
        return int(self.failed)
