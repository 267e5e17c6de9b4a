"""Module containing the HTTP transport used to populate the cache."""

from __future__ import annotations

import logging
from typing import Protocol

import requests
import urllib3

from .config import DEFAULT_TIMEOUT
from .errors import TransportError

log = logging.getLogger("ghcache.transport")


class ByteStream(Protocol):
    """
    Readable stream of bytes returned by a Transport.

    Methods:
        read: return up to size bytes, or b"" at end of stream.
        close: release the underlying resources.
    """

    def read(self, size: int = -1, /) -> bytes: ...

    def close(self) -> None: ...


class Transport(Protocol):
    """
    Represent the possibility of streaming the body of a GET request.

    Methods:
        get_stream: issue a GET request for the given URI and return
            the response body as a ByteStream. Raises TransportError
            when the request cannot be dispatched.
    """

    def get_stream(self, uri: str) -> ByteStream: ...


class ResponseStream:
    """ByteStream reading the body of a streamed requests.Response."""

    def __init__(self, response: requests.Response):
        self.response = response

    def read(self, size: int = -1, /) -> bytes:
        try:
            return self.response.raw.read(None if size < 0 else size, decode_content=True)
        except (requests.RequestException, urllib3.exceptions.HTTPError, OSError) as exc:
            raise TransportError(f"cannot read body of {self.response.url}: {exc}") from exc

    def close(self) -> None:
        self.response.close()


class RequestsTransport:
    """
    Transport implementation using a requests.Session.

    No authentication headers and no pagination parameters are sent. The
    status code is not interpreted: error responses are returned like any
    other body (we only emit a warning).
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def get_stream(self, uri: str) -> ResponseStream:
        log.info("GET %s... start", uri)
        try:
            resp = self.session.get(uri, stream=True, timeout=self.timeout)
        except requests.RequestException as exc:
            log.warning("GET %s... failure: %s", uri, exc)
            raise TransportError(f"GET {uri}: {exc}") from exc
        if resp.status_code >= 400:
            # TODO: add an opt-in flag to reject error bodies instead of caching them.
            log.warning("GET %s... status %d, caching the body anyway", uri, resp.status_code)
        log.info("GET %s... ok", uri)
        return ResponseStream(resp)
