"""
HTTP transport for HN Reader.
"""

import threading
from typing import Optional

import requests

from .config import CHUNK_SIZE, DEFAULT_USER_AGENT, REQUEST_TIMEOUT
from .exceptions import DomainError, RequestCancelled, UnknownError
from .logging_config import get_logger


class CancelToken:
    """Flag shared between a caller and one in-flight fetch."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


class Transport:
    """Executes single GET requests and returns the raw body."""

    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": DEFAULT_USER_AGENT})
        self.logger = get_logger(self.__class__.__name__)

    def fetch(self, url: str, token: Optional[CancelToken] = None) -> bytes:
        """
        Fetch url once and return the response body.

        Raises:
            RequestCancelled: token was cancelled before the body was complete
            DomainError: the request failed with an underlying error
            UnknownError: the request produced neither a body nor an error
        """
        self._check(token, url)
        self.logger.debug(f"Fetching {url}")

        try:
            response = self.session.get(url, timeout=REQUEST_TIMEOUT, stream=True)
        except requests.RequestException as e:
            self._check(token, url)
            self.logger.error(f"Request to {url} failed: {e}")
            raise DomainError(str(e)) from e

        if response is None:
            raise UnknownError(f"No response and no error for {url}")

        try:
            response.raise_for_status()
            body = self._read(response, token, url)
        except requests.RequestException as e:
            self._check(token, url)
            self.logger.error(f"Request to {url} failed: {e}")
            raise DomainError(str(e)) from e
        finally:
            response.close()

        self._check(token, url)
        if body is None:
            raise UnknownError(f"No body and no error for {url}")

        self.logger.debug(f"Fetched {len(body)} bytes from {url}")
        return body

    def close(self) -> None:
        self.session.close()

    def _read(self, response, token: Optional[CancelToken], url: str) -> Optional[bytes]:
        chunks = response.iter_content(chunk_size=CHUNK_SIZE)
        if chunks is None:
            return None
        body = []
        for chunk in chunks:
            self._check(token, url)
            if chunk:
                body.append(chunk)
        return b"".join(body)

    def _check(self, token: Optional[CancelToken], url: str) -> None:
        if token is not None and token.cancelled:
            self.logger.debug(f"Request to {url} was cancelled")
            raise RequestCancelled(f"Request to {url} was superseded")
