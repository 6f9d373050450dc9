"""
Error types raised by the HN Reader client.
"""


class APIClientError(Exception):
    """Base class for every failure surfaced by the client."""

    retryable = False


class InvalidURLError(APIClientError):
    """A request URL could not be assembled."""


class DomainError(APIClientError):
    """The transport failed with an underlying cause."""

    retryable = True


class UnknownError(APIClientError):
    """The transport failed without reporting a cause."""

    retryable = True


class DecodingError(APIClientError):
    """A JSON response envelope could not be decoded."""


class ParsingError(APIClientError):
    """An HTML response could not be parsed as markup."""


class RequestCancelled(APIClientError):
    """A search request was superseded by a newer one."""
