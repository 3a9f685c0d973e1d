"""Custom exceptions for ytm_innertube.

All exceptions include an HTTP status_code attribute so callers serving
results over HTTP can map failures without inspecting types.

Only transport failures and top-level page failures are raised. A single
item that cannot be resolved is dropped, never raised.
"""

from enum import StrEnum


class TransportErrorKind(StrEnum):
    """Classification of a failed InnerTube request."""

    NETWORK = "network"
    HTTP_STATUS = "http_status"
    MALFORMED_ENVELOPE = "malformed_envelope"


class InnerTubeError(Exception):
    """Base exception for ytm_innertube.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class TransportError(InnerTubeError):
    """An InnerTube request did not produce a usable JSON envelope.

    Attributes:
        kind: Which stage of the request failed.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)
    kind: TransportErrorKind = TransportErrorKind.NETWORK


class NetworkError(TransportError):
    """Connection, DNS, TLS or timeout failure before a response arrived."""

    status_code: int = 503  # Service Unavailable
    kind = TransportErrorKind.NETWORK


class HTTPStatusError(TransportError):
    """The server answered with a 4xx or 5xx status.

    Attributes:
        http_status: Status code returned by the server.
    """

    kind = TransportErrorKind.HTTP_STATUS

    def __init__(self, message: str, http_status: int) -> None:
        self.http_status = http_status
        super().__init__(message)


class MalformedResponseError(TransportError):
    """The response body is not a JSON object."""

    kind = TransportErrorKind.MALFORMED_ENVELOPE


class PageParseError(InnerTubeError):
    """A response is missing structure the whole page depends on.

    Raised when a page header (album title, playlist header, ...) cannot be
    located. Individual items that fail to resolve never raise this.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)


class AuthenticationRequiredError(InnerTubeError):
    """Operation needs a logged-in request context.

    Raised when an account-bound operation is called without a cookie
    carrying a SAPISID.
    """

    status_code: int = 401  # Unauthorized


class CancellationError(InnerTubeError):
    """Operation was cancelled.

    Raised when an aggregation is abandoned via a CancelToken.
    """

    status_code: int = 499  # Client Closed Request (nginx convention)
