"""Request errors – outcome of a remote directory search.

The query dispatcher is the only place that classifies a failure as
cancellation versus a genuine error; callers see one of the classes below
and never a raw transport exception.
"""

from __future__ import annotations

from typing import Any, ClassVar, Literal

from expert_directory.kernel.errors.base import BaseError

RequestCause = Literal["cancelled", "network", "server"]

DEFAULT_FAILURE_MESSAGE = "Failed to fetch the experts."


class RequestError(BaseError):
    """A search request did not produce a result page."""

    default_code = "request_error"
    cause_kind: ClassVar[RequestCause] = "server"

    @property
    def user_message(self) -> str:
        """Text suitable for a one-line notification."""
        return DEFAULT_FAILURE_MESSAGE

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["cause_kind"] = self.cause_kind
        return base


class CancelledRequest(RequestError):
    """The request was superseded or aborted; never shown to the user."""

    default_code = "request_cancelled"
    cause_kind = "cancelled"

    def __init__(self, message: str = "Search request cancelled", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class NetworkError(RequestError):
    """The endpoint could not be reached (DNS, connect, timeout, reset)."""

    default_code = "network_error"
    cause_kind = "network"


class ServerError(RequestError):
    """The endpoint answered with an error status or an unusable body."""

    default_code = "server_error"
    cause_kind = "server"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        server_detail: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.server_detail = server_detail

    @property
    def user_message(self) -> str:
        return self.server_detail or DEFAULT_FAILURE_MESSAGE


class MalformedResponse(ServerError):
    """The response body does not match the search contract."""

    default_code = "malformed_response"


__all__ = [
    "CancelledRequest",
    "DEFAULT_FAILURE_MESSAGE",
    "MalformedResponse",
    "NetworkError",
    "RequestCause",
    "RequestError",
    "ServerError",
]
