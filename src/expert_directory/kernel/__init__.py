"""Kernel – framework-agnostic building blocks."""

from expert_directory.kernel.errors import (
    ApplicationError,
    BaseError,
    CancelledRequest,
    DomainError,
    MalformedResponse,
    NetworkError,
    RequestError,
    ServerError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "CancelledRequest",
    "DomainError",
    "MalformedResponse",
    "NetworkError",
    "RequestError",
    "ServerError",
    "ValidationError",
]
