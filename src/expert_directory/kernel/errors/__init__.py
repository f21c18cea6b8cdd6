"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    ├── ApplicationError     (application.py)
    └── RequestError         (request.py)
        ├── CancelledRequest
        ├── NetworkError
        └── ServerError
            └── MalformedResponse
"""

from expert_directory.kernel.errors.application import ApplicationError
from expert_directory.kernel.errors.base import BaseError
from expert_directory.kernel.errors.domain import DomainError, ValidationError
from expert_directory.kernel.errors.request import (
    CancelledRequest,
    MalformedResponse,
    NetworkError,
    RequestError,
    ServerError,
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
