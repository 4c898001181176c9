"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── InvalidTimeOffsetError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── ConnectionError
        ├── TimeoutError
        ├── SerializationError
        └── ExternalServiceError
            └── JsonRpcError
"""

from dcnt_testkit.kernel.errors.application import ApplicationError
from dcnt_testkit.kernel.errors.base import BaseError
from dcnt_testkit.kernel.errors.domain import (
    DomainError,
    InvalidTimeOffsetError,
    ValidationError,
)
from dcnt_testkit.kernel.errors.infrastructure import (
    ConnectionError,
    ExternalServiceError,
    InfrastructureError,
    JsonRpcError,
    SerializationError,
    TimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConnectionError",
    "DomainError",
    "ExternalServiceError",
    "InfrastructureError",
    "InvalidTimeOffsetError",
    "JsonRpcError",
    "SerializationError",
    "TimeoutError",
    "ValidationError",
]
