"""Kernel – framework-agnostic building blocks."""

from dcnt_testkit.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InvalidTimeOffsetError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidTimeOffsetError",
    "ValidationError",
]
