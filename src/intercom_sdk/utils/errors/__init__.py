"""Exceções públicas do SDK."""

from .exceptions import (
    ApiError,
    ApiErrorDetail,
    DecodeFailure,
    IntercomError,
    InvalidArgument,
    NotFoundError,
    PaginationNotSupported,
    TransportFailure,
)

__all__ = [
    "ApiError",
    "ApiErrorDetail",
    "DecodeFailure",
    "IntercomError",
    "InvalidArgument",
    "NotFoundError",
    "PaginationNotSupported",
    "TransportFailure",
]
