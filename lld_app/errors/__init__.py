"""
Error classification for the lesson modules.

Request errors describe bad input that the caller can correct and retry.
Operation failures describe a lesson object refusing or failing to carry
out a request. Recovery categories tag how a caller should react.
"""

from .request_errors import (
    InvalidRequestError,
    InvalidAmountError,
    UnknownVariantError,
    PathNotFoundError,
    CommandNotAssignedError,
)
from .operation_failures import (
    OperationFailureError,
    InsufficientNotesError,
    AccessDeniedError,
    PaymentFailedError,
    PersistenceError,
)
from .recovery import (
    RecoverableError,
    TransientGatewayError,
)

__all__ = [
    # Request Errors
    "InvalidRequestError",
    "InvalidAmountError",
    "UnknownVariantError",
    "PathNotFoundError",
    "CommandNotAssignedError",
    # Operation Failures
    "OperationFailureError",
    "InsufficientNotesError",
    "AccessDeniedError",
    "PaymentFailedError",
    "PersistenceError",
    # Recovery Categories
    "RecoverableError",
    "TransientGatewayError",
]
