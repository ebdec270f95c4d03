"""
Operation failure classifications.

These exceptions represent a lesson object refusing or failing to carry
out an otherwise well-formed request.
"""

from typing import Optional, Dict, Any


class OperationFailureError(Exception):
    """Base class for operations that could not be completed."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InsufficientNotesError(OperationFailureError):
    """The note chain cannot make up the requested amount."""

    def __init__(self, message: str, amount: Optional[int] = None,
                 remaining: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.amount = amount
        self.remaining = remaining


class AccessDeniedError(OperationFailureError):
    """A protection proxy rejected the caller."""

    def __init__(self, message: str, user: Optional[str] = None,
                 feature: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.user = user
        self.feature = feature


class PaymentFailedError(OperationFailureError):
    """A payment could not be completed after all attempts."""

    def __init__(self, message: str, gateway: Optional[str] = None,
                 payment_id: Optional[str] = None,
                 attempts: int = 0, **kwargs):
        super().__init__(message, **kwargs)
        self.gateway = gateway
        self.payment_id = payment_id
        self.attempts = attempts


class PersistenceError(OperationFailureError):
    """Database or file system persistence failures."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.target = target
