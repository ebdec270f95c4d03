"""
Request error classifications.

These exceptions describe requests that cannot be served as given but
that the caller can fix: a bad amount, an unknown product, a missing path.
"""

from typing import Optional, Dict, Any


class InvalidRequestError(Exception):
    """Base class for requests rejected because of their input."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidAmountError(InvalidRequestError):
    """Amount, index or count outside the accepted range."""

    def __init__(self, message: str, amount: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.amount = amount


class UnknownVariantError(InvalidRequestError):
    """A factory or selector was asked for a variant it does not know."""

    def __init__(self, message: str, kind: Optional[str] = None,
                 requested: Optional[str] = None,
                 available: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.kind = kind
        self.requested = requested
        self.available = available or []


class PathNotFoundError(InvalidRequestError):
    """A file-system path does not resolve to a folder."""

    def __init__(self, message: str, path: Optional[str] = None,
                 missing_segment: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
        self.missing_segment = missing_segment


class CommandNotAssignedError(InvalidRequestError):
    """A remote button was pressed with no command bound to it."""

    def __init__(self, message: str, slot: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.slot = slot
