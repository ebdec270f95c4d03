"""
Recovery strategy classifications for error handling.

These mixins help categorize errors by their recovery characteristics
and guide the error handling strategy.
"""

from typing import Optional


class RecoverableError(Exception):
    """Mixin for errors that can be recovered from automatically."""

    def __init__(self, message: str, retry_count: int = 0,
                 max_retries: int = 3, **kwargs):
        super().__init__(message)
        self.retry_count = retry_count
        self.max_retries = max_retries
        self.recoverable = True


class TransientGatewayError(RecoverableError):
    """Payment gateway hiccup that is worth retrying."""

    def __init__(self, message: str, gateway: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.gateway = gateway
