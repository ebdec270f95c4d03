"""Payment gateway lesson: template method steps behind a retrying proxy."""

from .gateway import (
    PaymentGateway,
    PaymentRequest,
    PaymentResult,
    PaymentStatus,
    PaytmGateway,
    RazorpayGateway,
)
from .proxy import PaymentGatewayProxy
from .service import PaymentService

__all__ = [
    "PaymentRequest",
    "PaymentResult",
    "PaymentStatus",
    "PaymentGateway",
    "PaytmGateway",
    "RazorpayGateway",
    "PaymentGatewayProxy",
    "PaymentService",
]
