"""
Payment gateways built on a template method.

``process_payment`` fixes the order of the steps (validate, initiate,
confirm) while each gateway fills the steps in. A failed validation is
final; a failed initiation or confirmation is reported as a transient
gateway error so that a caller can retry it.
"""

import random
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import structlog

from ..config.defaults import PaymentParams
from ..errors import TransientGatewayError

logger = structlog.get_logger(__name__)


class PaymentStatus(str, Enum):
    """Outcome of a payment attempt."""
    SUCCESS = "success"
    REJECTED = "rejected"


@dataclass(frozen=True)
class PaymentRequest:
    sender: str
    receiver: str
    amount: float
    currency: str = "INR"


@dataclass
class PaymentResult:
    """Result of processing one payment request."""
    status: PaymentStatus
    gateway: str
    payment_id: Optional[str] = None
    message: Optional[str] = None
    attempt_count: int = 1


class PaymentGateway(ABC):
    """Template for a gateway: subclasses implement the three steps."""

    name: str = "gateway"

    def __init__(
        self,
        params: Optional[PaymentParams] = None,
        failure_rate: float = 0.0,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.params = params or PaymentParams()
        self.failure_rate = failure_rate
        self._rng = rng or random.Random()

    def process_payment(self, request: PaymentRequest) -> PaymentResult:
        if not self.validate_payment(request):
            logger.warning(
                "Payment rejected during validation",
                gateway=self.name,
                sender=request.sender,
                amount=request.amount
            )
            return PaymentResult(
                status=PaymentStatus.REJECTED,
                gateway=self.name,
                message=f"[{self.name}] Validation failed for {request.sender}"
            )

        payment_id = self.initiate_payment(request)
        if payment_id is None:
            raise TransientGatewayError(f"[{self.name}] Could not initiate payment",
                                        gateway=self.name)

        if not self.confirm_payment(payment_id):
            raise TransientGatewayError(f"[{self.name}] Could not confirm payment {payment_id}",
                                        gateway=self.name)

        return PaymentResult(
            status=PaymentStatus.SUCCESS,
            gateway=self.name,
            payment_id=payment_id,
            message=(f"[{self.name}] Paid {request.amount:.2f} {request.currency} "
                     f"from {request.sender} to {request.receiver}")
        )

    @abstractmethod
    def validate_payment(self, request: PaymentRequest) -> bool:
        pass

    @abstractmethod
    def initiate_payment(self, request: PaymentRequest) -> Optional[str]:
        """Start the payment and return its id, or None on failure."""

    @abstractmethod
    def confirm_payment(self, payment_id: str) -> bool:
        pass

    def _flaky(self) -> bool:
        """True when the simulated network should fail this step."""
        return self._rng.random() < self.failure_rate


class PaytmGateway(PaymentGateway):
    name = "paytm"

    def validate_payment(self, request: PaymentRequest) -> bool:
        return request.amount >= self.params.min_amount

    def initiate_payment(self, request: PaymentRequest) -> Optional[str]:
        if self._flaky():
            return None
        return f"paytm-{uuid.uuid4().hex[:12]}"

    def confirm_payment(self, payment_id: str) -> bool:
        return True


class RazorpayGateway(PaymentGateway):
    name = "razorpay"

    def validate_payment(self, request: PaymentRequest) -> bool:
        # Razorpay only settles in the configured currency
        return (request.amount >= self.params.min_amount
                and request.currency == self.params.currency)

    def initiate_payment(self, request: PaymentRequest) -> Optional[str]:
        return f"rzp-{uuid.uuid4().hex[:12]}"

    def confirm_payment(self, payment_id: str) -> bool:
        return not self._flaky()
