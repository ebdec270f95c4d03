"""Retrying proxy in front of a payment gateway."""

import time
from typing import Callable, Optional

import structlog

from ..errors import InvalidAmountError, PaymentFailedError, TransientGatewayError
from .gateway import PaymentGateway, PaymentRequest, PaymentResult, PaymentStatus

logger = structlog.get_logger(__name__)


class PaymentGatewayProxy:
    """
    Wraps a gateway and retries transient failures.

    A request is attempted at most ``max_retries + 1`` times. Rejections from
    validation are returned immediately; they are not retried.
    """

    def __init__(
        self,
        gateway: PaymentGateway,
        max_retries: int = 3,
        retry_delay: float = 0.5,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_retries < 0:
            raise InvalidAmountError(
                "max_retries must be non-negative",
                amount=max_retries,
                context={"gateway": gateway.name}
            )
        self.gateway = gateway
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self._sleep = sleep
        self._success_count = 0
        self._failure_count = 0
        self._rejected_count = 0

    @property
    def name(self) -> str:
        return self.gateway.name

    def process_payment(self, request: PaymentRequest) -> PaymentResult:
        attempt = 0
        last_error: Optional[TransientGatewayError] = None

        while attempt <= self.max_retries:
            try:
                result = self.gateway.process_payment(request)
                result.attempt_count = attempt + 1
                if result.status == PaymentStatus.SUCCESS:
                    self._success_count += 1
                else:
                    self._rejected_count += 1
                return result

            except TransientGatewayError as e:
                last_error = e

            attempt += 1

            if attempt <= self.max_retries:
                logger.warning(
                    "Payment attempt failed, retrying",
                    gateway=self.name,
                    attempt=attempt,
                    retry_delay=self.retry_delay,
                    error=str(last_error)
                )
                self._sleep(self.retry_delay)

        self._failure_count += 1
        logger.error(
            "Payment failed after retries",
            gateway=self.name,
            attempts=attempt,
            error=str(last_error)
        )
        raise PaymentFailedError(
            f"[{self.name}] Payment failed after {attempt} attempts: {last_error}",
            gateway=self.name,
            attempts=attempt,
            context={"sender": request.sender, "amount": request.amount}
        )

    def get_stats(self) -> dict[str, object]:
        total = self._success_count + self._failure_count + self._rejected_count
        return {
            "gateway": self.name,
            "success_count": self._success_count,
            "failure_count": self._failure_count,
            "rejected_count": self._rejected_count,
            "success_rate": self._success_count / total if total > 0 else 0.0,
        }
