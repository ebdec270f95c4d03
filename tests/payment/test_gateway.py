"""Tests for payment gateways and the retrying proxy."""

import random
from typing import Optional

import pytest

from lld_app.config.defaults import PaymentParams
from lld_app.errors import InvalidAmountError, PaymentFailedError
from lld_app.payment.gateway import (
    PaymentGateway,
    PaymentRequest,
    PaymentStatus,
    PaytmGateway,
    RazorpayGateway,
)
from lld_app.payment.proxy import PaymentGatewayProxy


class FlakyGateway(PaymentGateway):
    """Fails to initiate a fixed number of times, then succeeds."""

    name = "flaky"

    def __init__(self, failures: int, params: Optional[PaymentParams] = None) -> None:
        super().__init__(params)
        self.failures = failures
        self.attempts = 0

    def validate_payment(self, request: PaymentRequest) -> bool:
        return request.amount > 0

    def initiate_payment(self, request: PaymentRequest) -> Optional[str]:
        self.attempts += 1
        if self.attempts <= self.failures:
            return None
        return "flaky-1"

    def confirm_payment(self, payment_id: str) -> bool:
        return True


@pytest.fixture
def request_100() -> PaymentRequest:
    return PaymentRequest(sender="Aditya", receiver="Shubham", amount=100.0)


class TestTemplateMethod:
    """Validate, initiate, confirm in that order."""

    def test_paytm_success(self, request_100):
        result = PaytmGateway().process_payment(request_100)
        assert result.status == PaymentStatus.SUCCESS
        assert result.payment_id.startswith("paytm-")
        assert result.message == "[paytm] Paid 100.00 INR from Aditya to Shubham"

    def test_validation_rejects_small_amount(self):
        result = PaytmGateway(PaymentParams(min_amount=10.0)).process_payment(
            PaymentRequest("a", "b", 5.0)
        )
        assert result.status == PaymentStatus.REJECTED
        assert result.payment_id is None

    def test_razorpay_rejects_foreign_currency(self):
        result = RazorpayGateway().process_payment(
            PaymentRequest("a", "b", 50.0, currency="USD")
        )
        assert result.status == PaymentStatus.REJECTED

    def test_step_order(self, request_100):
        calls = []

        class Recording(PaytmGateway):
            def validate_payment(self, request):
                calls.append("validate")
                return super().validate_payment(request)

            def initiate_payment(self, request):
                calls.append("initiate")
                return super().initiate_payment(request)

            def confirm_payment(self, payment_id):
                calls.append("confirm")
                return super().confirm_payment(payment_id)

        Recording().process_payment(request_100)
        assert calls == ["validate", "initiate", "confirm"]


class TestPaymentGatewayProxy:
    """Transient failures are retried, rejections are not."""

    def test_succeeds_after_retries(self, request_100):
        delays = []
        gateway = FlakyGateway(failures=2)
        proxy = PaymentGatewayProxy(gateway, max_retries=3, retry_delay=0.25, sleep=delays.append)

        result = proxy.process_payment(request_100)

        assert result.status == PaymentStatus.SUCCESS
        assert result.attempt_count == 3
        assert delays == [0.25, 0.25]

    def test_gives_up_after_max_retries(self, request_100):
        gateway = FlakyGateway(failures=10)
        proxy = PaymentGatewayProxy(gateway, max_retries=2, retry_delay=0, sleep=lambda _: None)

        with pytest.raises(PaymentFailedError) as exc_info:
            proxy.process_payment(request_100)

        assert exc_info.value.attempts == 3
        assert exc_info.value.gateway == "flaky"
        assert gateway.attempts == 3
        assert proxy.get_stats()["failure_count"] == 1

    def test_rejection_is_not_retried(self):
        gateway = FlakyGateway(failures=0)
        proxy = PaymentGatewayProxy(gateway, max_retries=3, sleep=lambda _: None)

        result = proxy.process_payment(PaymentRequest("a", "b", -1.0))

        assert result.status == PaymentStatus.REJECTED
        assert gateway.attempts == 0

    def test_flaky_razorpay_confirmation(self, request_100):
        gateway = RazorpayGateway(failure_rate=1.0, rng=random.Random(1))
        proxy = PaymentGatewayProxy(gateway, max_retries=1, sleep=lambda _: None)

        with pytest.raises(PaymentFailedError):
            proxy.process_payment(request_100)

    def test_stats(self, request_100):
        proxy = PaymentGatewayProxy(PaytmGateway(), sleep=lambda _: None)
        proxy.process_payment(request_100)
        assert proxy.get_stats() == {
            "gateway": "paytm",
            "success_count": 1,
            "failure_count": 0,
            "rejected_count": 0,
            "success_rate": 1.0,
        }

    def test_rejection_is_not_counted_as_success(self, request_100):
        proxy = PaymentGatewayProxy(PaytmGateway(), sleep=lambda _: None)
        proxy.process_payment(request_100)

        result = proxy.process_payment(PaymentRequest("a", "b", -5.0))

        assert result.status == PaymentStatus.REJECTED
        stats = proxy.get_stats()
        assert stats["success_count"] == 1
        assert stats["rejected_count"] == 1
        assert stats["failure_count"] == 0
        assert stats["success_rate"] == 0.5

    def test_negative_max_retries_rejected(self):
        with pytest.raises(InvalidAmountError) as exc_info:
            PaymentGatewayProxy(PaytmGateway(), max_retries=-1)
        assert exc_info.value.amount == -1
