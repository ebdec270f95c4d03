"""Entry point that picks a gateway by name and pays through a retrying proxy."""

import time
from typing import Callable, Optional

import structlog

from ..config.defaults import PaymentParams
from ..errors import UnknownVariantError
from .gateway import PaymentGateway, PaymentRequest, PaymentResult, PaytmGateway, RazorpayGateway
from .proxy import PaymentGatewayProxy

logger = structlog.get_logger(__name__)


class PaymentService:
    def __init__(
        self,
        params: Optional[PaymentParams] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.params = params or PaymentParams()
        self._sleep = sleep
        self._proxies: dict[str, PaymentGatewayProxy] = {}
        self.register_gateway(PaytmGateway(self.params))
        self.register_gateway(RazorpayGateway(self.params))

    def register_gateway(self, gateway: PaymentGateway) -> None:
        self._proxies[gateway.name] = PaymentGatewayProxy(
            gateway,
            max_retries=self.params.max_retries,
            retry_delay=self.params.retry_delay_seconds,
            sleep=self._sleep,
        )

    def gateways(self) -> list[str]:
        return sorted(self._proxies)

    def get_gateway(self, name: str) -> PaymentGatewayProxy:
        proxy = self._proxies.get(name.lower())
        if proxy is None:
            raise UnknownVariantError(
                f"Unknown payment gateway: {name}",
                kind="gateway",
                requested=name,
                available=self.gateways()
            )
        return proxy

    def pay(self, gateway_name: str, request: PaymentRequest) -> PaymentResult:
        proxy = self.get_gateway(gateway_name)
        logger.info("Processing payment", gateway=proxy.name, amount=request.amount)
        return proxy.process_payment(request)
