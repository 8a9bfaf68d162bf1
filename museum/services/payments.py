"""Payment order creation.

Only the order is created here. Signature verification of the completed
payment belongs to the checkout client and the gateway callback.
"""

import time
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

import structlog

from museum.domain.errors import PaymentOrderValidationError, UpstreamFailureError
from museum.gateways.interfaces import PaymentGateway, PaymentGatewayError

logger = structlog.get_logger(__name__)

DEFAULT_CURRENCY = "INR"


class PaymentService:
    def __init__(
        self, gateway: PaymentGateway, clock: Callable[[], float] = time.time
    ) -> None:
        self._gateway = gateway
        self._clock = clock

    def create_order(self, amount: Decimal, currency: str = DEFAULT_CURRENCY) -> dict[str, Any]:
        """Create a gateway order for ``amount`` in major currency units.

        Raises:
            PaymentOrderValidationError: If amount is not positive.
            UpstreamFailureError: If the gateway fails.
        """
        amount = Decimal(amount)
        if amount <= 0:
            raise PaymentOrderValidationError("amount must be positive")
        amount_minor = int((amount * 100).to_integral_value(rounding=ROUND_HALF_UP))
        receipt = self.receipt_id()
        try:
            order = self._gateway.create_order(amount_minor, currency, receipt)
        except PaymentGatewayError as exc:
            logger.error("payment.order_failed", receipt=receipt, error=str(exc))
            raise UpstreamFailureError(str(exc)) from exc
        logger.info(
            "payment.order_created",
            receipt=receipt,
            amount_minor=amount_minor,
            currency=currency,
            order_id=order.get("id"),
        )
        return order

    def receipt_id(self) -> str:
        return f"rcpt_{int(self._clock() * 1000)}"
