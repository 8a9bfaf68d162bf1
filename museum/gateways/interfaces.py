"""Payment gateway interface.

Gateways must be swappable; the payment service only sees this contract.
"""

from abc import ABC, abstractmethod
from typing import Any


class PaymentGatewayError(Exception):
    """Raised when the gateway rejects a request or cannot be reached."""


class PaymentGateway(ABC):
    @abstractmethod
    def create_order(self, amount_minor: int, currency: str, receipt: str) -> dict[str, Any]:
        """Create a payment order and return the gateway's order document.

        Raises:
            PaymentGatewayError: On any transport or gateway failure.
        """
        ...

    def close(self) -> None:
        """Release any connection resources."""
