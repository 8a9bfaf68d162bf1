"""Razorpay Orders API client."""

from typing import Any

import requests
import structlog

from museum.gateways.interfaces import PaymentGateway, PaymentGatewayError

logger = structlog.get_logger(__name__)

DEFAULT_BASE_URL = "https://api.razorpay.com/v1"


class RazorpayGateway(PaymentGateway):
    """Creates orders through ``POST /orders`` with HTTP basic auth."""

    def __init__(
        self,
        key_id: str,
        key_secret: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.auth = (key_id, key_secret)

    def create_order(self, amount_minor: int, currency: str, receipt: str) -> dict[str, Any]:
        payload = {"amount": amount_minor, "currency": currency, "receipt": receipt}
        try:
            response = self._session.post(
                f"{self._base_url}/orders",
                json=payload,
                headers={"Accept": "application/json"},
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            logger.error("razorpay.unreachable", receipt=receipt, error=str(exc))
            raise PaymentGatewayError(f"Payment gateway unreachable: {exc}") from exc

        if response.status_code >= 400:
            message = _error_description(response)
            logger.error(
                "razorpay.order_rejected",
                receipt=receipt,
                status_code=response.status_code,
                error=message,
            )
            raise PaymentGatewayError(message)

        try:
            return response.json()
        except ValueError as exc:
            raise PaymentGatewayError("Payment gateway returned invalid JSON") from exc

    def close(self) -> None:
        self._session.close()


def _error_description(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return f"Payment gateway error (HTTP {response.status_code})"
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("description"):
        return str(error["description"])
    return f"Payment gateway error (HTTP {response.status_code})"
