"""Tests for the Razorpay gateway client against a mocked HTTP session."""

from unittest import mock

import pytest
import requests

from museum.gateways.interfaces import PaymentGatewayError
from museum.gateways.razorpay import RazorpayGateway


def response(status_code: int, body=None) -> mock.Mock:
    resp = mock.Mock(status_code=status_code)
    if isinstance(body, Exception):
        resp.json.side_effect = body
    else:
        resp.json.return_value = body
    return resp


@pytest.fixture
def session() -> mock.Mock:
    return mock.Mock(spec=requests.Session)


def test_create_order_posts_to_orders_endpoint(session):
    session.post.return_value = response(200, {"id": "order_1", "amount": 35000})
    gateway = RazorpayGateway("key", "secret", base_url="https://pay.test/v1/", session=session)

    order = gateway.create_order(35000, "INR", "rcpt_1")

    assert order == {"id": "order_1", "amount": 35000}
    assert session.auth == ("key", "secret")
    session.post.assert_called_once_with(
        "https://pay.test/v1/orders",
        json={"amount": 35000, "currency": "INR", "receipt": "rcpt_1"},
        headers={"Accept": "application/json"},
        timeout=10.0,
    )


def test_rejected_order_uses_gateway_description(session):
    session.post.return_value = response(
        401, {"error": {"code": "BAD_REQUEST_ERROR", "description": "Authentication failed"}}
    )
    gateway = RazorpayGateway("key", "secret", session=session)

    with pytest.raises(PaymentGatewayError, match="Authentication failed"):
        gateway.create_order(100, "INR", "rcpt_1")


def test_rejected_order_without_json_body(session):
    session.post.return_value = response(503, ValueError("no json"))
    gateway = RazorpayGateway("key", "secret", session=session)

    with pytest.raises(PaymentGatewayError, match=r"HTTP 503"):
        gateway.create_order(100, "INR", "rcpt_1")


def test_network_failure(session):
    session.post.side_effect = requests.ConnectionError("refused")
    gateway = RazorpayGateway("key", "secret", session=session)

    with pytest.raises(PaymentGatewayError, match="unreachable"):
        gateway.create_order(100, "INR", "rcpt_1")


def test_invalid_json_on_success(session):
    session.post.return_value = response(200, ValueError("bad json"))
    gateway = RazorpayGateway("key", "secret", session=session)

    with pytest.raises(PaymentGatewayError, match="invalid JSON"):
        gateway.create_order(100, "INR", "rcpt_1")


def test_close_closes_session(session):
    RazorpayGateway("key", "secret", session=session).close()
    session.close.assert_called_once_with()
