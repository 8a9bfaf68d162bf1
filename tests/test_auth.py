"""Unit tests for the admin authorization gate."""

from datetime import timedelta

import pytest
from rest_framework_simplejwt.tokens import AccessToken

from museum.domain.errors import InvalidCredentialsError, UnauthorizedError
from museum.services.auth import AdminGate
from tests.conftest import ADMIN_EMAIL, ADMIN_PASSWORD


class TestAdminLogin:
    def test_valid_credentials_issue_admin_token(self, admin_gate):
        token = admin_gate.login(ADMIN_EMAIL, ADMIN_PASSWORD)

        assert AccessToken(token)["role"] == "admin"

    @pytest.mark.parametrize(
        "username,password",
        [
            (ADMIN_EMAIL, "wrong"),
            ("someone@example.com", ADMIN_PASSWORD),
            ("", ""),
        ],
    )
    def test_invalid_credentials_rejected(self, admin_gate, username, password):
        with pytest.raises(InvalidCredentialsError):
            admin_gate.login(username, password)

    def test_empty_configured_password_never_matches(self):
        gate = AdminGate(admin_email="", admin_password="")
        with pytest.raises(InvalidCredentialsError):
            gate.login("", "")


class TestAdminVerify:
    def test_round_trip(self, admin_gate):
        capability = admin_gate.verify(admin_gate.login(ADMIN_EMAIL, ADMIN_PASSWORD))
        assert capability.role == "admin"

    @pytest.mark.parametrize("raw", [None, "", "not.a.jwt", "garbage"])
    def test_missing_or_malformed_token(self, admin_gate, raw):
        with pytest.raises(UnauthorizedError):
            admin_gate.verify(raw)

    def test_token_without_admin_claim(self, admin_gate):
        token = AccessToken()
        token["role"] = "visitor"
        with pytest.raises(UnauthorizedError):
            admin_gate.verify(str(token))

    def test_expired_token(self, admin_gate):
        expired = AdminGate(ADMIN_EMAIL, ADMIN_PASSWORD, token_lifetime=timedelta(seconds=-5))
        token = expired.login(ADMIN_EMAIL, ADMIN_PASSWORD)
        with pytest.raises(UnauthorizedError):
            admin_gate.verify(token)

