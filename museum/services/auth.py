"""Admin authorization gate.

Admin access is a signed capability token, not a visitor identity. The
``role`` stored on visitor identities plays no part in it.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import structlog
from django.utils.crypto import constant_time_compare
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken

from museum.domain.errors import InvalidCredentialsError, UnauthorizedError

logger = structlog.get_logger(__name__)

ADMIN_ROLE = "admin"
ROLE_CLAIM = "role"


@dataclass(frozen=True)
class AdminCapability:
    """A verified admin claim attached to the current request."""

    role: str
    expires_at: datetime


class AdminGate:
    def __init__(
        self,
        admin_email: str,
        admin_password: str,
        token_lifetime: timedelta = timedelta(days=1),
    ) -> None:
        self._admin_email = admin_email
        self._admin_password = admin_password
        self._token_lifetime = token_lifetime

    def login(self, username: str, password: str) -> str:
        """Exchange the configured admin credential pair for a token.

        Raises:
            InvalidCredentialsError: If the pair does not match.
        """
        user_ok = constant_time_compare(username or "", self._admin_email)
        password_ok = constant_time_compare(password or "", self._admin_password)
        if not (self._admin_password and user_ok and password_ok):
            logger.warning("admin.login_failed")
            raise InvalidCredentialsError()
        token = AccessToken()
        token.set_exp(lifetime=self._token_lifetime)
        token[ROLE_CLAIM] = ADMIN_ROLE
        logger.info("admin.login")
        return str(token)

    def verify(self, raw_token: str | None) -> AdminCapability:
        """Return the capability asserted by ``raw_token``.

        Raises:
            UnauthorizedError: If the token is absent, malformed, expired,
                badly signed or lacks the admin claim.
        """
        if not raw_token:
            raise UnauthorizedError()
        try:
            token = AccessToken(raw_token)
        except TokenError:
            raise UnauthorizedError("Invalid Admin Token") from None
        if token.get(ROLE_CLAIM) != ADMIN_ROLE:
            raise UnauthorizedError("Invalid Admin Token")
        return AdminCapability(
            role=ADMIN_ROLE,
            expires_at=datetime.fromtimestamp(token["exp"], tz=timezone.utc),
        )
