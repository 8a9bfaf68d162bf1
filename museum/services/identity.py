"""Visitor identity sync.

Identities are created the first time a signed-in visitor is seen and
refreshed on every later sync, which also bumps their liveness.
"""

import structlog
from django.utils import timezone

from museum.domain import VisitorIdentity, VisitorRole
from museum.domain.errors import DuplicateVisitorError, IdentityValidationError
from museum.stores.interfaces import VisitorStore

logger = structlog.get_logger(__name__)


class IdentityService:
    def __init__(self, visitors: VisitorStore) -> None:
        self._visitors = visitors

    def sync(self, uid: str, email: str = "", name: str = "", picture: str = "") -> VisitorIdentity:
        """Create or refresh the identity for ``uid``.

        Email is recorded on creation only.

        Raises:
            IdentityValidationError: If uid is blank.
        """
        if not uid or not uid.strip():
            raise IdentityValidationError("uid is required")
        now = timezone.now()
        if self._visitors.get(uid) is None:
            try:
                identity = self._visitors.create(
                    VisitorIdentity(
                        uid=uid,
                        email=email,
                        name=name,
                        picture=picture,
                        role=VisitorRole.VISITOR,
                        last_active=now,
                    )
                )
            except DuplicateVisitorError:
                # a concurrent sync created it between the lookup and the insert
                logger.info("identity.create_raced", uid=uid)
            else:
                logger.info("identity.created", uid=uid)
                return identity
        return self._visitors.touch(uid, name=name, picture=picture, last_active=now)
