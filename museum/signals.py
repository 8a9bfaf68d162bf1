"""Django signal handlers for the museum app."""

import structlog
from django.db import DEFAULT_DB_ALIAS

from museum.container import get_container

logger = structlog.get_logger(__name__)


def seed_default_catalog(sender, apps=None, using=DEFAULT_DB_ALIAS, **kwargs):
    """Seed the default experiences after migrations when the catalog is empty.

    The container's stores write to the default database, so migrations of
    other aliases are ignored.
    """
    if using != DEFAULT_DB_ALIAS:
        return
    if apps is not None:
        try:
            apps.get_model("museum", "TicketType")
        except LookupError:
            # museum was migrated back to zero
            return
    seeded = get_container().catalog.seed_defaults()
    if seeded:
        logger.info("catalog.seeded_after_migrate", count=len(seeded))
