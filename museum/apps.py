import atexit

from django.apps import AppConfig
from django.db.models.signals import post_migrate


class MuseumConfig(AppConfig):
    name = "museum"
    default_auto_field = "django.db.models.BigAutoField"

    def ready(self) -> None:
        from museum.container import close_container, init_container
        from museum.signals import seed_default_catalog

        init_container()
        atexit.register(close_container)
        post_migrate.connect(seed_default_catalog, sender=self)
