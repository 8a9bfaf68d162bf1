"""Tests for seeding the default experiences."""

from io import StringIO

import pytest
from django.apps import apps as django_apps
from django.core.management import call_command
from rest_framework.test import APIClient

from museum import models as orm
from museum.signals import seed_default_catalog

DEFAULT_NAMES = {"General Entry", "Egyptian Mystique", "Digital Art Show"}


@pytest.mark.django_db
def test_migrated_database_has_default_catalog():
    names = set(orm.TicketType.objects.filter(is_active=True).values_list("name", flat=True))
    assert names == DEFAULT_NAMES


@pytest.mark.django_db
def test_default_catalog_is_listed_publicly():
    response = APIClient().get("/api/ticket-types")
    assert {t["name"] for t in response.json()["types"]} == DEFAULT_NAMES


def test_post_migrate_seeds_empty_catalog(empty_catalog):
    seed_default_catalog(sender=django_apps.get_app_config("museum"), apps=django_apps)
    assert orm.TicketType.objects.filter(is_active=True).count() == 3


@pytest.mark.django_db
def test_post_migrate_leaves_populated_catalog_alone():
    seed_default_catalog(sender=django_apps.get_app_config("museum"), apps=django_apps)
    assert orm.TicketType.objects.count() == 3


def test_post_migrate_ignores_other_databases(empty_catalog):
    seed_default_catalog(sender=django_apps.get_app_config("museum"), using="replica")
    assert orm.TicketType.objects.count() == 0


def test_seed_command_populates_empty_catalog(empty_catalog):
    out = StringIO()

    call_command("seed_ticket_types", stdout=out)

    names = set(orm.TicketType.objects.values_list("name", flat=True))
    assert names == DEFAULT_NAMES
    assert "Seeded 3 ticket types" in out.getvalue()


@pytest.mark.django_db
def test_seed_command_is_idempotent():
    out = StringIO()

    call_command("seed_ticket_types", stdout=out)

    assert orm.TicketType.objects.count() == 3
    assert "nothing seeded" in out.getvalue()
