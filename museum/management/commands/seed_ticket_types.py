from django.core.management.base import BaseCommand

from museum.container import get_container


class Command(BaseCommand):
    help = "Seed the default experiences when the catalog is empty"

    def handle(self, *args, **options):
        created = get_container().catalog.seed_defaults()
        if not created:
            self.stdout.write("Catalog already populated, nothing seeded")
            return
        for ticket_type in created:
            self.stdout.write(f"Seeded {ticket_type.name} ({ticket_type.category.value})")
        self.stdout.write(self.style.SUCCESS(f"Seeded {len(created)} ticket types"))
