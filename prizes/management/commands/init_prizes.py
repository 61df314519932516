from django.core.management.base import BaseCommand
from django.db import transaction
from prizes.models import Prize
from winners.formatting import format_inr

DEFAULT_PRIZES = [
    ("Maruti XL6", "Maruti XL6 Rs 14,80,000", 1480000, "🥇"),
    ("Tata Nexon", "Tata Nexon Rs 9,80,000", 980000, "🥈"),
    ("Maruti Swift Dzire", "Maruti Swift Dzire Rs 9,30,000", 930000, "🥉"),
    ("Honda City", "Honda City Rs 12,50,000", 1250000, "🏆"),
    ("Hyundai Creta", "Hyundai Creta Rs 15,20,000", 1520000, "🏆"),
]


class Command(BaseCommand):
    help = "Creates the default prize listing unless prizes already exist."

    @transaction.atomic
    def handle(self, *args, **options):
        existing = Prize.objects.count()
        if existing:
            self.stdout.write(f"Found {existing} existing prizes. Skipping initialization.")
            return
        for position, (title, description, amount, medal) in enumerate(DEFAULT_PRIZES, start=1):
            Prize.objects.create(
                title=title,
                description=description,
                amount=amount,
                # bundled with the site's static images
                image=f"win{position}.jpg",
                position=position,
                medal=medal,
            )
            self.stdout.write(f"{position}. {medal} {title} - {format_inr(amount)}")
        self.stdout.write(self.style.SUCCESS(f"Created {len(DEFAULT_PRIZES)} prizes"))
