import os
from django.core.management.base import BaseCommand
from accounts.models import User


class Command(BaseCommand):
    help = "Creates the default admin panel user unless it already exists."

    def handle(self, *args, **options):
        username = os.environ.get("ADMIN_USERNAME", "admin")
        password = os.environ.get("ADMIN_PASSWORD", "admin123")
        email = os.environ.get("ADMIN_EMAIL", "admin@herballuckydraw.com")

        if User.objects.filter(username=username).exists():
            self.stdout.write(f"Admin user '{username}' already exists")
            return

        User.objects.create_superuser(username=username, email=email, password=password)
        self.stdout.write(self.style.SUCCESS(f"Default admin user '{username}' created successfully"))
        if "ADMIN_PASSWORD" not in os.environ:
            self.stdout.write(self.style.WARNING("Using the built-in default password; change it from the settings page."))
