from pathlib import Path
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from winners.importer import import_workbook
from winners.spreadsheet import SpreadsheetError, has_allowed_extension


class Command(BaseCommand):
    help = "Imports winners from an Excel workbook (.xlsx or .xls)."

    def add_arguments(self, parser):
        parser.add_argument("path", help="Workbook to import")
        parser.add_argument(
            "--status",
            default=None,
            help="Status for rows without one (defaults to ADMIN_IMPORT_DEFAULT_STATUS)",
        )

    def handle(self, *args, **options):
        path = Path(options["path"])
        if not path.is_file():
            raise CommandError(f"No such file: {path}")
        if not has_allowed_extension(path.name):
            raise CommandError("Only Excel files (.xlsx, .xls) are allowed")

        status = options["status"] or getattr(settings, "ADMIN_IMPORT_DEFAULT_STATUS", "Active")
        self.stdout.write(f"Importing winners from {path}...")
        try:
            result = import_workbook(path.read_bytes(), path.name, default_status=status)
        except SpreadsheetError as e:
            raise CommandError(f"Error processing Excel file: {e}")

        if result.empty:
            raise CommandError("Excel file is empty or has no data")

        for line in result.errors:
            self.stdout.write(self.style.WARNING(line))
        style = self.style.SUCCESS if result.imported_count else self.style.ERROR
        self.stdout.write(style(f"{result.summary_message()} ({result.total_rows} rows read)"))
