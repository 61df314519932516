from django.core.management.base import BaseCommand
from django.db import transaction
from banking.models import CompanyBankDetails

DEFAULT_ACCOUNTS = [
    {
        "bank_name": "State Bank of India",
        "account_number": "12345678901234",
        "ifsc_code": "SBIN0001234",
        "account_holder_name": "HERBAL AYURVEDA PVT LTD",
        "branch_name": "Mumbai Main Branch",
        "branch_address": "Mumbai, Maharashtra",
        "purpose": "Prize Distribution",
        "display_name": "Prize Distributor Department",
        "description": "Official bank account for prize distribution",
        "instructions": "Please use this account for all prize-related transactions",
        "contact_phone": "9876543210",
        "contact_email": "prizes@herbalayurveda.com",
        "upi_id": "herbalayurveda@sbi",
        "is_primary": True,
    },
    {
        "bank_name": "HDFC Bank",
        "account_number": "98765432109876",
        "ifsc_code": "HDFC0001234",
        "account_holder_name": "HERBAL AYURVEDA PVT LTD",
        "branch_name": "Delhi Branch",
        "branch_address": "Delhi, India",
        "purpose": "Registration Fees",
        "display_name": "Registration Department",
        "description": "Bank account for registration and entry fees",
        "instructions": "Use this account for registration payments only",
        "contact_phone": "9876543211",
        "contact_email": "registration@herbalayurveda.com",
        "upi_id": "registration@hdfc",
        "is_primary": False,
    },
]


class Command(BaseCommand):
    help = "Creates the default company payout accounts unless an active one exists."

    @transaction.atomic
    def handle(self, *args, **options):
        if CompanyBankDetails.objects.filter(is_active=True).exists():
            self.stdout.write("Company bank details already exist")
            return
        for data in DEFAULT_ACCOUNTS:
            account = CompanyBankDetails.objects.create(account_type="Current", created_by="System", **data)
            self.stdout.write(self.style.SUCCESS(f"Created {account.bank_name} ({account.purpose})"))
