import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("winners", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="BankDetails",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("winner_name", models.CharField(max_length=200)),
                ("phone", models.CharField(db_index=True, max_length=32)),
                ("wcode", models.CharField(max_length=64)),
                ("bank_name", models.CharField(max_length=200)),
                ("account_number", models.CharField(max_length=64)),
                ("ifsc_code", models.CharField(max_length=32)),
                ("account_holder_name", models.CharField(max_length=200)),
                ("branch_name", models.CharField(blank=True, max_length=200)),
                (
                    "prize_amount",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=14,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
                (
                    "prize_type",
                    models.CharField(
                        choices=[("Cash", "Cash"), ("Car", "Car"), ("Other", "Other")],
                        default="Cash",
                        max_length=16,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Pending", "Pending"),
                            ("Verified", "Verified"),
                            ("Approved", "Approved"),
                            ("Paid", "Paid"),
                            ("Rejected", "Rejected"),
                        ],
                        db_index=True,
                        default="Pending",
                        max_length=16,
                    ),
                ),
                (
                    "verification_status",
                    models.CharField(
                        choices=[
                            ("Not Verified", "Not Verified"),
                            ("Under Review", "Under Review"),
                            ("Verified", "Verified"),
                            ("Failed", "Failed"),
                        ],
                        db_index=True,
                        default="Not Verified",
                        max_length=16,
                    ),
                ),
                ("notes", models.TextField(blank=True)),
                ("admin_notes", models.TextField(blank=True)),
                ("payment_date", models.DateTimeField(blank=True, null=True)),
                ("transaction_id", models.CharField(blank=True, max_length=128)),
                (
                    "payment_method",
                    models.CharField(
                        choices=[
                            ("Bank Transfer", "Bank Transfer"),
                            ("UPI", "UPI"),
                            ("Cheque", "Cheque"),
                            ("Cash", "Cash"),
                            ("Other", "Other"),
                        ],
                        default="Bank Transfer",
                        max_length=16,
                    ),
                ),
                ("created_by", models.CharField(default="System", max_length=150)),
                ("updated_by", models.CharField(blank=True, max_length=150)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "winner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="bank_details",
                        to="winners.winner",
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "verbose_name_plural": "bank details",
            },
        ),
        migrations.CreateModel(
            name="CompanyBankDetails",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("company_name", models.CharField(default="Herbal Ayurveda Pvt. Ltd.", max_length=200)),
                ("bank_name", models.CharField(max_length=200)),
                ("account_number", models.CharField(max_length=64)),
                ("ifsc_code", models.CharField(max_length=32)),
                ("account_holder_name", models.CharField(max_length=200)),
                ("branch_name", models.CharField(blank=True, max_length=200)),
                ("branch_address", models.CharField(blank=True, max_length=255)),
                (
                    "account_type",
                    models.CharField(
                        choices=[("Current", "Current"), ("Savings", "Savings"), ("Business", "Business")],
                        default="Current",
                        max_length=16,
                    ),
                ),
                (
                    "purpose",
                    models.CharField(
                        choices=[
                            ("Prize Distribution", "Prize Distribution"),
                            ("Registration Fees", "Registration Fees"),
                            ("General", "General"),
                            ("Other", "Other"),
                        ],
                        default="Prize Distribution",
                        max_length=32,
                    ),
                ),
                ("display_name", models.CharField(default="Prize Distributor Department", max_length=200)),
                ("is_active", models.BooleanField(default=True)),
                ("is_primary", models.BooleanField(default=False)),
                ("description", models.TextField(blank=True)),
                ("instructions", models.TextField(blank=True)),
                ("contact_phone", models.CharField(blank=True, max_length=32)),
                ("contact_email", models.EmailField(blank=True, max_length=254)),
                ("upi_id", models.CharField(blank=True, max_length=128)),
                ("qr_code_path", models.CharField(blank=True, max_length=255)),
                ("created_by", models.CharField(default="Admin", max_length=150)),
                ("updated_by", models.CharField(blank=True, max_length=150)),
                ("sort_order", models.IntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name_plural": "company bank details",
                "indexes": [
                    models.Index(fields=["is_active", "-is_primary", "sort_order"], name="companybank_display_idx"),
                    models.Index(fields=["purpose", "is_active"], name="companybank_purpose_idx"),
                ],
            },
        ),
    ]
