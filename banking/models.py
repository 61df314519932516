from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q
from winners.formatting import format_inr


class BankDetailsQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def for_winner(self, winner):
        return self.active().filter(winner=winner).first()

    def for_phone(self, phone):
        return self.active().filter(phone=phone).first()

    def search(self, term):
        term = (term or "").strip()
        if not term:
            return self
        return self.filter(
            Q(winner_name__icontains=term)
            | Q(phone__icontains=term)
            | Q(bank_name__icontains=term)
            | Q(account_holder_name__icontains=term)
        )


class BankDetails(models.Model):
    PRIZE_TYPE_CHOICES = [("Cash", "Cash"), ("Car", "Car"), ("Other", "Other")]
    STATUS_CHOICES = [
        ("Pending", "Pending"),
        ("Verified", "Verified"),
        ("Approved", "Approved"),
        ("Paid", "Paid"),
        ("Rejected", "Rejected"),
    ]
    VERIFICATION_CHOICES = [
        ("Not Verified", "Not Verified"),
        ("Under Review", "Under Review"),
        ("Verified", "Verified"),
        ("Failed", "Failed"),
    ]
    PAYMENT_METHOD_CHOICES = [
        ("Bank Transfer", "Bank Transfer"),
        ("UPI", "UPI"),
        ("Cheque", "Cheque"),
        ("Cash", "Cash"),
        ("Other", "Other"),
    ]

    winner = models.ForeignKey("winners.Winner", on_delete=models.CASCADE, related_name="bank_details")
    winner_name = models.CharField(max_length=200)
    phone = models.CharField(max_length=32, db_index=True)
    wcode = models.CharField(max_length=64)
    bank_name = models.CharField(max_length=200)
    account_number = models.CharField(max_length=64)
    ifsc_code = models.CharField(max_length=32)
    account_holder_name = models.CharField(max_length=200)
    branch_name = models.CharField(max_length=200, blank=True)
    prize_amount = models.DecimalField(max_digits=14, decimal_places=2, validators=[MinValueValidator(0)])
    prize_type = models.CharField(max_length=16, choices=PRIZE_TYPE_CHOICES, default="Cash")
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default="Pending", db_index=True)
    verification_status = models.CharField(
        max_length=16, choices=VERIFICATION_CHOICES, default="Not Verified", db_index=True
    )
    notes = models.TextField(blank=True)
    admin_notes = models.TextField(blank=True)
    payment_date = models.DateTimeField(blank=True, null=True)
    transaction_id = models.CharField(max_length=128, blank=True)
    payment_method = models.CharField(max_length=16, choices=PAYMENT_METHOD_CHOICES, default="Bank Transfer")
    created_by = models.CharField(max_length=150, default="System")
    updated_by = models.CharField(max_length=150, blank=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = BankDetailsQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "-id"]
        verbose_name_plural = "bank details"

    def save(self, *args, **kwargs):
        self.ifsc_code = (self.ifsc_code or "").strip().upper()
        super().save(*args, **kwargs)

    @property
    def formatted_prize_amount(self):
        return format_inr(self.prize_amount)

    @property
    def masked_account_number(self):
        number = self.account_number or ""
        if len(number) > 4:
            return "X" * (len(number) - 4) + number[-4:]
        return number

    @property
    def status_badge_class(self):
        return {
            "Verified": "success",
            "Approved": "info",
            "Paid": "primary",
            "Rejected": "danger",
        }.get(self.status, "warning")

    @property
    def verification_badge_class(self):
        return {
            "Verified": "success",
            "Under Review": "info",
            "Failed": "danger",
        }.get(self.verification_status, "secondary")


class CompanyBankDetailsQuerySet(models.QuerySet):
    def all_active(self):
        return self.filter(is_active=True).order_by("-is_primary", "sort_order", "id")

    def by_purpose(self, purpose):
        return self.all_active().filter(purpose=purpose)

    def primary(self):
        return self.filter(is_active=True, is_primary=True).order_by("sort_order", "id").first()


class CompanyBankDetails(models.Model):
    ACCOUNT_TYPE_CHOICES = [("Current", "Current"), ("Savings", "Savings"), ("Business", "Business")]
    PURPOSE_PRIZE_DISTRIBUTION = "Prize Distribution"
    PURPOSE_CHOICES = [
        (PURPOSE_PRIZE_DISTRIBUTION, "Prize Distribution"),
        ("Registration Fees", "Registration Fees"),
        ("General", "General"),
        ("Other", "Other"),
    ]
    DEFAULT_COMPANY_NAME = "Herbal Ayurveda Pvt. Ltd."
    DEFAULT_DISPLAY_NAME = "Prize Distributor Department"

    company_name = models.CharField(max_length=200, default=DEFAULT_COMPANY_NAME)
    bank_name = models.CharField(max_length=200)
    account_number = models.CharField(max_length=64)
    ifsc_code = models.CharField(max_length=32)
    account_holder_name = models.CharField(max_length=200)
    branch_name = models.CharField(max_length=200, blank=True)
    branch_address = models.CharField(max_length=255, blank=True)
    account_type = models.CharField(max_length=16, choices=ACCOUNT_TYPE_CHOICES, default="Current")
    purpose = models.CharField(max_length=32, choices=PURPOSE_CHOICES, default=PURPOSE_PRIZE_DISTRIBUTION)
    display_name = models.CharField(max_length=200, default=DEFAULT_DISPLAY_NAME)
    is_active = models.BooleanField(default=True)
    is_primary = models.BooleanField(default=False)
    description = models.TextField(blank=True)
    instructions = models.TextField(blank=True)
    contact_phone = models.CharField(max_length=32, blank=True)
    contact_email = models.EmailField(blank=True)
    upi_id = models.CharField(max_length=128, blank=True)
    qr_code_path = models.CharField(max_length=255, blank=True)
    created_by = models.CharField(max_length=150, default="Admin")
    updated_by = models.CharField(max_length=150, blank=True)
    sort_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = CompanyBankDetailsQuerySet.as_manager()

    class Meta:
        verbose_name_plural = "company bank details"
        indexes = [
            models.Index(fields=["is_active", "-is_primary", "sort_order"], name="companybank_display_idx"),
            models.Index(fields=["purpose", "is_active"], name="companybank_purpose_idx"),
        ]

    def save(self, *args, **kwargs):
        self.ifsc_code = (self.ifsc_code or "").strip().upper()
        self.contact_email = (self.contact_email or "").strip().lower()
        self.upi_id = (self.upi_id or "").strip().lower()
        super().save(*args, **kwargs)
        if self.is_primary:
            # one primary account per purpose
            CompanyBankDetails.objects.filter(
                purpose=self.purpose, is_active=True, is_primary=True
            ).exclude(pk=self.pk).update(is_primary=False)

    @property
    def display_account_number(self):
        number = self.account_number or ""
        if len(number) > 6:
            return number[:3] + "X" * (len(number) - 6) + number[-3:]
        return number

    def to_frontend_format(self):
        return {
            "id": self.pk,
            "companyName": self.company_name,
            "bankName": self.bank_name,
            "accountNumber": self.account_number,
            "ifscCode": self.ifsc_code,
            "accountHolderName": self.account_holder_name,
            "branchName": self.branch_name,
            "displayName": self.display_name,
            "purpose": self.purpose,
            "instructions": self.instructions,
            "contactPhone": self.contact_phone,
            "upiId": self.upi_id,
            "isPrimary": self.is_primary,
        }
