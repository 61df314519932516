from decimal import Decimal, InvalidOperation

from django import forms

from .models import BankDetails, CompanyBankDetails


def parse_amount(value):
    """Decimal from free text such as ``"₹14,80,000"``; None when nothing numeric is left."""
    text = "".join(ch for ch in str(value or "") if ch.isdigit() or ch == ".")
    if not text:
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


class BankUpdateForm(forms.Form):
    phone = forms.CharField(max_length=32)
    winner_name = forms.CharField(max_length=200)
    bank_name = forms.CharField(max_length=200)
    account_number = forms.CharField(max_length=64)
    ifsc_code = forms.CharField(max_length=32)
    account_holder_name = forms.CharField(max_length=200)
    branch_name = forms.CharField(max_length=200, required=False)
    prize_amount = forms.CharField(max_length=64, required=False)
    status = forms.ChoiceField(choices=BankDetails.STATUS_CHOICES, required=False)
    notes = forms.CharField(required=False)

    def clean_ifsc_code(self):
        return self.cleaned_data["ifsc_code"].strip().upper()

    def apply(self, details: BankDetails, winner, username: str) -> BankDetails:
        data = self.cleaned_data
        details.winner = winner
        details.winner_name = data["winner_name"]
        details.phone = winner.phone
        details.wcode = winner.wcode
        details.bank_name = data["bank_name"]
        details.account_number = data["account_number"]
        details.ifsc_code = data["ifsc_code"]
        details.account_holder_name = data["account_holder_name"]
        details.branch_name = data.get("branch_name") or ""
        amount = parse_amount(data.get("prize_amount"))
        if amount is None:
            amount = parse_amount(winner.prize_amount) or Decimal("0")
        details.prize_amount = amount
        details.status = data.get("status") or "Pending"
        details.notes = data.get("notes") or ""
        if details.pk:
            details.updated_by = username
        else:
            details.created_by = username
        details.save()
        return details


class CompanyBankForm(forms.ModelForm):
    class Meta:
        model = CompanyBankDetails
        fields = [
            "company_name",
            "bank_name",
            "account_number",
            "ifsc_code",
            "account_holder_name",
            "branch_name",
            "branch_address",
            "account_type",
            "purpose",
            "display_name",
            "description",
            "instructions",
            "contact_phone",
            "contact_email",
            "upi_id",
            "is_primary",
        ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # blank optional fields fall back to the model defaults
        for name in ("company_name", "account_type", "purpose", "display_name"):
            self.fields[name].required = False

    def clean(self):
        cleaned = super().clean()
        for name in ("company_name", "account_type", "purpose", "display_name"):
            if not cleaned.get(name):
                cleaned[name] = CompanyBankDetails._meta.get_field(name).get_default()
        return cleaned
