from django import forms
from django.conf import settings

from .models import Winner
from .spreadsheet import has_allowed_extension


class WinnerUploadForm(forms.Form):
    excelFile = forms.FileField(allow_empty_file=True)

    def clean_excelFile(self):
        upload = self.cleaned_data["excelFile"]
        if not has_allowed_extension(upload.name):
            raise forms.ValidationError("Only Excel files (.xlsx, .xls) are allowed")
        limit = getattr(settings, "WINNER_IMPORT_MAX_UPLOAD_BYTES", 10 * 1024 * 1024)
        if upload.size > limit:
            raise forms.ValidationError(f"File is larger than {limit // (1024 * 1024)}MB")
        return upload


class WinnerForm(forms.Form):
    external_id = forms.CharField(max_length=64)
    name = forms.CharField(max_length=200)
    phone = forms.CharField(max_length=32)
    address = forms.CharField()
    paid = forms.CharField(max_length=64)
    product = forms.CharField(max_length=200)
    prize_amount = forms.CharField(max_length=64)
    date = forms.CharField(max_length=32)
    wcode = forms.CharField(max_length=64)
    status = forms.ChoiceField(choices=Winner.STATUS_CHOICES, required=False)

    def duplicate_exists(self) -> bool:
        data = self.cleaned_data
        return Winner.objects.matching_keys(data["phone"], data["external_id"], data["wcode"]).exists()

    def save(self) -> Winner:
        data = dict(self.cleaned_data)
        data["status"] = data.get("status") or Winner.STATUS_ACTIVE
        return Winner.objects.create(is_active=True, **data)


class PrizeUpdateForm(forms.Form):
    phone = forms.CharField(max_length=32)
    new_prize_amount = forms.CharField(max_length=64)
    prize_status = forms.ChoiceField(choices=Winner.STATUS_CHOICES, required=False)
    prize_description = forms.CharField(max_length=200, required=False)
    update_date = forms.DateField(required=False)
    update_reason = forms.CharField(required=False)
