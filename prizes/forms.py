from django import forms
from django.conf import settings
from django.core.files.uploadedfile import UploadedFile

from .models import Prize

IMAGE_ERROR = "Image is required and must be JPG, PNG, or WEBP under 2MB"


class PrizeForm(forms.ModelForm):
    class Meta:
        model = Prize
        fields = ["title", "description", "amount", "image", "position", "emoji", "medal", "is_active"]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields["emoji"].required = False
        self.fields["medal"].required = False
        if self.instance.pk:
            # keep the stored image unless a new one is sent
            self.fields["image"].required = False

    def clean_image(self):
        image = self.cleaned_data.get("image")
        limit = getattr(settings, "PRIZE_IMAGE_MAX_UPLOAD_BYTES", 2 * 1024 * 1024)
        if isinstance(image, UploadedFile) and image.size > limit:
            raise forms.ValidationError(IMAGE_ERROR)
        return image

    def clean(self):
        cleaned = super().clean()
        cleaned["emoji"] = cleaned.get("emoji") or Prize.DEFAULT_EMOJI
        cleaned["medal"] = cleaned.get("medal") or Prize.DEFAULT_EMOJI
        return cleaned
