import re
from pathlib import Path

from django.core.validators import FileExtensionValidator
from django.db import models
from django.utils import timezone

from winners.formatting import group_indian

IMAGE_EXTENSIONS = ["jpg", "jpeg", "png", "webp"]

_UNSAFE = re.compile(r"[^a-z0-9_-]", re.IGNORECASE)


def prize_image_path(instance, filename):
    """``prizes/<epoch-ms>-<sanitized stem><ext>``"""
    path = Path(filename)
    stem = _UNSAFE.sub("", path.stem)
    stamp = int(timezone.now().timestamp() * 1000)
    return f"prizes/{stamp}-{stem}{path.suffix.lower()}"


class PrizeQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True).order_by("position")


class Prize(models.Model):
    DEFAULT_EMOJI = "🏆"
    MEDAL_CHOICES = [
        ("🥇", "🥇 Gold"),
        ("🥈", "🥈 Silver"),
        ("🥉", "🥉 Bronze"),
        ("🏆", "🏆 Trophy"),
        ("🎁", "🎁 Gift"),
    ]

    title = models.CharField(max_length=200)
    description = models.TextField()
    amount = models.PositiveIntegerField()
    image = models.FileField(
        upload_to=prize_image_path,
        max_length=255,
        validators=[FileExtensionValidator(IMAGE_EXTENSIONS)],
    )
    position = models.PositiveIntegerField(unique=True)
    emoji = models.CharField(max_length=8, default=DEFAULT_EMOJI)
    medal = models.CharField(max_length=8, choices=MEDAL_CHOICES, default=DEFAULT_EMOJI)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PrizeQuerySet.as_manager()

    class Meta:
        ordering = ["position"]

    def __str__(self):
        return f"{self.position}. {self.title}"

    @property
    def formatted_amount(self):
        return group_indian(self.amount or 0)
