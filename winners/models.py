from django.db import models
from django.db.models import Q

from .formatting import mask_phone


class WinnerQuerySet(models.QuerySet):
    def active(self):
        return self.filter(is_active=True)

    def with_status(self, status):
        if not status:
            return self
        return self.filter(status=status)

    def search(self, term):
        term = (term or "").strip()
        if not term:
            return self
        return self.filter(
            Q(name__icontains=term) | Q(phone__icontains=term) | Q(wcode__icontains=term)
        )

    def stats(self):
        active = self.active()
        return {
            "totalWinners": active.count(),
            "pendingWinners": active.filter(status=Winner.STATUS_PENDING).count(),
            "approvedWinners": active.filter(status=Winner.STATUS_APPROVED).count(),
            "paidWinners": active.filter(status=Winner.STATUS_PAID).count(),
        }

    def matching_keys(self, phone, external_id, wcode):
        """Any winner, active or not, sharing one of the three identity keys."""
        return self.filter(Q(phone=phone) | Q(external_id=external_id) | Q(wcode=wcode))


class Winner(models.Model):
    STATUS_ACTIVE = "Active"
    STATUS_PENDING = "Pending"
    STATUS_APPROVED = "Approved"
    STATUS_PAID = "Paid"
    STATUS_REJECTED = "Rejected"
    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_PENDING, "Pending"),
        (STATUS_APPROVED, "Approved"),
        (STATUS_PAID, "Paid"),
        (STATUS_REJECTED, "Rejected"),
        ("Inactive", "Inactive"),
    ]
    PUBLIC_STATUSES = (STATUS_APPROVED, STATUS_PAID)

    external_id = models.CharField(max_length=64, unique=True)
    phone = models.CharField(max_length=32, db_index=True)
    name = models.CharField(max_length=200, db_index=True)
    address = models.TextField()
    # Free text in the source sheets ("Yes", "No", "500", ...)
    paid = models.CharField(max_length=64)
    product = models.CharField(max_length=200)
    prize_amount = models.CharField(max_length=64)
    date = models.CharField(max_length=32)
    # Not enforced on import; sheets carry their own spellings.
    status = models.CharField(max_length=64, choices=STATUS_CHOICES, default=STATUS_ACTIVE, db_index=True)
    wcode = models.CharField(max_length=64, unique=True)
    image = models.CharField(max_length=255, blank=True, null=True)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = WinnerQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.name} ({self.wcode})"

    @property
    def masked_phone(self):
        return mask_phone(self.phone)

    def public_dict(self, *fields):
        """Winner fields safe for the public site, phone masked."""
        data = {
            "name": self.name,
            "phone": self.masked_phone,
            "wcode": self.wcode,
            "image": self.image,
            "prizeAmount": self.prize_amount,
            "product": self.product,
            "date": self.date,
            "paid": self.paid,
            "address": self.address,
            "status": self.status,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
        if fields:
            return {k: data[k] for k in fields}
        return data
