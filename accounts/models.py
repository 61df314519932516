from django.contrib.auth.models import AbstractUser, UserManager as DjangoUserManager
from django.db import models


class UserManager(DjangoUserManager):
    use_in_migrations = True

    def create_superuser(self, username, email=None, password=None, **extra_fields):
        extra_fields.setdefault("role", User.ROLE_SUPER_ADMIN)
        return super().create_superuser(username, email, password, **extra_fields)


class User(AbstractUser):
    ROLE_ADMIN = "admin"
    ROLE_SUPER_ADMIN = "super_admin"
    ROLE_CHOICES = [
        (ROLE_ADMIN, "Admin"),
        (ROLE_SUPER_ADMIN, "Super admin"),
    ]

    role = models.CharField(max_length=16, choices=ROLE_CHOICES, default=ROLE_ADMIN)
    objects = UserManager()

    @property
    def is_panel_admin(self) -> bool:
        return bool(self.is_active and self.is_staff)
