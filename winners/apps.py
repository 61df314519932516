from django.apps import AppConfig


class WinnersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "winners"
