import django.core.validators
import prizes.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Prize",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                ("amount", models.PositiveIntegerField()),
                (
                    "image",
                    models.FileField(
                        max_length=255,
                        upload_to=prizes.models.prize_image_path,
                        validators=[django.core.validators.FileExtensionValidator(["jpg", "jpeg", "png", "webp"])],
                    ),
                ),
                ("position", models.PositiveIntegerField(unique=True)),
                ("emoji", models.CharField(default="🏆", max_length=8)),
                (
                    "medal",
                    models.CharField(
                        choices=[
                            ("🥇", "🥇 Gold"),
                            ("🥈", "🥈 Silver"),
                            ("🥉", "🥉 Bronze"),
                            ("🏆", "🏆 Trophy"),
                            ("🎁", "🎁 Gift"),
                        ],
                        default="🏆",
                        max_length=8,
                    ),
                ),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["position"],
            },
        ),
    ]
