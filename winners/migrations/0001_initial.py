from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Winner",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("external_id", models.CharField(max_length=64, unique=True)),
                ("phone", models.CharField(db_index=True, max_length=32)),
                ("name", models.CharField(db_index=True, max_length=200)),
                ("address", models.TextField()),
                ("paid", models.CharField(max_length=64)),
                ("product", models.CharField(max_length=200)),
                ("prize_amount", models.CharField(max_length=64)),
                ("date", models.CharField(max_length=32)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Active", "Active"),
                            ("Pending", "Pending"),
                            ("Approved", "Approved"),
                            ("Paid", "Paid"),
                            ("Rejected", "Rejected"),
                            ("Inactive", "Inactive"),
                        ],
                        db_index=True,
                        default="Active",
                        max_length=16,
                    ),
                ),
                ("wcode", models.CharField(max_length=64, unique=True)),
                ("image", models.CharField(blank=True, max_length=255, null=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
    ]
