from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("winners", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="winner",
            name="status",
            field=models.CharField(
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
                max_length=64,
            ),
        ),
    ]
