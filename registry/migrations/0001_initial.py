from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Citizen",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                (
                    "national_id",
                    models.CharField(
                        help_text="National ID (NDI/NIC), the business key",
                        max_length=50,
                        unique=True,
                    ),
                ),
                ("first_name", models.CharField(max_length=150)),
                ("last_name", models.CharField(max_length=150)),
                ("full_name", models.CharField(blank=True, default="", max_length=301)),
                (
                    "date_of_birth",
                    models.CharField(
                        help_text="Date of birth exactly as submitted, e.g. 20-11-2000",
                        max_length=50,
                    ),
                ),
                ("email", models.CharField(max_length=254)),
                ("phone", models.CharField(max_length=50)),
                ("occupations", models.JSONField(blank=True, default=list)),
                ("nationality", models.CharField(max_length=100)),
                ("blood_group", models.CharField(max_length=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "citizens",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["email"], name="citizens_email_idx"),
                    models.Index(
                        fields=["last_name", "first_name"], name="citizens_name_idx"
                    ),
                ],
            },
        ),
    ]
