from django.db import models


class Citizen(models.Model):
    """Model representing a citizen record in the registry."""

    national_id = models.CharField(
        max_length=50, unique=True, help_text="National ID (NDI/NIC), the business key"
    )
    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)
    full_name = models.CharField(max_length=301, blank=True, default="")
    date_of_birth = models.CharField(
        max_length=50, help_text="Date of birth exactly as submitted, e.g. 20-11-2000"
    )
    email = models.CharField(max_length=254)
    phone = models.CharField(max_length=50)
    occupations = models.JSONField(default=list, blank=True)
    nationality = models.CharField(max_length=100)
    blood_group = models.CharField(max_length=10)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "citizens"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["email"], name="citizens_email_idx"),
            models.Index(fields=["last_name", "first_name"], name="citizens_name_idx"),
        ]

    def __str__(self):
        return f"{self.full_name or self.first_name} ({self.national_id})"
