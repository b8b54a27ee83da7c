from django.contrib import admin
from registry.models import Citizen


@admin.register(Citizen)
class CitizenAdmin(admin.ModelAdmin):
    list_display = ("national_id", "full_name", "email", "phone", "nationality", "created_at")
    list_filter = ("nationality", "blood_group", "created_at")
    search_fields = ("national_id", "first_name", "last_name", "full_name", "email")
    readonly_fields = ("created_at", "updated_at")
    fieldsets = (
        (
            "Identity",
            {"fields": ("national_id", "first_name", "last_name", "full_name", "date_of_birth")},
        ),
        ("Contact", {"fields": ("email", "phone")}),
        ("Profile", {"fields": ("occupations", "nationality", "blood_group")}),
        ("Timestamps", {"fields": ("created_at", "updated_at"), "classes": ("collapse",)}),
    )

    def get_readonly_fields(self, request, obj=None):
        """The national ID cannot be edited once the citizen exists."""
        readonly = super().get_readonly_fields(request, obj)
        if obj is not None:
            return ("national_id", *readonly)
        return readonly
