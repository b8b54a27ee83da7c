from rest_framework import serializers
from registry.models import Citizen


class CitizenSerializer(serializers.ModelSerializer):
    """Renders a citizen using the record's public field names."""

    id = serializers.CharField(read_only=True)
    NDI_ID = serializers.CharField(source="national_id", read_only=True)
    FirstName = serializers.CharField(source="first_name", read_only=True)
    LastName = serializers.CharField(source="last_name", read_only=True)
    fullName = serializers.CharField(source="full_name", read_only=True)
    DoB = serializers.CharField(source="date_of_birth", read_only=True)
    Email = serializers.CharField(source="email", read_only=True)
    Phone = serializers.CharField(source="phone", read_only=True)
    Occupation = serializers.ListField(
        source="occupations", child=serializers.CharField(), read_only=True
    )
    Nationality = serializers.CharField(source="nationality", read_only=True)
    Blood_Group = serializers.CharField(source="blood_group", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Citizen
        fields = [
            "id",
            "NDI_ID",
            "FirstName",
            "LastName",
            "fullName",
            "DoB",
            "Email",
            "Phone",
            "Occupation",
            "Nationality",
            "Blood_Group",
            "createdAt",
            "updatedAt",
        ]
