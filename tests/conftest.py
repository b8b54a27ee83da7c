"""
Pytest configuration and shared fixtures for the test suite.
"""

import pytest
from registry.models.citizen import Citizen


@pytest.fixture
def sample_citizen_data():
    """Citizen payload using the friendly naming convention."""
    return {
        "NDI_ID": "A1",
        "FirstName": "Jane",
        "LastName": "Doe",
        "DoB": "01-01-2000",
        "Email": "j@d.com",
        "Phone": "123",
        "Nationality": "X",
        "Blood_Group": "O+",
    }


@pytest.fixture
def sample_wire_citizen_data():
    """Citizen payload using the wire naming convention."""
    return {
        "nic": "200012345678",
        "firstName": "Kamal",
        "lastName": "Perera",
        "dob": "20-11-2000",
        "email": "kamal@example.com",
        "phone": "0771234567",
        "occupation": "Software Engineer, SCU",
        "nationality": "Sri Lankan",
        "bloodGroup": "B+",
    }


@pytest.fixture
def create_citizen(db):
    """Factory fixture to create a test citizen directly in the database."""
    counter = {"n": 0}

    def _create_citizen(**kwargs):
        counter["n"] += 1
        data = {
            "national_id": f"NID{counter['n']:04d}",
            "first_name": "John",
            "last_name": "Smith",
            "full_name": "John Smith",
            "date_of_birth": "15-05-1990",
            "email": f"john{counter['n']}@example.com",
            "phone": "0711111111",
            "occupations": ["Teacher"],
            "nationality": "Sri Lankan",
            "blood_group": "A+",
        }
        data.update(kwargs)
        return Citizen.objects.create(**data)

    return _create_citizen
