"""
Unit tests for CitizenService - composes normalization, validation and storage.
"""

import pytest
from registry.exceptions import CitizenNotFound, StorageError
from registry.models.citizen import Citizen
from registry.services.citizen_service import CitizenService


@pytest.mark.django_db
class TestCitizenServiceCreate:
    """Test cases for citizen creation."""

    def setup_method(self):
        self.service = CitizenService()

    def test_create_citizen_success(self, sample_citizen_data):
        result = self.service.create_citizen(sample_citizen_data)

        assert result["success"] is True
        assert result["status"] == 201
        assert result["data"]["NDI_ID"] == "A1"
        assert result["data"]["fullName"] == "Jane Doe"
        assert result["data"]["Occupation"] == []
        assert Citizen.objects.filter(national_id="A1").exists()

    def test_create_citizen_missing_fields(self):
        result = self.service.create_citizen({"NDI_ID": "A1", "FirstName": "Jane"})

        assert result["success"] is False
        assert result["status"] == 400
        assert "Missing required fields" in result["message"]
        assert not Citizen.objects.exists()

    def test_create_citizen_duplicate(self, sample_citizen_data):
        self.service.create_citizen(sample_citizen_data)

        result = self.service.create_citizen({**sample_citizen_data, "FirstName": "Other"})

        assert result["success"] is False
        assert result["status"] == 409

    def test_create_citizen_storage_error(self, mocker, sample_citizen_data):
        store = mocker.MagicMock()
        store.create.side_effect = StorageError()
        service = CitizenService(store=store)

        result = service.create_citizen(sample_citizen_data)

        assert result == {"success": False, "status": 500, "message": "Server error"}

    def test_create_citizen_unexpected_error(self, mocker, sample_citizen_data):
        store = mocker.MagicMock()
        store.create.side_effect = RuntimeError("boom")
        service = CitizenService(store=store)

        result = service.create_citizen(sample_citizen_data)

        assert result["status"] == 500
        assert result["message"] == "Server error"


@pytest.mark.django_db
class TestCitizenServiceRead:
    """Test cases for listing and lookups."""

    def setup_method(self):
        self.service = CitizenService()

    def test_list_citizens(self, create_citizen):
        create_citizen()
        create_citizen()

        result = self.service.list_citizens()

        assert result["success"] is True
        assert result["count"] == 2
        assert len(result["data"]) == 2

    def test_list_citizens_storage_error(self, mocker):
        store = mocker.MagicMock()
        store.list.side_effect = StorageError()

        result = CitizenService(store=store).list_citizens(name="x")

        assert result["status"] == 500
        store.list.assert_called_once_with(name="x", national_id=None, email=None)

    def test_get_citizen(self, create_citizen):
        citizen = create_citizen(national_id="G1")

        result = self.service.get_citizen("G1")

        assert result["success"] is True
        assert result["data"]["id"] == str(citizen.pk)

    def test_get_citizen_not_found(self):
        result = self.service.get_citizen("missing")

        assert result == {"success": False, "status": 404, "message": "Citizen not found"}

    def test_get_citizen_by_id_malformed(self):
        result = self.service.get_citizen_by_id("zzz")

        assert result["status"] == 400

    def test_find_citizen_prefers_id(self, create_citizen):
        by_id = create_citizen(national_id="F1")
        create_citizen(national_id="F2")

        result = self.service.find_citizen({"id": str(by_id.pk), "nic": "F2"})

        assert result["data"]["NDI_ID"] == "F1"

    @pytest.mark.parametrize("key", ["nic", "NDI_ID", "nationalId"])
    def test_find_citizen_by_national_id(self, create_citizen, key):
        create_citizen(national_id="F3")

        result = self.service.find_citizen({key: "F3"})

        assert result["success"] is True
        assert result["data"]["NDI_ID"] == "F3"

    def test_find_citizen_by_email(self, create_citizen):
        create_citizen(national_id="F4", email="f4@example.com")

        result = self.service.find_citizen({"email": "f4@example.com"})

        assert result["data"]["NDI_ID"] == "F4"

    def test_find_citizen_without_criteria(self):
        result = self.service.find_citizen({})

        assert result["status"] == 400
        assert "Provide id" in result["message"]

    def test_find_citizen_malformed_id(self):
        assert self.service.find_citizen({"id": "65b1c2d3"})["status"] == 400

    @pytest.mark.parametrize("record_id", [0, "0", -3])
    def test_find_citizen_non_positive_id_is_malformed(self, create_citizen, record_id):
        create_citizen(national_id="F5")

        result = self.service.find_citizen({"id": record_id, "nic": "F5"})

        assert result["status"] == 400
        assert result["message"] == "Invalid citizen id"


@pytest.mark.django_db
class TestCitizenServiceWrite:
    """Test cases for updates and deletes."""

    def setup_method(self):
        self.service = CitizenService()

    def test_update_citizen_partial(self, create_citizen):
        citizen = create_citizen(national_id="U1", phone="111", nationality="Sri Lankan")

        result = self.service.update_citizen("U1", {"Phone": " 222 ", "Occupation": "A, B"})

        citizen.refresh_from_db()
        assert result["success"] is True
        assert result["message"] == "Citizen updated"
        assert citizen.phone == "222"
        assert citizen.occupations == ["A", "B"]
        assert citizen.nationality == "Sri Lankan"

    def test_update_citizen_ignores_key_change(self, create_citizen):
        create_citizen(national_id="U2")

        result = self.service.update_citizen("U2", {"NDI_ID": "U3", "Phone": "5"})

        assert result["data"]["NDI_ID"] == "U2"
        assert not Citizen.objects.filter(national_id="U3").exists()

    def test_update_citizen_rejects_blank_required_field(self, create_citizen):
        create_citizen(national_id="U4", first_name="John")

        result = self.service.update_citizen("U4", {"FirstName": "  "})

        assert result["status"] == 400
        assert Citizen.objects.get(national_id="U4").first_name == "John"

    def test_update_citizen_not_found(self):
        result = self.service.update_citizen("missing", {"Phone": "1"})

        assert result["status"] == 404

    def test_delete_citizen(self, create_citizen):
        create_citizen(national_id="D1")

        result = self.service.delete_citizen("D1")

        assert result == {
            "success": True,
            "status": 200,
            "message": "Citizen deleted",
            "key": "D1",
        }
        assert self.service.get_citizen("D1")["status"] == 404

    def test_delete_citizen_by_id(self, create_citizen):
        citizen = create_citizen(national_id="D2")

        result = self.service.delete_citizen_by_id(str(citizen.pk))

        assert result["key"] == "D2"

    def test_delete_citizen_not_found(self, mocker):
        store = mocker.MagicMock()
        store.delete_by_key.side_effect = CitizenNotFound()

        result = CitizenService(store=store).delete_citizen("missing")

        assert result["status"] == 404
