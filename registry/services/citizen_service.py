from rest_framework import status
from registry.api.serializers import CitizenSerializer
from registry.exceptions import CitizenValidationError, RegistryError
from registry.services.citizen_store import CitizenStore
from registry.services.normalizer import normalize_citizen_payload, validate_required_fields
import logging

logger = logging.getLogger(__name__)


class CitizenService:
    """Service class for citizen registry operations."""

    def __init__(self, store=None):
        self.store = store or CitizenStore()

    def create_citizen(self, payload) -> dict:
        """
        Register a new citizen.

        Args:
            payload: Request body in either naming convention

        Returns:
            dict: Contains 'success', 'status', 'message' and the created record in 'data'
        """
        try:
            record = normalize_citizen_payload(payload)
            validate_required_fields(record)
            citizen = self.store.create(record)
        except RegistryError as e:
            return self._failure(e, "creating citizen")
        except Exception as e:
            return self._server_error(e, "creating citizen")

        logger.info(f"Created citizen {citizen.national_id}")
        return {
            "success": True,
            "status": status.HTTP_201_CREATED,
            "message": "Citizen created",
            "data": CitizenSerializer(citizen).data,
        }

    def list_citizens(self, name=None, national_id=None, email=None) -> dict:
        """
        List citizens, most recent first, optionally filtered.

        Returns:
            dict: Contains 'success', 'status', 'count' and the records in 'data'
        """
        try:
            citizens = self.store.list(name=name, national_id=national_id, email=email)
        except RegistryError as e:
            return self._failure(e, "listing citizens")
        except Exception as e:
            return self._server_error(e, "listing citizens")

        return {
            "success": True,
            "status": status.HTTP_200_OK,
            "count": len(citizens),
            "data": CitizenSerializer(citizens, many=True).data,
        }

    def get_citizen(self, national_id: str) -> dict:
        return self._lookup(self.store.get_by_key, national_id)

    def get_citizen_by_id(self, pk) -> dict:
        return self._lookup(self.store.get_by_id, pk)

    def find_citizen(self, criteria) -> dict:
        """
        Find one citizen from a search body.

        The first key present wins: 'id' (storage id), then 'nic' / 'NDI_ID' /
        'nationalId' (national ID), then 'email'.
        """
        criteria = criteria if hasattr(criteria, "get") else {}
        record_id = criteria.get("id")
        national_id = (
            criteria.get("nic") or criteria.get("NDI_ID") or criteria.get("nationalId")
        )
        email = criteria.get("email")

        if record_id is not None and record_id != "":
            return self.get_citizen_by_id(record_id)
        if national_id:
            return self.get_citizen(str(national_id).strip())
        if email:
            return self._lookup(self.store.find_by_email, str(email).strip())

        return self._failure(
            CitizenValidationError("Provide id OR nic/NDI_ID OR email to search"),
            "finding citizen",
        )

    def update_citizen(self, national_id: str, payload) -> dict:
        """
        Apply a partial update to a citizen.

        Only the fields present in the payload change. The national ID in the
        payload, if any, is ignored.

        Returns:
            dict: Contains 'success', 'status', 'message' and the updated record in 'data'
        """
        try:
            fields = normalize_citizen_payload(payload, partial=True)
            requested_key = fields.pop("national_id", None)
            if requested_key and requested_key != national_id:
                logger.warning(f"Ignoring national ID change {national_id} -> {requested_key}")
            validate_required_fields(fields, partial=True)
            citizen = self.store.update_by_key(national_id, fields)
        except RegistryError as e:
            return self._failure(e, f"updating citizen {national_id}")
        except Exception as e:
            return self._server_error(e, f"updating citizen {national_id}")

        logger.info(f"Updated citizen {national_id}")
        return {
            "success": True,
            "status": status.HTTP_200_OK,
            "message": "Citizen updated",
            "data": CitizenSerializer(citizen).data,
        }

    def delete_citizen(self, national_id: str) -> dict:
        return self._delete(self.store.delete_by_key, national_id)

    def delete_citizen_by_id(self, pk) -> dict:
        return self._delete(self.store.delete_by_id, pk)

    def _lookup(self, finder, key) -> dict:
        try:
            citizen = finder(key)
        except RegistryError as e:
            return self._failure(e, f"fetching citizen {key}")
        except Exception as e:
            return self._server_error(e, f"fetching citizen {key}")

        return {
            "success": True,
            "status": status.HTTP_200_OK,
            "data": CitizenSerializer(citizen).data,
        }

    def _delete(self, remover, key) -> dict:
        try:
            national_id = remover(key)
        except RegistryError as e:
            return self._failure(e, f"deleting citizen {key}")
        except Exception as e:
            return self._server_error(e, f"deleting citizen {key}")

        logger.info(f"Deleted citizen {national_id}")
        return {
            "success": True,
            "status": status.HTTP_200_OK,
            "message": "Citizen deleted",
            "key": national_id,
        }

    def _failure(self, error: RegistryError, action: str) -> dict:
        if error.status_code >= 500:
            logger.error(f"Error {action}: {error.message}")
        else:
            logger.warning(f"Rejected {action}: {error.message}")
        return {"success": False, "status": error.status_code, "message": error.message}

    def _server_error(self, error: Exception, action: str) -> dict:
        logger.exception(f"Unexpected error {action}: {str(error)}")
        return {
            "success": False,
            "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
            "message": "Server error",
        }
