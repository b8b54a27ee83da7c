"""
Error taxonomy for the citizen registry.

Every error carries the HTTP status it maps to, so the service layer can turn
any of them into a response envelope without a lookup table.
"""

from rest_framework import status


class RegistryError(Exception):
    """Base class for all registry failures."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class CitizenValidationError(RegistryError):
    """A field is missing, empty after trimming, or too long."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid citizen data"

    def __init__(self, message=None, fields=None):
        super().__init__(message)
        self.fields = list(fields or [])


class CitizenConflict(RegistryError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Citizen already exists for this NDI_ID"


class CitizenNotFound(RegistryError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Citizen not found"


class MalformedKey(RegistryError):
    """The internal record id is not a valid storage identifier."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid citizen id"


class StorageError(RegistryError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"
