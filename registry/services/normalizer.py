"""
Request normalization for citizen payloads.

Two client conventions post the same logical record:

    wire:     nic, firstName, lastName, dob, email, phone, occupation, nationality, bloodGroup
    friendly: NDI_ID, FirstName, LastName, DoB, Email, Phone, Occupation, Nationality, Blood_Group

Both are reshaped into the canonical (model field) names before validation.
"""

import logging
from collections.abc import Mapping

from registry.exceptions import CitizenValidationError
from registry.models import Citizen

logger = logging.getLogger(__name__)

# canonical field -> (wire key, friendly key), wire key wins
FIELD_ALIASES = {
    "national_id": ("nic", "NDI_ID"),
    "first_name": ("firstName", "FirstName"),
    "last_name": ("lastName", "LastName"),
    "date_of_birth": ("dob", "DoB"),
    "email": ("email", "Email"),
    "phone": ("phone", "Phone"),
    "occupations": ("occupation", "Occupation"),
    "nationality": ("nationality", "Nationality"),
    "blood_group": ("bloodGroup", "Blood_Group"),
}

REQUIRED_FIELDS = [
    "national_id",
    "first_name",
    "last_name",
    "date_of_birth",
    "email",
    "phone",
    "nationality",
    "blood_group",
]

MISSING_FIELDS_MESSAGE = (
    "Missing required fields: NDI_ID, FirstName, LastName, DoB, Email, Phone, "
    "Nationality, Blood_Group"
)


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def _clean_string(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _pick(body: Mapping, aliases):
    """Return the first non-blank value among the alias keys, else the last present one."""
    found = None
    for key in aliases:
        if key in body:
            value = body[key]
            if not _is_blank(value):
                return value
            if found is None:
                found = value
    return found


def split_occupations(value) -> list:
    """
    Coerce an occupation value into a list.

    Lists pass through unchanged; strings are split on commas, each piece is
    trimmed and empty pieces are dropped, keeping the original order.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [piece.strip() for piece in str(value).split(",") if piece.strip()]


def normalize_citizen_payload(body, partial: bool = False) -> dict:
    """
    Reshape a request body into the canonical citizen record.

    Args:
        body: Parsed request body using either naming convention
        partial: When True only fields present in the body are returned (update)

    Returns:
        dict: Canonical record keyed by model field names
    """
    if not isinstance(body, Mapping):
        body = {}

    record = {}
    for field, aliases in FIELD_ALIASES.items():
        present = any(key in body for key in aliases)
        if partial and not present:
            continue

        value = _pick(body, aliases)
        if field == "occupations":
            record[field] = split_occupations(value)
        else:
            record[field] = _clean_string(value)

    explicit_full_name = _clean_string(body.get("fullName"))
    if explicit_full_name:
        record["full_name"] = explicit_full_name
    elif not partial:
        record["full_name"] = f"{record['first_name']} {record['last_name']}".strip()

    return record


def validate_required_fields(record: dict, partial: bool = False) -> None:
    """
    Check that required fields are non-empty after trimming.

    With partial=True only the required fields present in the record are
    checked, so an update may omit them but may not blank them out.

    Also checks that no text field exceeds the column length of the model.

    Raises:
        CitizenValidationError: If any required field is missing or empty, or
            any text field is too long
    """
    missing = [
        field
        for field in REQUIRED_FIELDS
        if (not partial or field in record) and not _clean_string(record.get(field))
    ]
    if missing:
        logger.warning(f"Citizen payload rejected, missing fields: {', '.join(missing)}")
        raise CitizenValidationError(MISSING_FIELDS_MESSAGE, fields=missing)

    too_long = [
        field
        for field, value in record.items()
        if isinstance(value, str) and len(value) > _max_length(field)
    ]
    if too_long:
        names = ", ".join(
            f"{_public_name(field)} (max {_max_length(field)} characters)" for field in too_long
        )
        logger.warning(f"Citizen payload rejected, fields too long: {names}")
        raise CitizenValidationError(f"Fields too long: {names}", fields=too_long)


def _max_length(field: str):
    return Citizen._meta.get_field(field).max_length or float("inf")


def _public_name(field: str) -> str:
    if field in FIELD_ALIASES:
        return FIELD_ALIASES[field][1]
    return "fullName" if field == "full_name" else field
