from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Q
from registry.exceptions import CitizenConflict, CitizenNotFound, MalformedKey, StorageError
from registry.models import Citizen
import logging

logger = logging.getLogger(__name__)

# Largest value a BigAutoField primary key can hold
MAX_RECORD_ID = 2**63 - 1


class CitizenStore:
    """
    Persistence adapter for citizen records.

    Records are addressed by their national ID (the business key). The
    storage-assigned integer id is accepted for reads and deletes only.
    """

    def __init__(self, model=Citizen):
        self.model = model

    def create(self, record: dict):
        """
        Insert a new citizen.

        The existence check gives a clean error for the common case; the
        unique constraint on national_id rejects concurrent duplicates that
        slip past it.

        Raises:
            CitizenConflict: If the national ID is already registered
            StorageError: On any other database failure
        """
        national_id = record["national_id"]
        try:
            if self.model.objects.filter(national_id=national_id).exists():
                raise CitizenConflict()

            with transaction.atomic():
                citizen = self.model.objects.create(**record)
        except IntegrityError as e:
            logger.warning(f"Unique constraint rejected citizen {national_id}: {str(e)}")
            raise CitizenConflict() from e
        except DatabaseError as e:
            logger.error(f"Error creating citizen {national_id}: {str(e)}")
            raise StorageError() from e

        return citizen

    def list(self, name=None, national_id=None, email=None):
        """
        Return citizens, most recent first.

        Args:
            name: Case-insensitive substring matched against full, first and last name
            national_id: Exact national ID match
            email: Exact email match
        """
        queryset = self.model.objects.all()
        if national_id:
            queryset = queryset.filter(national_id=national_id)
        if email:
            queryset = queryset.filter(email=email)
        if name:
            queryset = queryset.filter(
                Q(full_name__icontains=name)
                | Q(first_name__icontains=name)
                | Q(last_name__icontains=name)
            )

        try:
            return list(queryset)
        except DatabaseError as e:
            logger.error(f"Error listing citizens: {str(e)}")
            raise StorageError() from e

    def get_by_key(self, national_id: str):
        return self._get(national_id=national_id)

    def get_by_id(self, pk):
        return self._get(pk=self._parse_pk(pk))

    def find_by_email(self, email: str):
        try:
            citizen = self.model.objects.filter(email=email).first()
        except DatabaseError as e:
            logger.error(f"Error looking up citizen by email: {str(e)}")
            raise StorageError() from e

        if citizen is None:
            raise CitizenNotFound()
        return citizen

    def update_by_key(self, national_id: str, fields: dict):
        """
        Merge the supplied fields onto an existing citizen.

        Fields absent from ``fields`` keep their stored value. The national ID
        itself is never changed. When the first or last name changes without an
        explicit full name, the full name is derived again.

        Raises:
            CitizenNotFound: If no citizen has this national ID
            StorageError: On any other database failure
        """
        updates = {key: value for key, value in fields.items() if key != "national_id"}
        citizen = self.get_by_key(national_id)

        for key, value in updates.items():
            setattr(citizen, key, value)

        if "full_name" not in updates and ("first_name" in updates or "last_name" in updates):
            citizen.full_name = f"{citizen.first_name} {citizen.last_name}".strip()
            updates["full_name"] = citizen.full_name

        try:
            # updated_at is refreshed by auto_now on every save
            citizen.save(update_fields=[*updates.keys(), "updated_at"])
        except DatabaseError as e:
            logger.error(f"Error updating citizen {national_id}: {str(e)}")
            raise StorageError() from e

        return citizen

    def delete_by_key(self, national_id: str) -> str:
        """Delete a citizen by national ID and return the deleted key."""
        try:
            deleted, _ = self.model.objects.filter(national_id=national_id).delete()
        except DatabaseError as e:
            logger.error(f"Error deleting citizen {national_id}: {str(e)}")
            raise StorageError() from e

        if not deleted:
            raise CitizenNotFound()
        return national_id

    def delete_by_id(self, pk) -> str:
        """Delete a citizen by storage id and return its national ID."""
        citizen = self.get_by_id(pk)
        national_id = citizen.national_id
        try:
            citizen.delete()
        except DatabaseError as e:
            logger.error(f"Error deleting citizen id={pk}: {str(e)}")
            raise StorageError() from e
        return national_id

    def _get(self, **lookup):
        try:
            return self.model.objects.get(**lookup)
        except self.model.DoesNotExist:
            raise CitizenNotFound()
        except DatabaseError as e:
            logger.error(f"Error fetching citizen {lookup}: {str(e)}")
            raise StorageError() from e

    @staticmethod
    def _parse_pk(pk) -> int:
        value = str(pk).strip()
        if not (value.isascii() and value.isdigit()):
            raise MalformedKey()
        record_id = int(value)
        if not 0 < record_id <= MAX_RECORD_ID:
            raise MalformedKey()
        return record_id
