"""
services/record_service.py
--------------------------
The validate-then-persist pipeline shared by every record type.
"""

from typing import Any, Optional

from models.record_type import RecordType
from repositories import REPOSITORIES
from services.validation import clean, validate
from utils.errors import ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)


class RecordService:
    """Creates and lists records through the repository of each type."""

    def __init__(self, repositories: Optional[dict] = None):
        self.repositories = REPOSITORIES if repositories is None else repositories

    def create(self, record_type: RecordType, payload: Any):
        """
        Validate a request body and store it.

        Args:
            record_type: Which table the record belongs to.
            payload: Decoded JSON body.

        Returns:
            The stored record, including its generated `id`.

        Raises:
            ValidationError: If any field rule fails. Nothing is written.
            PersistenceError: If the insert fails.
        """
        errors = validate(record_type, payload)
        if errors:
            logger.info(
                f"Rejected {record_type.value}: "
                f"{', '.join(e['field'] for e in errors)}"
            )
            raise ValidationError(errors)

        return self.repositories[record_type].add(clean(record_type, payload))

    def list(self, record_type: RecordType) -> list:
        """Return every stored record of a type."""
        return self.repositories[record_type].list_all()
