"""
repositories/personal_data_repo.py
----------------------------------
Data access layer for personal-data readings.
"""

from models.personal_data import PersonalData
from repositories.record_repo import RecordRepository


class PersonalDataRepository(RecordRepository):
    """Repository for the personal_data table."""

    table = "personal_data"
    columns = ("age", "sex", "emotion")
    model = PersonalData
