"""
handlers/personal_data_handler.py
----------------------------------
Routes for personal-data readings: POST and GET /personal-data.
"""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Body, status

from models.record_type import RecordType
from services.record_service import RecordService

router = APIRouter(tags=["personal-data"])
record_service = RecordService()


@router.post("/personal-data", status_code=status.HTTP_201_CREATED)
def create_personal_data(payload: Any = Body(...)) -> dict:
    """
    Handle POST /personal-data.

    Body: {age, sex, emotion}. `age` must be an integer >= 0; a numeric
    string such as "31" is accepted and stored as an integer.
    """
    record = record_service.create(RecordType.PERSONAL_DATA, payload)
    return asdict(record)


@router.get("/personal-data")
def list_personal_data() -> list[dict]:
    """Handle GET /personal-data - every stored reading."""
    return [asdict(r) for r in record_service.list(RecordType.PERSONAL_DATA)]
