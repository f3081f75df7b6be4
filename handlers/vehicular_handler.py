"""
handlers/vehicular_handler.py
------------------------------
Routes for vehicular incidents: POST and GET /vehicular.
"""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Body, status

from models.record_type import RecordType
from services.record_service import RecordService

router = APIRouter(tags=["vehicular"])
record_service = RecordService()


@router.post("/vehicular", status_code=status.HTTP_201_CREATED)
def create_vehicular(payload: Any = Body(...)) -> dict:
    """Handle POST /vehicular. Body: {type, description, date, location, plates}."""
    incident = record_service.create(RecordType.VEHICULAR, payload)
    return asdict(incident)


@router.get("/vehicular")
def list_vehicular() -> list[dict]:
    """Handle GET /vehicular - every stored incident."""
    return [asdict(i) for i in record_service.list(RecordType.VEHICULAR)]
