"""
handlers/alert_handler.py
--------------------------
Routes for alerts: POST /alert and GET /alerts.
"""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Body, status

from models.record_type import RecordType
from services.record_service import RecordService

router = APIRouter(tags=["alerts"])
record_service = RecordService()


@router.post("/alert", status_code=status.HTTP_201_CREATED)
def create_alert(payload: Any = Body(...)) -> dict:
    """Handle POST /alert - store a new alert. Body: {type}."""
    alert = record_service.create(RecordType.ALERT, payload)
    return asdict(alert)


@router.get("/alerts")
def list_alerts() -> list[dict]:
    """Handle GET /alerts - every stored alert."""
    return [asdict(a) for a in record_service.list(RecordType.ALERT)]
