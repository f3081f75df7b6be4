"""
handlers/camera_handler.py
---------------------------
Routes for cameras: POST /camera and GET /cameras.
"""

from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Body, status

from models.record_type import RecordType
from services.record_service import RecordService

router = APIRouter(tags=["cameras"])
record_service = RecordService()


@router.post("/camera", status_code=status.HTTP_201_CREATED)
def create_camera(payload: Any = Body(...)) -> dict:
    """Handle POST /camera. Body: {number, address, type, location, resolution}."""
    camera = record_service.create(RecordType.CAMERA, payload)
    return asdict(camera)


@router.get("/cameras")
def list_cameras() -> list[dict]:
    """Handle GET /cameras - every registered camera."""
    return [asdict(c) for c in record_service.list(RecordType.CAMERA)]
