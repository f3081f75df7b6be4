"""
repositories/camera_repo.py
---------------------------
Data access layer for registered cameras.
"""

from models.camera import Camera
from repositories.record_repo import RecordRepository


class CameraRepository(RecordRepository):
    """Repository for the cameras table."""

    table = "cameras"
    columns = ("number", "address", "type", "location", "resolution")
    model = Camera
