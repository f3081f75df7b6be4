"""
models/camera.py
----------------
Domain model for registered cameras.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Camera:
    """
    A camera installed somewhere in the monitored area.

    Attributes:
        number: Operator-assigned camera number (kept as text, e.g. 'CAM-07').
        address: Street address of the installation.
        type: Camera kind (e.g. 'dome', 'ptz').
        location: Coordinates or zone name.
        resolution: Sensor resolution label (e.g. '1080p').
        id: Database primary key (None for new records).
    """
    number: str
    address: str
    type: str
    location: str
    resolution: str
    id: Optional[int] = None
