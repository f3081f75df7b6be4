"""
models/alert.py
---------------
Domain model for alerts.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Alert:
    """
    A single alert raised by an external detector.

    Attributes:
        type: Free-text alert category (e.g. 'intrusion', 'fire').
        id: Database primary key (None for new records).
    """
    type: str
    id: Optional[int] = None
