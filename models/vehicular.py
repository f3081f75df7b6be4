"""
models/vehicular.py
-------------------
Domain model for vehicular incidents.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class VehicularIncident:
    """
    A traffic incident reported by a camera operator or detector.

    Attributes:
        type: Incident category (e.g. 'crash', 'red_light').
        description: Human-readable account of what happened.
        date: Date/time as sent by the client; stored verbatim, never parsed.
        location: Where it happened.
        plates: License plate(s) of the vehicles involved.
        id: Database primary key (None for new records).
    """
    type: str
    description: str
    date: str
    location: str
    plates: str
    id: Optional[int] = None
