"""
repositories/vehicular_repo.py
------------------------------
Data access layer for vehicular incidents.
"""

from models.vehicular import VehicularIncident
from repositories.record_repo import RecordRepository


class VehicularRepository(RecordRepository):
    """Repository for the vehicular table."""

    table = "vehicular"
    columns = ("type", "description", "date", "location", "plates")
    model = VehicularIncident
