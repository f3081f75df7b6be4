"""
repositories/alert_repo.py
--------------------------
Data access layer for alerts raised by detectors.
"""

from models.alert import Alert
from repositories.record_repo import RecordRepository


class AlertRepository(RecordRepository):
    """Repository for the alerts table."""

    table = "alerts"
    columns = ("type",)
    model = Alert
