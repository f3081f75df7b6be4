"""
models/record_type.py
---------------------
Identifiers of the four record types the API stores.
"""

from enum import Enum


class RecordType(str, Enum):
    """One value per route family and per table."""
    ALERT = "alert"
    PERSONAL_DATA = "personal-data"
    VEHICULAR = "vehicular"
    CAMERA = "camera"
