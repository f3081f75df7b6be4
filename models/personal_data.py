"""
models/personal_data.py
-----------------------
Domain model for anonymous personal-data readings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PersonalData:
    """
    Demographic and emotion estimate for one observed person.

    Attributes:
        age: Estimated age in years, never negative.
        sex: Estimated sex label.
        emotion: Dominant emotion label (e.g. 'calm', 'angry').
        id: Database primary key (None for new records).
    """
    age: int
    sex: str
    emotion: str
    id: Optional[int] = None
