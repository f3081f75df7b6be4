"""
services/validation.py
----------------------
Declarative field rules for every record type and the single function
that checks a raw request body against them.

Validation is purely structural: presence, non-empty text, and
integers within the column's range. It never touches the database.
"""

import re
from dataclasses import dataclass
from typing import Any, Optional

from models.record_type import RecordType

_INT_PATTERN = re.compile(r"^[+-]?\d+$")

# Largest value a PostgreSQL INTEGER column holds.
MAX_INTEGER = 2**31 - 1


@dataclass(frozen=True)
class FieldRule:
    """
    Rule for one field of a record.

    Attributes:
        name: Key expected in the request body (and column name).
        message: Error text reported when the field is missing, blank or invalid.
        kind: 'string' or 'integer'.
        required: Whether the field must be present.
        minimum: Lowest accepted value for integer fields.
        maximum: Highest accepted value for integer fields.
    """
    name: str
    message: str
    kind: str = "string"
    required: bool = True
    minimum: Optional[int] = None
    maximum: Optional[int] = None


RULES: dict[RecordType, tuple[FieldRule, ...]] = {
    RecordType.ALERT: (
        FieldRule("type", "Type is required"),
    ),
    RecordType.PERSONAL_DATA: (
        FieldRule(
            "age", "Age must be a non-negative integer",
            kind="integer", minimum=0, maximum=MAX_INTEGER,
        ),
        FieldRule("sex", "Sex is required"),
        FieldRule("emotion", "Emotion is required"),
    ),
    RecordType.VEHICULAR: (
        FieldRule("type", "Type is required"),
        FieldRule("description", "Description is required"),
        FieldRule("date", "Date is required"),
        FieldRule("location", "Location is required"),
        FieldRule("plates", "Plates are required"),
    ),
    RecordType.CAMERA: (
        FieldRule("number", "Camera number is required"),
        FieldRule("address", "Address is required"),
        FieldRule("type", "Type is required"),
        FieldRule("location", "Location is required"),
        FieldRule("resolution", "Resolution is required"),
    ),
}


def _to_int(value: Any) -> Optional[int]:
    """Return value as an int, or None if it is not an integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INT_PATTERN.match(value.strip()):
        return int(value.strip())
    return None


def _problem(rule: FieldRule, data: dict) -> Optional[str]:
    """Error message for `rule` against `data`, or None if it passes."""
    if rule.name not in data or data[rule.name] is None:
        return rule.message if rule.required else None

    value = data[rule.name]
    if rule.kind == "integer":
        number = _to_int(value)
        if number is None:
            return rule.message
        if rule.minimum is not None and number < rule.minimum:
            return rule.message
        if rule.maximum is not None and number > rule.maximum:
            return f"{rule.name.capitalize()} must be at most {rule.maximum}"
        return None

    if not isinstance(value, str):
        return f"{rule.name.capitalize()} must be a string"
    return None if value.strip() else rule.message


def validate(record_type: RecordType, data: Any) -> list[dict]:
    """
    Check a raw request body against the rules of `record_type`.

    Args:
        record_type: Which rule set to apply.
        data: The decoded JSON body (expected to be a mapping).

    Returns:
        An empty list when the body is valid, otherwise one
        ``{"field", "message"}`` dict per failing field, in declared order.
    """
    if not isinstance(data, dict):
        return [{"field": "body", "message": "Request body must be a JSON object"}]

    errors = []
    for rule in RULES[record_type]:
        message = _problem(rule, data)
        if message is not None:
            errors.append({"field": rule.name, "message": message})
    return errors


def clean(record_type: RecordType, data: dict) -> dict:
    """
    Keep only the declared fields of an already validated body.

    Integer fields are converted to ``int``; unknown keys are dropped.
    """
    values = {}
    for rule in RULES[record_type]:
        value = data.get(rule.name)
        if rule.kind == "integer" and value is not None:
            value = _to_int(value)
        values[rule.name] = value
    return values
