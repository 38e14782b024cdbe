"""
Record Access Helpers

The engine consumes plain mappings (already-parsed CSV/JSON rows) or the
pydantic models from ocean_intel.schemas. These helpers normalize both
shapes and implement the two numeric policies used everywhere:

- Observation values: anything that is not a finite number is MISSING.
  Missing is never coerced to zero.
- Reference records: a required field that is absent or non-numeric is a
  malformed record and fails fast with ValidationError naming the field.
"""

import math
from numbers import Real
from typing import Any, Mapping, Optional

from ocean_intel.core.errors import ValidationError, missing_field


def as_record(item: Any, index: Optional[int] = None) -> Mapping[str, Any]:
    """
    Return a read-only mapping view of a record.

    Args:
        item: dict-like record or pydantic model
        index: Position in the input list (for error details)

    Raises:
        ValidationError: if item is neither a mapping nor a model
    """
    if isinstance(item, Mapping):
        return item
    if hasattr(item, "model_dump"):
        return item.model_dump()

    details = {"type": type(item).__name__}
    if index is not None:
        details["record"] = index
    raise ValidationError("Record must be a mapping", details=details)


def to_number(value: Any) -> Optional[float]:
    """
    Convert an observation value to float, or None when it is missing.

    Finite ints/floats pass through, numeric strings are parsed (archive
    rows arrive as text). None, NaN, infinities, booleans and any other
    non-numeric value are missing.

    Example:
        >>> to_number("12.5")
        12.5
        >>> to_number(0) == 0.0
        True
        >>> to_number(float("nan")) is None
        True
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Real):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number


def require_field(record: Mapping[str, Any], field: str, index: Optional[int] = None) -> Any:
    """
    Fetch a required field from a reference record.

    Raises:
        ValidationError: with details["field"] when the key is absent or None
    """
    value = record.get(field)
    if value is None:
        raise missing_field(field, index)
    return value


def require_number(record: Mapping[str, Any], field: str, index: Optional[int] = None) -> float:
    """
    Fetch a required numeric field from a reference record.

    Raises:
        ValidationError: with details["field"] when absent or non-numeric
    """
    number = to_number(record.get(field))
    if number is None:
        raise missing_field(field, index)
    return number
