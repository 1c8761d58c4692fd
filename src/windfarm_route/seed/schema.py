"""JSON schema validation for turbine layout seed files."""

import math


def validate_seed(data) -> tuple[bool, list[str]]:
    """Validate seed data: an array of records with a 3-number position.

    Args:
        data: Parsed JSON data to validate

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    if not isinstance(data, list):
        return False, ["Seed must be an array of turbine records"]

    errors = []
    for i, record in enumerate(data):
        errors.extend(_validate_record(record, f"[{i}]"))

    return len(errors) == 0, errors


def _validate_record(record, path: str) -> list[str]:
    """Validate a single turbine record."""
    if not isinstance(record, dict):
        return [f"{path} must be an object"]

    if "position" not in record:
        return [f"{path} missing required field: position"]

    return _validate_position(record["position"], f"{path}.position")


def _validate_position(position, path: str) -> list[str]:
    """Validate a 3-element number array."""
    if not isinstance(position, list):
        return [f"{path} must be an array"]

    if len(position) != 3:
        return [f"{path} must have exactly 3 elements, got {len(position)}"]

    errors = []
    for axis, value in zip("xyz", position):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"{path}.{axis} must be a number")
        elif not _is_finite(value):
            errors.append(f"{path}.{axis} must be finite")

    return errors


def _is_finite(value) -> bool:
    """True if value converts to a finite float (huge JSON ints do not)."""
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False
