from flask import request
from bionutrex.domain.invariants.exceptions import InvariantViolation

TRUE_VALUES = {"true", "1", "on", "yes"}
FALSE_VALUES = {"false", "0", "off", "no", ""}


def request_data() -> dict:
    """Multipart form fields when present, otherwise the JSON body."""
    if request.form:
        return request.form.to_dict()
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def parse_bool(value, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
    raise InvariantViolation(f"{field} must be a boolean")


def parse_int(value, field: str) -> int:
    if isinstance(value, bool):
        raise InvariantViolation(f"{field} must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvariantViolation(f"{field} must be an integer") from exc


def blank_to_none(value):
    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None
