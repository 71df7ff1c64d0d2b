from __future__ import annotations

from typing import Any


def parse_bool(value: Any, *, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        raise ValueError(f"Missing {field}")
    s = str(value).strip().lower()
    if s in {"1", "true", "yes", "on"}:
        return True
    if s in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Invalid {field}")


def parse_text(body: dict[str, Any], field: str) -> str:
    if field not in body or body[field] is None:
        raise ValueError(f"Missing field: {field}")
    value = body[field]
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value


def parse_int(value: Any, *, field: str, minimum: int | None = None) -> int:
    if value is None:
        raise ValueError(f"Missing field: {field}")
    # bool is an int subclass; reject it so `true` doesn't become height 1.
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        value = int(value)
    try:
        out = int(value)
    except (TypeError, ValueError) as ex:
        raise ValueError(f"{field} must be an integer") from ex
    if minimum is not None and out < minimum:
        raise ValueError(f"{field} must be >= {minimum}")
    return out


def parse_tags(value: Any, *, field: str) -> list[str]:
    if value is None:
        raise ValueError(f"Missing field: {field}")
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"{field} must be a list of strings")
    return list(value)


def parse_facility_body(body: dict[str, Any]) -> dict[str, Any]:
    """Validate a facility create/update body and return core keyword arguments."""

    return {
        "name": parse_text(body, "name"),
        "address": parse_text(body, "address"),
        "square_footage": parse_int(body.get("squareFootage"), field="squareFootage", minimum=0),
        "facility_type": parse_text(body, "facilityType"),
        "contact_name": parse_text(body, "contactName"),
        "contact_info": parse_text(body, "contactInfo"),
    }


def parse_technician_body(body: dict[str, Any]) -> dict[str, Any]:
    return {
        "name": parse_text(body, "name"),
        "license_number": parse_text(body, "licenseNumber"),
        "certification_expiry": parse_int(body.get("certificationExpiry"), field="certificationExpiry", minimum=0),
        "specializations": parse_tags(body.get("specializations"), field="specializations"),
    }
