from __future__ import annotations

from .fields import (
    parse_bool,
    parse_facility_body,
    parse_int,
    parse_tags,
    parse_technician_body,
    parse_text,
)

__all__ = [
    "parse_bool",
    "parse_int",
    "parse_text",
    "parse_tags",
    "parse_facility_body",
    "parse_technician_body",
]
