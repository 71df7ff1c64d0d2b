from __future__ import annotations

from typing import Any

from ...core.records import Facility, Technician


def facility_to_dict(f: Facility, *, owner: str | None = None) -> dict[str, Any]:
    out: dict[str, Any] = {
        "id": int(f.id),
        "name": f.name,
        "address": f.address,
        "squareFootage": int(f.square_footage),
        "facilityType": f.facility_type,
        "contactName": f.contact_name,
        "contactInfo": f.contact_info,
        "registrationDate": int(f.registration_date),
    }
    if owner is not None:
        out["owner"] = owner
    return out


def technician_to_dict(t: Technician, *, account: str | None = None) -> dict[str, Any]:
    out: dict[str, Any] = {
        "id": int(t.id),
        "name": t.name,
        "licenseNumber": t.license_number,
        "specializations": list(t.specializations),
        "certificationDate": int(t.certification_date),
        "certificationExpiry": int(t.certification_expiry),
        "active": bool(t.active),
    }
    if account is not None:
        out["account"] = account
    return out
