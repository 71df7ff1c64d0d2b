from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Facility:
    """A registered site.

    Notes:
    - Text fields are opaque: stored and returned, never interpreted.
    - `registration_date` is fixed at creation; updates go through
      `dataclasses.replace` and carry it over.
    - The owner is not part of the record. It lives in the registry's owner index,
      written in the same step as the record.
    """

    id: int
    name: str
    address: str
    square_footage: int
    facility_type: str
    contact_name: str
    contact_info: str
    registration_date: int


@dataclass(frozen=True, kw_only=True)
class Technician:
    """A licensed technician.

    `active` and `certification_expiry` are independent gates; whether a technician
    is verified is always recomputed from them, never stored. The bound account
    lives in the registry's account index.
    """

    id: int
    name: str
    license_number: str
    specializations: tuple[str, ...]
    certification_date: int
    certification_expiry: int
    active: bool = True
