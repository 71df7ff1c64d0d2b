from __future__ import annotations

import logging
import threading
from dataclasses import replace

from ..records import Facility
from ..results import Err, ErrorCode, Ok, Result


logger = logging.getLogger(__name__)


class FacilityRegistry:
    """Facility records keyed by sequential id, with an owner index.

    The record map and the owner map are always written together under the lock;
    there is no path that touches one without the other.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._facilities: dict[int, Facility] = {}
        self._owners: dict[int, str] = {}
        self._last_id = 0

    def last_id(self) -> int:
        with self._lock:
            return self._last_id

    def _write_locked(self, facility: Facility, owner: str | None = None) -> None:
        self._facilities[facility.id] = facility
        if owner is not None:
            self._owners[facility.id] = owner

    def register(
        self,
        name: str,
        address: str,
        square_footage: int,
        facility_type: str,
        contact_name: str,
        contact_info: str,
        caller: str,
        current_height: int,
    ) -> Result[int]:
        if int(square_footage) < 0:
            raise ValueError("square_footage must be >= 0")

        with self._lock:
            new_id = self._last_id + 1
            facility = Facility(
                id=new_id,
                name=name,
                address=address,
                square_footage=int(square_footage),
                facility_type=facility_type,
                contact_name=contact_name,
                contact_info=contact_info,
                registration_date=int(current_height),
            )
            self._write_locked(facility, owner=caller)
            self._last_id = new_id

        logger.info("Registered facility %d for owner %s at height %d", new_id, caller, int(current_height))
        return Ok(new_id)

    def get_facility(self, facility_id: int) -> Facility | None:
        with self._lock:
            return self._facilities.get(int(facility_id))

    def owner_of(self, facility_id: int) -> str | None:
        with self._lock:
            return self._owners.get(int(facility_id))

    def is_owner(self, facility_id: int, candidate: str) -> bool:
        with self._lock:
            owner = self._owners.get(int(facility_id))
            return owner is not None and owner == candidate

    def update(
        self,
        facility_id: int,
        name: str,
        address: str,
        square_footage: int,
        facility_type: str,
        contact_name: str,
        contact_info: str,
        caller: str,
    ) -> Result[bool]:
        if int(square_footage) < 0:
            raise ValueError("square_footage must be >= 0")

        fid = int(facility_id)
        with self._lock:
            current = self._facilities.get(fid)
            owner = self._owners.get(fid)
            # Existence before ownership: an unknown id is NOT_FOUND for every caller.
            if current is None or owner is None:
                return Err(ErrorCode.NOT_FOUND)
            if owner != caller:
                logger.warning("Facility %d update denied for non-owner %s", fid, caller)
                return Err(ErrorCode.FORBIDDEN)

            updated = replace(
                current,
                name=name,
                address=address,
                square_footage=int(square_footage),
                facility_type=facility_type,
                contact_name=contact_name,
                contact_info=contact_info,
            )
            self._write_locked(updated)

        logger.info("Updated facility %d", fid)
        return Ok(True)

    def reset(self) -> None:
        with self._lock:
            self._facilities.clear()
            self._owners.clear()
            self._last_id = 0
