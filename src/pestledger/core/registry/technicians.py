from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import Iterable

from ..admin import AdminOracle
from ..records import Technician
from ..results import Err, ErrorCode, Ok, Result


logger = logging.getLogger(__name__)


class TechnicianRegistry:
    """Technician records keyed by sequential id.

    Two co-indices are kept in lock-step with the record map:
    - `_accounts`: technician id -> bound account
    - `_account_index`: account -> technician id

    Status and certification changes are admin-only; the admin identity is asked
    from `admin_oracle` on every call.
    """

    def __init__(self, admin_oracle: AdminOracle) -> None:
        self._lock = threading.RLock()
        self._admin_oracle = admin_oracle
        self._technicians: dict[int, Technician] = {}
        self._accounts: dict[int, str] = {}
        self._account_index: dict[str, int] = {}
        self._last_id = 0

    def last_id(self) -> int:
        with self._lock:
            return self._last_id

    def _write_locked(self, technician: Technician, account: str | None = None) -> None:
        self._technicians[technician.id] = technician
        if account is not None:
            self._accounts[technician.id] = account
            self._account_index[account] = technician.id

    def _is_admin(self, caller: str) -> bool:
        return caller == self._admin_oracle.get_admin()

    def register(
        self,
        name: str,
        license_number: str,
        certification_expiry: int,
        specializations: Iterable[str],
        account: str,
        current_height: int,
    ) -> Result[int]:
        with self._lock:
            if account in self._account_index:
                logger.warning("Account %s is already bound to technician %d", account, self._account_index[account])
                return Err(ErrorCode.CONFLICT)

            new_id = self._last_id + 1
            technician = Technician(
                id=new_id,
                name=name,
                license_number=license_number,
                specializations=tuple(str(s) for s in specializations),
                certification_date=int(current_height),
                certification_expiry=int(certification_expiry),
                active=True,
            )
            self._write_locked(technician, account=account)
            self._last_id = new_id

        logger.info("Registered technician %d bound to %s at height %d", new_id, account, int(current_height))
        return Ok(new_id)

    def get_technician(self, technician_id: int) -> Technician | None:
        with self._lock:
            return self._technicians.get(int(technician_id))

    def get_technician_by_account(self, account: str) -> Technician | None:
        with self._lock:
            tid = self._account_index.get(account)
            if tid is None:
                return None
            return self._technicians.get(tid)

    def account_of(self, technician_id: int) -> str | None:
        with self._lock:
            return self._accounts.get(int(technician_id))

    def _admin_update(self, technician_id: int, caller: str, **changes: object) -> Result[bool]:
        tid = int(technician_id)
        with self._lock:
            current = self._technicians.get(tid)
            if current is None:
                return Err(ErrorCode.NOT_FOUND)
            if not self._is_admin(caller):
                logger.warning("Technician %d change denied for non-admin %s", tid, caller)
                return Err(ErrorCode.FORBIDDEN)
            self._write_locked(replace(current, **changes))

        logger.info("Updated technician %d: %s", tid, changes)
        return Ok(True)

    def update_status(self, technician_id: int, active: bool, caller: str) -> Result[bool]:
        return self._admin_update(technician_id, caller, active=bool(active))

    def renew_certification(self, technician_id: int, new_expiry: int, caller: str) -> Result[bool]:
        # Renewal never touches `active`; a deactivated technician stays deactivated.
        return self._admin_update(technician_id, caller, certification_expiry=int(new_expiry))

    def is_verified(self, technician_id: int, caller: str, current_height: int) -> bool:
        tid = int(technician_id)
        with self._lock:
            technician = self._technicians.get(tid)
            account = self._accounts.get(tid)
        if technician is None or account is None:
            return False
        return (
            technician.active
            and technician.certification_expiry > int(current_height)
            and account == caller
        )

    def reset(self) -> None:
        with self._lock:
            self._technicians.clear()
            self._accounts.clear()
            self._account_index.clear()
            self._last_id = 0
