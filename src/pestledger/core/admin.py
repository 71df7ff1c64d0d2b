from __future__ import annotations

import logging
import threading
from typing import Protocol

from .results import Err, ErrorCode, Ok, Result


logger = logging.getLogger(__name__)


class AdminOracle(Protocol):
    """Answers "who is admin" for registries that defer administrative authority."""

    def get_admin(self) -> str: ...


class AdminStore:
    """In-memory admin holder.

    Only the current admin may hand the role to someone else.
    """

    def __init__(self, admin: str) -> None:
        admin = str(admin).strip()
        if not admin:
            raise ValueError("admin cannot be empty")
        self._lock = threading.RLock()
        self._initial_admin = admin
        self._admin = admin

    def get_admin(self) -> str:
        with self._lock:
            return self._admin

    def set_admin(self, new_admin: str, caller: str) -> Result[bool]:
        new_admin = str(new_admin).strip()
        if not new_admin:
            raise ValueError("new_admin cannot be empty")
        with self._lock:
            if caller != self._admin:
                logger.warning("Admin transfer denied for caller %s", caller)
                return Err(ErrorCode.FORBIDDEN)
            self._admin = new_admin
        logger.info("Admin transferred from %s to %s", caller, new_admin)
        return Ok(True)

    def reset(self) -> None:
        with self._lock:
            self._admin = self._initial_admin
