from __future__ import annotations

from dataclasses import dataclass

from ...config import Settings, load_settings
from ..admin import AdminStore
from ..clock import LedgerClock
from .facilities import FacilityRegistry
from .technicians import TechnicianRegistry


@dataclass(frozen=True)
class Ledger:
    """Everything a host process owns: clock, admin, and both registries.

    The registries never reference each other; they only share the host.
    """

    clock: LedgerClock
    admin: AdminStore
    facilities: FacilityRegistry
    technicians: TechnicianRegistry

    @classmethod
    def create(cls, *, admin: str, start_height: int = 0) -> "Ledger":
        admin_store = AdminStore(admin)
        return cls(
            clock=LedgerClock(start_height),
            admin=admin_store,
            facilities=FacilityRegistry(),
            technicians=TechnicianRegistry(admin_store),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Ledger":
        return cls.create(admin=settings.admin, start_height=settings.start_height)

    def reset(self) -> None:
        self.facilities.reset()
        self.technicians.reset()
        self.admin.reset()
        self.clock.reset()


LEDGER = Ledger.from_settings(load_settings())
