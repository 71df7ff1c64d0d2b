from __future__ import annotations

from .facilities import FacilityRegistry
from .service import LEDGER, Ledger
from .technicians import TechnicianRegistry

__all__ = ["FacilityRegistry", "TechnicianRegistry", "Ledger", "LEDGER"]
