from __future__ import annotations

from .core import (
    AdminOracle,
    AdminStore,
    Err,
    ErrorCode,
    Facility,
    LedgerClock,
    Ok,
    Result,
    Technician,
)
from .core.registry import LEDGER, FacilityRegistry, Ledger, TechnicianRegistry
from .runtime.server import PestLedgerServer, run
from .sdk.client import PestLedgerClient

__all__ = [
    "run",
    "PestLedgerServer",
    "PestLedgerClient",
    "Ledger",
    "LEDGER",
    "FacilityRegistry",
    "TechnicianRegistry",
    "AdminOracle",
    "AdminStore",
    "LedgerClock",
    "Facility",
    "Technician",
    "Ok",
    "Err",
    "ErrorCode",
    "Result",
]
