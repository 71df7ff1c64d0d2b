from __future__ import annotations

from .admin import AdminOracle, AdminStore
from .clock import LedgerClock
from .records import Facility, Technician
from .results import Err, ErrorCode, Ok, Result

__all__ = [
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
