from __future__ import annotations

from .client import PestLedgerClient

__all__ = ["PestLedgerClient"]
