from __future__ import annotations

from fastapi import FastAPI

from ..api import create_api_app
from ..core.registry import Ledger


def create_app(ledger: Ledger | None = None) -> FastAPI:
    """Create the full app. There is no frontend; this is the API alone."""
    return create_api_app(ledger)


# Convenience for uvicorn: `uvicorn pestledger.runtime.app:app`
app = create_app()
