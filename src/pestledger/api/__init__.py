from __future__ import annotations

from typing import Any, Sequence

from fastapi import FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from ..config import load_settings
from ..core.registry import LEDGER, Ledger
from .parsing import parse_int, parse_text
from .responses import ok, require_caller, result_response
from .routes import mount_facilities_api, mount_technicians_api


def create_api_app(ledger: Ledger | None = None, *, cors_origins: Sequence[str] | None = None) -> FastAPI:
    """Build the HTTP app around `ledger` (the process-wide LEDGER by default).

    CORS is enabled only for `cors_origins`, which defaults to
    PESTLEDGER_CORS_ORIGINS.
    """

    ledger = LEDGER if ledger is None else ledger
    origins = list(load_settings().cors_origins if cors_origins is None else cors_origins)
    app = FastAPI(title="pestledger", version="0.1.0")

    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    mount_facilities_api(app, ledger)
    mount_technicians_api(app, ledger)

    @app.get("/healthz")
    def healthz() -> dict[str, bool]:
        return {"ok": True}

    @app.get("/api/status")
    def status() -> dict[str, Any]:
        return {
            "height": ledger.clock.current_height(),
            "lastFacilityId": ledger.facilities.last_id(),
            "lastTechnicianId": ledger.technicians.last_id(),
            "admin": ledger.admin.get_admin(),
        }

    @app.post("/api/clock/advance")
    def advance_clock(body: dict) -> dict[str, Any]:
        try:
            blocks = parse_int(body.get("blocks", 1), field="blocks", minimum=0)
        except ValueError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        return ok(ledger.clock.advance(blocks))

    @app.post("/api/reset")
    def reset_ledger() -> dict[str, bool]:
        ledger.reset()
        return {"ok": True}

    @app.get("/api/admin")
    def get_admin() -> dict[str, Any]:
        return ok(ledger.admin.get_admin())

    @app.put("/api/admin")
    def set_admin(body: dict, x_caller: str | None = Header(default=None)) -> Any:
        caller = require_caller(x_caller)
        try:
            new_admin = parse_text(body, "admin").strip()
            if not new_admin:
                raise ValueError("admin cannot be empty")
        except ValueError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        return result_response(ledger.admin.set_admin(new_admin, caller))

    return app
