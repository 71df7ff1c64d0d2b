from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Header

from ...core.registry import Ledger
from ..parsing import parse_bool, parse_int, parse_technician_body, parse_text
from ..responses import bad_request, ok, require_caller, result_response
from ..serializers import technician_to_dict


def mount_technicians_api(app: FastAPI, ledger: Ledger) -> None:
    """Mount technician registration, admin status/renewal and verification endpoints."""

    registry = ledger.technicians

    def _technician_payload(t) -> dict[str, Any] | None:
        if t is None:
            return None
        return technician_to_dict(t, account=registry.account_of(t.id))

    @app.post("/api/technicians")
    def register_technician(body: dict) -> Any:
        try:
            fields = parse_technician_body(body)
            account = parse_text(body, "account").strip()
            if not account:
                raise ValueError("account cannot be empty")
        except ValueError as ex:
            raise bad_request(ex)
        result = registry.register(**fields, account=account, current_height=ledger.clock.current_height())
        return result_response(result)

    # Identities are opaque text, so they travel as a query parameter, never in the path.
    # Declared before /{technician_id} so "by-account" is never taken as an id.
    @app.get("/api/technicians/by-account")
    def get_technician_by_account(account: str) -> dict[str, Any]:
        return ok(_technician_payload(registry.get_technician_by_account(account)))

    @app.get("/api/technicians/{technician_id}")
    def get_technician(technician_id: int) -> dict[str, Any]:
        return ok(_technician_payload(registry.get_technician(technician_id)))

    @app.put("/api/technicians/{technician_id}/status")
    def update_technician_status(technician_id: int, body: dict, x_caller: str | None = Header(default=None)) -> Any:
        caller = require_caller(x_caller)
        try:
            active = parse_bool(body.get("active"), field="active")
        except ValueError as ex:
            raise bad_request(ex)
        return result_response(registry.update_status(technician_id, active, caller))

    @app.put("/api/technicians/{technician_id}/certification")
    def renew_certification(technician_id: int, body: dict, x_caller: str | None = Header(default=None)) -> Any:
        caller = require_caller(x_caller)
        try:
            new_expiry = parse_int(body.get("certificationExpiry"), field="certificationExpiry", minimum=0)
        except ValueError as ex:
            raise bad_request(ex)
        return result_response(registry.renew_certification(technician_id, new_expiry, caller))

    @app.get("/api/technicians/{technician_id}/verified")
    def is_verified_technician(
        technician_id: int,
        height: int | None = None,
        x_caller: str | None = Header(default=None),
    ) -> dict[str, Any]:
        caller = require_caller(x_caller)
        current_height = ledger.clock.current_height() if height is None else int(height)
        return ok(registry.is_verified(technician_id, caller, current_height))
