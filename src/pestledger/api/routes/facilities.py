from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Header

from ...core.registry import Ledger
from ..parsing import parse_facility_body
from ..responses import bad_request, ok, require_caller, result_response
from ..serializers import facility_to_dict


def mount_facilities_api(app: FastAPI, ledger: Ledger) -> None:
    """Mount facility registration, lookup and owner-only update endpoints."""

    registry = ledger.facilities

    @app.post("/api/facilities")
    def register_facility(body: dict, x_caller: str | None = Header(default=None)) -> Any:
        caller = require_caller(x_caller)
        try:
            fields = parse_facility_body(body)
        except ValueError as ex:
            raise bad_request(ex)
        result = registry.register(**fields, caller=caller, current_height=ledger.clock.current_height())
        return result_response(result)

    @app.get("/api/facilities/{facility_id}")
    def get_facility(facility_id: int) -> dict[str, Any]:
        f = registry.get_facility(facility_id)
        if f is None:
            return ok(None)
        return ok(facility_to_dict(f, owner=registry.owner_of(facility_id)))

    @app.get("/api/facilities/{facility_id}/owner")
    def is_facility_owner(facility_id: int, candidate: str) -> dict[str, Any]:
        return ok(registry.is_owner(facility_id, candidate))

    @app.put("/api/facilities/{facility_id}")
    def update_facility(facility_id: int, body: dict, x_caller: str | None = Header(default=None)) -> Any:
        caller = require_caller(x_caller)
        try:
            fields = parse_facility_body(body)
        except ValueError as ex:
            raise bad_request(ex)
        return result_response(registry.update(facility_id, **fields, caller=caller))
