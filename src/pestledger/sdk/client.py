from __future__ import annotations

from typing import Any, Iterable

import httpx

from ..core.results import Err, ErrorCode, Ok, Result


_CORE_ERRORS = {int(c) for c in ErrorCode}


class PestLedgerClient:
    """HTTP client for a running pestledger server.

    Mirrors the registry operations. Core failures come back as `Err(code)`;
    transport problems (bad request, missing caller, server errors) raise
    `RuntimeError`.

    `caller` is sent as the `X-Caller` header; pass `caller=` per call to act as
    someone else. An existing `httpx.Client` (e.g. a FastAPI TestClient) can be
    injected with `http_client`.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        caller: str | None = None,
        *,
        http_client: httpx.Client | None = None,
        timeout_s: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.caller = caller
        self._http_client = http_client
        self._timeout_s = float(timeout_s)

    def as_caller(self, caller: str) -> "PestLedgerClient":
        return PestLedgerClient(
            self.base_url,
            caller,
            http_client=self._http_client,
            timeout_s=self._timeout_s,
        )

    def _send(self, method: str, path: str, *, caller: str | None = None, **kwargs: Any) -> httpx.Response:
        who = caller if caller is not None else self.caller
        headers = {"X-Caller": who} if who else {}
        if self._http_client is not None:
            return self._http_client.request(method, path, headers=headers, **kwargs)
        with httpx.Client(base_url=self.base_url, timeout=self._timeout_s) as client:
            return client.request(method, path, headers=headers, **kwargs)

    def _result(self, method: str, path: str, *, caller: str | None = None, **kwargs: Any) -> Result[Any]:
        res = self._send(method, path, caller=caller, **kwargs)
        if res.status_code in _CORE_ERRORS:
            data = res.json()
            if data.get("ok") is False:
                return Err(ErrorCode(int(data["error"])))
        if res.status_code >= 400:
            raise RuntimeError(f"{method} {path} failed: {res.status_code} {res.text}")
        data = res.json()
        return Ok(data.get("value"))

    def _value(self, method: str, path: str, *, caller: str | None = None, **kwargs: Any) -> Any:
        result = self._result(method, path, caller=caller, **kwargs)
        if isinstance(result, Err):
            raise RuntimeError(f"{method} {path} failed: {int(result.error)}")
        return result.value

    # Host

    def is_alive(self) -> bool:
        try:
            res = self._send("GET", "/healthz")
        except httpx.HTTPError:
            return False
        return res.status_code == 200 and bool(res.json().get("ok"))

    def status(self) -> dict[str, Any]:
        res = self._send("GET", "/api/status")
        if res.status_code >= 400:
            raise RuntimeError(f"Status request failed: {res.status_code} {res.text}")
        return res.json()

    def current_height(self) -> int:
        return int(self.status()["height"])

    def advance(self, blocks: int = 1) -> int:
        return int(self._value("POST", "/api/clock/advance", json={"blocks": int(blocks)}))

    def reset(self) -> None:
        res = self._send("POST", "/api/reset")
        if res.status_code >= 400:
            raise RuntimeError(f"Reset failed: {res.status_code} {res.text}")

    def get_admin(self) -> str:
        return str(self._value("GET", "/api/admin"))

    def set_admin(self, new_admin: str, *, caller: str | None = None) -> Result[bool]:
        return self._result("PUT", "/api/admin", caller=caller, json={"admin": new_admin})

    # Facilities

    def register_facility(
        self,
        name: str,
        address: str,
        square_footage: int,
        facility_type: str,
        contact_name: str,
        contact_info: str,
        *,
        caller: str | None = None,
    ) -> Result[int]:
        body = {
            "name": name,
            "address": address,
            "squareFootage": int(square_footage),
            "facilityType": facility_type,
            "contactName": contact_name,
            "contactInfo": contact_info,
        }
        return self._result("POST", "/api/facilities", caller=caller, json=body)

    def get_facility(self, facility_id: int) -> dict[str, Any] | None:
        return self._value("GET", f"/api/facilities/{int(facility_id)}")

    def is_facility_owner(self, facility_id: int, candidate: str) -> bool:
        return bool(self._value("GET", f"/api/facilities/{int(facility_id)}/owner", params={"candidate": candidate}))

    def update_facility(
        self,
        facility_id: int,
        name: str,
        address: str,
        square_footage: int,
        facility_type: str,
        contact_name: str,
        contact_info: str,
        *,
        caller: str | None = None,
    ) -> Result[bool]:
        body = {
            "name": name,
            "address": address,
            "squareFootage": int(square_footage),
            "facilityType": facility_type,
            "contactName": contact_name,
            "contactInfo": contact_info,
        }
        return self._result("PUT", f"/api/facilities/{int(facility_id)}", caller=caller, json=body)

    # Technicians

    def register_technician(
        self,
        name: str,
        license_number: str,
        certification_expiry: int,
        specializations: Iterable[str],
        account: str,
    ) -> Result[int]:
        body = {
            "name": name,
            "licenseNumber": license_number,
            "certificationExpiry": int(certification_expiry),
            "specializations": [str(s) for s in specializations],
            "account": account,
        }
        return self._result("POST", "/api/technicians", json=body)

    def get_technician(self, technician_id: int) -> dict[str, Any] | None:
        return self._value("GET", f"/api/technicians/{int(technician_id)}")

    def get_technician_by_account(self, account: str) -> dict[str, Any] | None:
        return self._value("GET", "/api/technicians/by-account", params={"account": account})

    def update_technician_status(self, technician_id: int, active: bool, *, caller: str | None = None) -> Result[bool]:
        return self._result(
            "PUT",
            f"/api/technicians/{int(technician_id)}/status",
            caller=caller,
            json={"active": bool(active)},
        )

    def renew_certification(self, technician_id: int, new_expiry: int, *, caller: str | None = None) -> Result[bool]:
        return self._result(
            "PUT",
            f"/api/technicians/{int(technician_id)}/certification",
            caller=caller,
            json={"certificationExpiry": int(new_expiry)},
        )

    def is_verified_technician(
        self,
        technician_id: int,
        *,
        caller: str | None = None,
        height: int | None = None,
    ) -> bool:
        params = {"height": int(height)} if height is not None else None
        return bool(self._value("GET", f"/api/technicians/{int(technician_id)}/verified", caller=caller, params=params))
