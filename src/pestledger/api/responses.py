from __future__ import annotations

from typing import Any

from fastapi import HTTPException
from fastapi.responses import JSONResponse

from ..core.results import Err, Result


CALLER_HEADER = "X-Caller"


def require_caller(x_caller: str | None) -> str:
    caller = (x_caller or "").strip()
    if not caller:
        raise HTTPException(status_code=401, detail=f"Missing {CALLER_HEADER} header")
    return caller


def ok(value: Any) -> dict[str, Any]:
    return {"ok": True, "value": value}


def result_response(result: Result[Any]) -> Any:
    """Map a core result onto HTTP: Ok -> 200 envelope, Err -> status == error code."""

    if isinstance(result, Err):
        return JSONResponse(status_code=int(result.error), content=result.to_dict())
    return result.to_dict()


def bad_request(ex: ValueError) -> HTTPException:
    return HTTPException(status_code=400, detail=str(ex))
