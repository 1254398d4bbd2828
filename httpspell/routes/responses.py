"""JSON response helpers shared by the route handlers."""

from typing import Any

from fastapi.responses import JSONResponse

JSON_MEDIA_TYPE = "application/json;charset=UTF-8"


def result_response(result: Any) -> JSONResponse:
    """Wrap a successful payload as ``{"result": ...}``."""
    return JSONResponse(content={"result": result}, media_type=JSON_MEDIA_TYPE)


def error_response(status: int, message: str, cause: dict[str, Any] | None = None) -> JSONResponse:
    """Wrap an error as ``{"error": {"status", "message"[, "cause"]}}``."""
    error: dict[str, Any] = {"status": status, "message": message}
    if cause is not None:
        error["cause"] = cause
    return JSONResponse(content={"error": error}, status_code=status, media_type=JSON_MEDIA_TYPE)
