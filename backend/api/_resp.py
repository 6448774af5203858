# api/_resp.py
import logging

from fastapi import HTTPException
from fastapi.responses import JSONResponse

from core.exceptions import AppError, UpstreamUnavailable

logger = logging.getLogger(__name__)


def ok(data: dict | list | str | int | float | None = None):
    payload = {"success": True}
    if data is not None:
        payload["data"] = data
    return payload


def fail(status: int, message: str):
    raise HTTPException(status, message)


def fail_from(exc: AppError, action: str):
    """Log and convert a core error into the failure envelope."""
    status = 502 if isinstance(exc, UpstreamUnavailable) else 500
    logger.warning("%s: %s", action, exc)
    fail(status, f"{action}: {exc}")


def error_response(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"success": False, "error": message})
