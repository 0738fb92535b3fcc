"""
Uniform JSON success/error responses.
"""

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response


def write_json(payload: Any, status_code: int) -> Response:
    """
    Serialize ``payload`` as JSON with the given status.

    A ``None`` payload writes no body and no Content-Type (204 responses).
    """
    if payload is None:
        return Response(status_code=status_code)

    return JSONResponse(content=jsonable_encoder(payload), status_code=status_code)


def write_json_error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)
