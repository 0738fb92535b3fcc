"""Health check endpoint."""

from fastapi import Response, status


async def health_check() -> Response:
    """200 with no body while the process is serving."""
    return Response(status_code=status.HTTP_200_OK)
