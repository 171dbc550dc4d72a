import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "the server encountered a problem and could not process your request"


class RecoverMiddleware(BaseHTTPMiddleware):
    """
    Outermost middleware: turns any unhandled exception into a 500.

    The connection is closed afterwards since its state is unknown.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        try:
            return await call_next(request)
        except Exception:
            logger.exception(
                "Unhandled exception",
                extra={"properties": {"method": request.method, "path": request.url.path}},
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={"error": {"code": "SERVER_ERROR", "message": SERVER_ERROR_MESSAGE}},
                headers={"Connection": "close"},
            )
