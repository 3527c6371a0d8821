"""
Custom exceptions and exception handlers for the API service.
"""
from fastapi import Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_api.core.logging import logger
from hello_api.core.responses import UTF8JSONResponse


class APIError(Exception):
    """Base class for API exceptions."""
    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class NotFoundError(APIError):
    """Exception raised when no route matches the request."""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, message=message)


# Exception handlers

async def api_error_handler(request: Request, exc: APIError) -> UTF8JSONResponse:
    """Handler for custom API exceptions."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"API Error: {exc.message}")
    return UTF8JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message}
    )


async def route_not_found_handler(
    request: Request, exc: StarletteHTTPException
) -> UTF8JSONResponse:
    """
    Handler for routing failures raised by the framework.

    Both an unknown path (404) and a known path with another method (405)
    are answered as not found, since routes are matched on method and
    path together.
    """
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        error = NotFoundError(f"Cannot {request.method} {request.url.path}")
    else:
        error = APIError(status_code=exc.status_code, message=str(exc.detail))
    return await api_error_handler(request, error)


async def generic_error_handler(request: Request, exc: Exception) -> UTF8JSONResponse:
    """Handler for unhandled exceptions."""
    logger.opt(exception=exc).error(f"Unhandled Exception: {str(exc)}")
    return UTF8JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "success": False,
            "message": "Internal server error"
        }
    )
