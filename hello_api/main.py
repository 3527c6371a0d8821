"""
Main application entry point for the Hello API service.
"""
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from hello_api.api.api import api_router
from hello_api.core.config import Settings, settings
from hello_api.core.exceptions import (
    APIError,
    api_error_handler,
    route_not_found_handler,
    generic_error_handler
)
from hello_api.core.logging import logger, setup_logging
from hello_api.core.responses import UTF8JSONResponse
from hello_api.models.schemas.common import Greeting
from hello_api.services.catalog import ROOT_GREETING


# Setup application logging
setup_logging()


def create_application(config: Settings = settings) -> FastAPI:
    """
    Build the FastAPI application with its routes and exception handlers.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Application is running on port {config.PORT}")
        yield
        logger.info(f"{config.PROJECT_NAME} shutting down...")

    application = FastAPI(
        title=config.PROJECT_NAME,
        version=config.VERSION,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        default_response_class=UTF8JSONResponse,
        redirect_slashes=False,
        lifespan=lifespan
    )

    # Custom exception handlers
    application.add_exception_handler(APIError, api_error_handler)
    application.add_exception_handler(StarletteHTTPException, route_not_found_handler)
    application.add_exception_handler(Exception, generic_error_handler)

    # Root endpoint
    @application.get("/", response_model=Greeting, status_code=status.HTTP_200_OK)
    async def root():
        """
        Root endpoint for the API service.
        """
        return ROOT_GREETING

    # Include API router
    application.include_router(api_router, prefix=config.API_PREFIX)

    return application


app = create_application()


def run():
    """Serve the application until the process is terminated."""
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        access_log=False
    )


if __name__ == "__main__":
    run()
