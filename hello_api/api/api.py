"""
Main API router that includes all endpoint groups.
"""
from fastapi import APIRouter

from hello_api.api.endpoints import (
    hello,
    health,
    users,
    orders
)

# Create the main API router
api_router = APIRouter()

# Include all endpoint groups
api_router.include_router(
    hello.router,
    prefix="/hello",
    tags=["Hello"]
)

api_router.include_router(
    health.router,
    prefix="/health",
    tags=["Health"]
)

api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"]
)

api_router.include_router(
    orders.router,
    prefix="/orders",
    tags=["Orders"]
)
