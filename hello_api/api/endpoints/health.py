"""
Health check API endpoint.
"""
from fastapi import APIRouter, status

from hello_api.models.schemas.common import HealthStatus
from hello_api.services.catalog import HEALTH_UP


router = APIRouter()


@router.get(
    "",
    response_model=HealthStatus,
    status_code=status.HTTP_200_OK,
    summary="Health Check",
    description="Report that the service is up."
)
async def health_check():
    """
    The service has no dependencies to probe, so it is up whenever it
    can answer.
    """
    return HEALTH_UP
