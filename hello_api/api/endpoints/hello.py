"""
Hello API endpoint.
"""
from fastapi import APIRouter, status

from hello_api.models.schemas.common import Greeting
from hello_api.services.catalog import HELLO_GREETING


router = APIRouter()


@router.get(
    "",
    response_model=Greeting,
    status_code=status.HTTP_200_OK,
    summary="Hello",
    description="Return a fixed greeting from the API."
)
async def hello():
    return HELLO_GREETING
