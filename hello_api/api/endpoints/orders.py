"""
Order listing API endpoint.
"""
from fastapi import APIRouter, status
from typing import List

from hello_api.models.schemas.order import Order
from hello_api.services.catalog import get_orders


router = APIRouter()


@router.get(
    "",
    response_model=List[Order],
    status_code=status.HTTP_200_OK,
    summary="List Orders",
    description="Get the fixed list of orders."
)
async def list_orders():
    return list(get_orders())
