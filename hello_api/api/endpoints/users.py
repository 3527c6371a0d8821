"""
User listing API endpoint.
"""
from fastapi import APIRouter, status
from typing import List

from hello_api.models.schemas.user import User
from hello_api.services.catalog import get_users


router = APIRouter()


@router.get(
    "",
    response_model=List[User],
    status_code=status.HTTP_200_OK,
    summary="List Users",
    description="Get the fixed list of users."
)
async def list_users():
    """
    Get every user, in id order.
    """
    return list(get_users())
