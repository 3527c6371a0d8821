"""
Schemas for orders.
"""
from pydantic import BaseModel, ConfigDict, Field


class Order(BaseModel):
    """
    An order record.

    user_id and product_id are plain integers; nothing checks that they
    refer to an existing user or product.
    """
    id: int
    user_id: int = Field(..., alias="userId")
    product_id: int = Field(..., alias="productId")
    quantity: int

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "userId": 1,
                "productId": 2,
                "quantity": 1
            }
        }
    )
