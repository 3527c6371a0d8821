"""
Schemas for users.
"""
from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """A user record."""
    id: int
    name: str

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "My name is Gotjitag E3 Mak Mak"
            }
        }
    )
