"""
Common schemas used across the API.
"""
from typing import Literal

from pydantic import BaseModel, ConfigDict


class Greeting(BaseModel):
    """Greeting message returned by the root and hello routes."""
    message: str

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "message": "Hello from Express API!"
            }
        }
    )


class HealthStatus(BaseModel):
    """Health check response schema."""
    status: Literal["UP"] = "UP"

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "status": "UP"
            }
        }
    )
