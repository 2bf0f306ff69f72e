"""
Common schemas used across the API.
"""
from pydantic import BaseModel, ConfigDict


class HealthStatus(BaseModel):
    """Health check response schema."""
    status: str
    svc: str

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "status": "ok",
                "svc": "user"
            }
        }
    )
