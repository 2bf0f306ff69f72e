"""
Schemas for user records.
"""
from pydantic import BaseModel, ConfigDict


class UserRecord(BaseModel):
    """Schema for a user as returned by the API."""
    id: int
    name: str

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Alice"
            }
        }
    )
