"""
User API endpoints.
"""
from typing import List, Tuple

from fastapi import APIRouter, status

from app.models.schemas.user import UserRecord


router = APIRouter()

USERS: Tuple[UserRecord, ...] = (
    UserRecord(id=1, name="Alice"),
)


@router.get(
    "",
    response_model=List[UserRecord],
    status_code=status.HTTP_200_OK,
    summary="List Users",
    description="Get the list of all users."
)
async def list_users() -> List[UserRecord]:
    return list(USERS)
