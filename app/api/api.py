"""
Main API router that includes all endpoint groups.
"""
from fastapi import APIRouter

from app.api.endpoints import health, users

# Create the main API router
api_router = APIRouter()

api_router.include_router(
    health.router,
    prefix="/health",
    tags=["Health"]
)

api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"]
)
