"""
Trip endpoints for API v1.

Trips are read‑only through the API; the catalogue is maintained
directly in the database.
"""

from typing import List

from fastapi import APIRouter

from travel_api.app.schemas.trip import TripRead
from travel_api.app.services.trip_service import TripService


router = APIRouter()


@router.get("", response_model=List[TripRead])
async def list_trips() -> List[TripRead]:
    """Return all trips with the countries they visit."""
    return await TripService.list_trips()
