"""
Client endpoints for API v1.

These routes create clients, list a client's trips and register or
unregister a client for a trip.  Business rules live in the services;
handlers only translate service exceptions into HTTP errors.  Every
rejected mutation is answered with 400, while listing the trips of an
unknown client answers 404.
"""

import sqlite3
from typing import List

from fastapi import APIRouter, HTTPException, Path, Response, status

from travel_api.app.core.errors import NotFoundError, TravelError, ValidationError
from travel_api.app.schemas.client import ClientCreate, ClientCreated
from travel_api.app.schemas.trip import ClientTripRead
from travel_api.app.services.client_service import ClientService
from travel_api.app.services.registration_service import RegistrationService
from travel_api.app.services.trip_service import TripService


router = APIRouter()


@router.post("", response_model=ClientCreated, status_code=status.HTTP_201_CREATED)
async def create_client(client: ClientCreate, response: Response) -> ClientCreated:
    """Create a new client and return its id."""
    try:
        client_id = await ClientService.create_client(client)
    except (ValidationError, sqlite3.Error) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    response.headers["Location"] = f"/api/v1/clients/{client_id}"
    return ClientCreated(id=client_id)


@router.get("/{client_id}/trips", response_model=List[ClientTripRead])
async def list_client_trips(
    client_id: int = Path(..., description="ID of the client"),
) -> List[ClientTripRead]:
    """List the trips a client is registered for."""
    try:
        return await TripService.list_client_trips(client_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.put("/{client_id}/trips/{trip_id}")
async def register_client(
    client_id: int = Path(..., description="ID of the client"),
    trip_id: int = Path(..., description="ID of the trip"),
) -> dict:
    """Register a client for a trip.

    Fails with 400 if the client or trip does not exist, the client is
    already registered or the trip is full.
    """
    try:
        await RegistrationService.register_client(client_id, trip_id)
    except TravelError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"message": "Client registered successfully"}


@router.delete("/{client_id}/trips/{trip_id}")
async def unregister_client(
    client_id: int = Path(..., description="ID of the client"),
    trip_id: int = Path(..., description="ID of the trip"),
) -> dict:
    """Cancel a client's registration for a trip."""
    try:
        await RegistrationService.unregister_client(client_id, trip_id)
    except TravelError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"message": "Client unregistered successfully"}
