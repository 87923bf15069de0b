"""
Pydantic models for trip data.

``TripRead`` describes a trip offered by the agency together with the
countries it visits.  ``ClientTripRead`` describes a trip from the
point of view of a registered client and carries the registration and
payment dates instead of the country list.
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class TripBase(BaseModel):
    id_trip: int = Field(..., alias="idTrip")
    name: str
    description: Optional[str] = None
    date_from: datetime = Field(..., alias="dateFrom")
    date_to: datetime = Field(..., alias="dateTo")
    max_people: int = Field(..., alias="maxPeople")

    model_config = {
        "populate_by_name": True,
    }


class TripRead(TripBase):
    """Schema for reading a trip from the API."""

    countries: List[str] = Field(default_factory=list)


class ClientTripRead(TripBase):
    """A trip a client is registered for."""

    registered_at: date = Field(..., alias="registeredAt")
    payment_date: Optional[date] = Field(None, alias="paymentDate")
