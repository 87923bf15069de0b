"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import clients, trips

router = APIRouter()

router.include_router(clients.router, prefix="/clients", tags=["clients"])
router.include_router(trips.router, prefix="/trips", tags=["trips"])
