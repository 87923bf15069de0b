"""Shared test fixtures for the Travel API."""

import pytest
from fastapi.testclient import TestClient

from travel_api.app.core.config import settings
from travel_api.app.core.dates import encode_date
from travel_api.app.core.db import get_cursor, init_db


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point the application at a fresh SQLite file for every test."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "travel.db"))
    init_db()
    yield settings.database_url


@pytest.fixture
def api_client():
    """Provide a TestClient with the application lifespan entered."""
    from travel_api.app.main import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def make_client():
    """Insert a client row and return its id."""

    def _make(first_name="Jan", last_name="Kowalski", email="jan@example.com"):
        with get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO Client (FirstName, LastName, Email) VALUES (?, ?, ?)",
                (first_name, last_name, email),
            )
            return cursor.lastrowid

    return _make


@pytest.fixture
def make_trip():
    """Insert a trip row, optionally linked to countries, and return its id."""

    def _make(name="Alps", max_people=2, countries=(), description=None):
        with get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO Trip (Name, Description, DateFrom, DateTo, MaxPeople) "
                "VALUES (?, ?, ?, ?, ?)",
                (name, description, "2026-07-01T00:00:00", "2026-07-14T00:00:00", max_people),
            )
            trip_id = cursor.lastrowid
            for country in countries:
                row = cursor.execute(
                    "SELECT IdCountry FROM Country WHERE Name = ?", (country,)
                ).fetchone()
                if row is None:
                    cursor.execute("INSERT INTO Country (Name) VALUES (?)", (country,))
                    country_id = cursor.lastrowid
                else:
                    country_id = row["IdCountry"]
                cursor.execute(
                    "INSERT INTO Country_Trip (IdCountry, IdTrip) VALUES (?, ?)",
                    (country_id, trip_id),
                )
            return trip_id

    return _make


@pytest.fixture
def add_registration():
    """Insert a Client_Trip row directly, bypassing the workflow checks."""

    def _add(client_id, trip_id, registered_at, payment_date=None):
        with get_cursor() as cursor:
            cursor.execute(
                "INSERT INTO Client_Trip (IdClient, IdTrip, RegisteredAt, PaymentDate) "
                "VALUES (?, ?, ?, ?)",
                (
                    client_id,
                    trip_id,
                    encode_date(registered_at),
                    encode_date(payment_date) if payment_date else None,
                ),
            )

    return _add
