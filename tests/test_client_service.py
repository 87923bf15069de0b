import pytest

from travel_api.app.core.db import get_cursor
from travel_api.app.core.errors import ValidationError
from travel_api.app.schemas.client import ClientCreate
from travel_api.app.services.client_service import ClientService, validate_email, validate_pesel


@pytest.mark.parametrize("email", ["a@b.c", "jan.kowalski@example.com", "x+tag@mail.co.uk"])
def test_valid_emails_accepted(email):
    validate_email(email)


@pytest.mark.parametrize(
    "email",
    ["", "plainaddress", "a@b", "a@@b.c", "a@b@c.d", "a b@c.d", "a@b.c ", "@b.c", "a@.c", "a@b.", "a@b.c\n"],
)
def test_invalid_emails_rejected(email):
    with pytest.raises(ValidationError):
        validate_email(email)


@pytest.mark.parametrize("pesel", [None, "", "12345678901"])
def test_valid_pesel_accepted(pesel):
    validate_pesel(pesel)


@pytest.mark.parametrize("pesel", ["1234567890", "123456789012", "1234567890a", " 2345678901", "١٢٣٤٥٦٧٨٩٠١"])
def test_invalid_pesel_rejected(pesel):
    with pytest.raises(ValidationError):
        validate_pesel(pesel)


@pytest.mark.asyncio
async def test_create_client_inserts_row():
    data = ClientCreate(firstName="Anna", lastName="Nowak", email="anna@example.com", pesel="90010112345")
    client_id = await ClientService.create_client(data)

    with get_cursor() as cursor:
        row = cursor.execute("SELECT * FROM Client WHERE IdClient = ?", (client_id,)).fetchone()
    assert row["FirstName"] == "Anna"
    assert row["LastName"] == "Nowak"
    assert row["Email"] == "anna@example.com"
    assert row["Telephone"] is None
    assert row["Pesel"] == "90010112345"


@pytest.mark.asyncio
async def test_create_client_ids_are_distinct():
    first = await ClientService.create_client(ClientCreate(first_name="A", last_name="B", email="a@b.c"))
    second = await ClientService.create_client(ClientCreate(first_name="C", last_name="D", email="c@d.e"))
    assert first != second


@pytest.mark.asyncio
async def test_create_client_with_bad_email_writes_nothing():
    with pytest.raises(ValidationError, match="Invalid email format"):
        await ClientService.create_client(ClientCreate(first_name="A", last_name="B", email="not-an-email"))

    with get_cursor() as cursor:
        assert cursor.execute("SELECT COUNT(*) AS total FROM Client").fetchone()["total"] == 0


@pytest.mark.asyncio
async def test_create_client_with_bad_pesel_fails():
    with pytest.raises(ValidationError, match="Invalid Pesel format"):
        await ClientService.create_client(
            ClientCreate(first_name="A", last_name="B", email="a@b.c", pesel="123")
        )


def test_blank_optional_fields_become_none():
    data = ClientCreate(firstName="A", lastName="B", email="a@b.c", telephone="", pesel="")
    assert data.telephone is None
    assert data.pesel is None
