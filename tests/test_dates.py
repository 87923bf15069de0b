from datetime import date, timedelta

import pytest

from travel_api.app.core.dates import decode_date, encode_date


def test_encode_date_layout():
    assert encode_date(date(2024, 3, 7)) == 20240307
    assert encode_date(date(1, 1, 1)) == 10101


def test_decode_date_arithmetic():
    assert decode_date(20240307) == date(2024, 3, 7)
    assert decode_date(99991231) == date(9999, 12, 31)


def test_round_trip_across_supported_years():
    day = date(1, 1, 1)
    step = timedelta(days=997)
    while day <= date(9999, 12, 31) - step:
        assert decode_date(encode_date(day)) == day
        day += step
    for special in (date(2000, 2, 29), date(1900, 2, 28), date(9999, 12, 31), date.today()):
        assert decode_date(encode_date(special)) == special


def test_decode_rejects_impossible_date():
    with pytest.raises(ValueError):
        decode_date(20230230)
