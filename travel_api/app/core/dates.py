"""
Integer date codec for the ``Client_Trip`` table.

Registration and payment dates are stored as eight‑digit integers in
``YYYYMMDD`` form.  Existing rows use this layout, so both directions
use plain arithmetic rather than string formatting or parsing.
"""

from datetime import date


def encode_date(value: date) -> int:
    """Encode ``value`` as ``YYYYMMDD``."""
    return value.year * 10000 + value.month * 100 + value.day


def decode_date(value: int) -> date:
    """Decode a ``YYYYMMDD`` integer back into a ``date``.

    Raises ``ValueError`` if the digits do not form a calendar date.
    """
    year = value // 10000
    month = (value % 10000) // 100
    day = value % 100
    return date(year, month, day)
