"""
Pydantic schema definitions for API payloads.

Each domain (clients, trips) defines its own Pydantic models for
request and response bodies.  Field names are snake_case in Python and
camelCase on the wire, matching the JSON shape existing consumers of
the API already use.
"""
