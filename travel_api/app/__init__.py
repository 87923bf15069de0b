"""
Application package initializer.

The API is split by domain: clients and trips each expose a router in
``api/v1/endpoints`` backed by a service in ``services``.  Versioning is
handled by grouping routers under the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
