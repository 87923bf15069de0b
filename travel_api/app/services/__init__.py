"""
Service layer abstraction.

Each service encapsulates the database work for one domain so that API
handlers stay free of SQL.  Services raise the exceptions defined in
``core.errors`` to reject an operation.
"""
