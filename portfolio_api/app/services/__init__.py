"""
Service layer abstraction.

Each service encapsulates the storage operations for one record kind
on top of the in‑memory tables in ``core.db``.  The services are
bundled into a ``Storage`` object (see ``storage.py``) that the API
receives through dependency injection, so swapping the in‑memory
tables for a real database does not touch the API handlers.
"""
