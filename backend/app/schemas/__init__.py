"""
Membership Backend — Pydantic Schemas
=======================================

API contracts, kept separate from the SQLAlchemy models so the wire format
(camelCase, no password) can differ from the table layout.
"""
