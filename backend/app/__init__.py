"""
Membership Backend — Application Package
==========================================

Layers (top to bottom):

    ┌─────────────────────────────────────┐
    │     Routes (routes/*.py)            │  ← parse, existence check, status codes
    ├─────────────────────────────────────┤
    │     Services (services/*.py)        │  ← one storage statement per operation
    ├─────────────────────────────────────┤
    │     Models & Schemas                │  ← SQLAlchemy ORM + Pydantic (camelCase)
    ├─────────────────────────────────────┤
    │     Database (database.py)          │  ← async engine and per-request session
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
