# Routes package init
"""
Membership Backend — API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.
How:   One module per resource, each exposing an APIRouter under /api.

Route Inventory:
    - departments.py:  /api/departments[/{id}]
    - roles.py:        /api/roles[/{id}]        (DELETE answers 204)
    - event_types.py:  /api/event-types[/{id}]
    - events.py:       /api/events[/{id}]
    - members.py:      /api/members[/{id}]      (409 on duplicate email)
    - health.py:       GET /health
    - guards.py:       existence check shared by PUT and DELETE handlers

Design Principle:
    Routes are THIN: they parse the request, turn query parameters into
    filter Conditions, apply the existence check and pick the status code.
    Storage access belongs in services.
"""
