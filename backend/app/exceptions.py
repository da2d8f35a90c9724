"""
Membership Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the different failure outcomes.
Why:   Services and route handlers raise these; global exception handlers
       (registered in main.py) turn them into JSON responses with the right
       status code, so no handler needs its own try/except.

Exception Hierarchy:
    MembershipError (base)   → 500 {"error": message}
    ├── NotFoundError        → 404 {"message": "<Entity> not found"}
    ├── ConflictError        → 409 {"message": message}
    ├── StorageError         → 500 {"error": raw storage message}
    └── ConfigurationError   → 500 {"error": message}

Note:
    StorageError carries the storage collaborator's own message (constraint
    name, foreign key violation text). It is returned to the caller as is.
"""

from typing import Any, Dict, Optional


class MembershipError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Error description returned in the API response
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(MembershipError):
    """
    Raised when a resource looked up by id does not exist.

    HTTP: 404 Not Found, body {"message": "<resource> not found"}

    The resource name is the human-readable entity label, e.g.
    "Department" or "Event type".
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource


class ConflictError(MembershipError):
    """
    Raised when a unique key is already taken.

    When: Member registration with an email that is already on file.
    HTTP: 409 Conflict
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StorageError(MembershipError):
    """
    Raised when the storage collaborator rejects an operation.

    When: Constraint violation (duplicate email, invalid foreign key),
          lost connection, malformed query.
    HTTP: 500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ConfigurationError(MembershipError):
    """Raised when a required setting is missing at the point of use."""

    def __init__(
        self,
        message: str = "The server is misconfigured",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
