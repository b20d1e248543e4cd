"""
Stockroom Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the two ways a read can fail.
Why:   Services raise these instead of returning error tuples; global
       exception handlers (registered in main.py) turn them into responses
       with the right status code.
How:   Each exception class carries a message and optional context dict.

Exception Hierarchy:
    StockroomError (base)     → 500
    ├── QueryError            → 500 with the raw driver error detail
    └── NotFoundError         → 404 plain text naming the requested id

A by-id query that returns several rows is not an error: the first row wins.
"""

from typing import Any, Dict, Optional


class StockroomError(Exception):
    """
    Base exception for all Stockroom application errors.

    Attributes:
        message:  Error description returned to the client
        context:  Additional debug info for the server log
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class QueryError(StockroomError):
    """
    Raised when the database rejects or cannot run a query.

    What:    Connectivity loss, malformed SQL, constraint violation, missing table.
    HTTP:    500 Internal Server Error, body echoes ``message`` verbatim.

    The message is the driver's own error text; it is deliberately not
    replaced with a generic string.
    """

    def __init__(
        self,
        message: str = "Query failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

    @classmethod
    def from_exception(cls, exc: BaseException, statement: Optional[str] = None) -> "QueryError":
        """Wrap a SQLAlchemy/DBAPI exception, keeping the driver's detail."""
        original = getattr(exc, "orig", None) or exc
        ctx: Dict[str, Any] = {"error_type": type(original).__name__}
        if statement:
            ctx["statement"] = " ".join(statement.split())
        return cls(message=str(original), context=ctx)


class NotFoundError(StockroomError):
    """
    Raised when a by-id lookup returns zero rows.

    HTTP:    404 Not Found, ``text/plain`` body: No item found with id = "<id>"
    """

    def __init__(
        self,
        item_id: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["item_id"] = item_id
        super().__init__(message=f'No item found with id = "{item_id}"', context=ctx)
        self.item_id = item_id
