# playstore/exceptions.py
"""
Application-wide exception handlers.

Query errors are normally caught by the route handlers themselves; the
handler here covers failures that happen before a route runs, such as a
connection that cannot be checked out of the pool.
"""

import logging

from fastapi import Request
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_HTML = "<h3>An internal server error occurred.</h3>"


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> HTMLResponse:
    logger.error(
        "Database error on %s %s: %s", request.method, request.url.path, exc,
        exc_info=exc,
    )
    return HTMLResponse(content=INTERNAL_ERROR_HTML, status_code=500)
