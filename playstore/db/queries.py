# playstore/db/queries.py
"""
The three read queries behind the web pages. Each takes a connection that
the caller has already checked out of the pool.
"""

import logging
from typing import List, Optional

from sqlalchemy import String, bindparam, select
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from playstore.db.schema import apps
from playstore.models.apps import AppDetails, AppLookup, AppSummary, LookupStatus

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 20


def list_categories(conn: Connection) -> List[str]:
    """Distinct categories, in whatever order the database returns them."""
    stmt = select(apps.c.category).distinct()
    return list(conn.execute(stmt).scalars().all())


def search_by_category(
    conn: Connection, category: Optional[str], limit: int = SEARCH_LIMIT
) -> List[AppSummary]:
    # The filter goes to LIKE untouched; a missing one is bound as NULL.
    pattern = bindparam("category", value=category, type_=String())
    stmt = (
        select(apps.c.app_id, apps.c.name)
        .where(apps.c.category.like(pattern))
        .limit(limit)
    )

    rows = conn.execute(stmt).mappings().all()

    return [AppSummary(app_id=row["app_id"], name=row["name"]) for row in rows]


def get_app_details(conn: Connection, app_id: str) -> AppLookup:
    """
    Look up one app by id.

    The id is matched with LIKE, so several rows can match; the first one
    wins. Database errors are reported as LookupStatus.FAILED rather than
    raised.
    """
    stmt = select(apps).where(apps.c.app_id.like(app_id))

    try:
        row = conn.execute(stmt).mappings().first()
    except SQLAlchemyError as e:
        logger.exception("Lookup of app %r failed", app_id)
        return AppLookup(status=LookupStatus.FAILED, error=str(e))

    if row is None:
        return AppLookup(status=LookupStatus.NOT_FOUND)

    return AppLookup(
        status=LookupStatus.FOUND,
        app=AppDetails(
            app_id=row["app_id"],
            name=row["name"],
            category=row["category"],
            rating=row["rating"],
            installs=row["installs"],
        ),
    )
