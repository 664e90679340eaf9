# playstore/api/apps.py

import logging
from typing import Optional

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError

from playstore.db.queries import (
    SEARCH_LIMIT,
    get_app_details,
    list_categories,
    search_by_category,
)
from playstore.dependencies import ConnectionDep, SettingsDep, TemplatesDep
from playstore.models.apps import ListingPage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["apps"], default_response_class=HTMLResponse)

SEARCH_ERROR_MESSAGE = "An internal server error occurred with the provided search key."
LISTING_ERROR_MESSAGE = "An internal server error occurred while listing categories."


@router.get("/")
def list_app_categories(
    request: Request,
    conn: ConnectionDep,
    templates: TemplatesDep,
    settings: SettingsDep,
):
    """
    Listing page with every distinct category.
    """
    try:
        categories = list_categories(conn)
    except SQLAlchemyError as e:
        logger.exception("Listing categories failed")
        message = str(e) if settings.EXPOSE_ERROR_DETAILS else LISTING_ERROR_MESSAGE
        return templates.TemplateResponse(
            request, "error.html", {"message": message}, status_code=500
        )

    page = ListingPage(selection=categories, has_data=len(categories) > 0)
    return templates.TemplateResponse(request, "index.html", page.model_dump())


@router.get("/search")
def search_apps(
    request: Request,
    conn: ConnectionDep,
    templates: TemplatesDep,
    categories: Optional[str] = Query(
        default=None,
        description="Category filter, matched with SQL LIKE",
    ),
):
    """
    Apps whose category matches the filter, at most SEARCH_LIMIT of them.
    """
    try:
        results = search_by_category(conn, categories, SEARCH_LIMIT)
    except SQLAlchemyError:
        logger.exception("The search for category %r produced an error", categories)
        return templates.TemplateResponse(
            request, "error.html", {"message": SEARCH_ERROR_MESSAGE}, status_code=500
        )

    page = ListingPage(
        selection=[categories] if categories is not None else [],
        has_data=len(results) > 0,
        data=results,
    )
    return templates.TemplateResponse(request, "index.html", page.model_dump())


@router.get("/app/{app_id}")
def get_app(
    request: Request,
    app_id: str,
    conn: ConnectionDep,
    templates: TemplatesDep,
):
    """
    Detail page of a single app.
    """
    lookup = get_app_details(conn, app_id)
    logger.info("App ID %r lookup: %s", app_id, lookup.status.value)

    if not lookup.found:
        return templates.TemplateResponse(
            request,
            "error.html",
            {"message": f"Page not found with App ID: {app_id}"},
            status_code=404,
        )

    return templates.TemplateResponse(request, "details.html", lookup.app.model_dump())
