# playstore/dependencies.py
"""
FastAPI dependencies for the resources created at startup and stored on
``app.state``: the settings, the pooled engine and the Jinja2 templates.
"""

from typing import Annotated, Iterator

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.engine import Connection

from playstore.config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


def get_connection(request: Request) -> Iterator[Connection]:
    """
    Borrow one pooled connection for the duration of a request.

    The ``with`` block hands the connection back to the pool exactly once,
    whether the handler returns normally or raises.
    """
    engine = request.app.state.engine
    with engine.connect() as conn:
        yield conn


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
TemplatesDep = Annotated[Jinja2Templates, Depends(get_templates)]
ConnectionDep = Annotated[Connection, Depends(get_connection)]
