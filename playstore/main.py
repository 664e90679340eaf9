# playstore/main.py

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.templating import Jinja2Templates
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from playstore.api.apps import router as apps_router
from playstore.config import Settings, get_settings
from playstore.db.engine import build_engine
from playstore.exceptions import database_exception_handler

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    logger.info("Shutting down, disposing connection pool")
    app.state.engine.dispose()


def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the web application around one pooled engine.

    The engine is normally created (and probed) by the startup sequencer
    and passed in; it is disposed when the application shuts down.
    """
    settings = settings or get_settings()
    engine = engine or build_engine(settings)

    app = FastAPI(
        title="Play Store Apps",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    app.add_exception_handler(SQLAlchemyError, database_exception_handler)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(apps_router)

    return app
