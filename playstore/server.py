# playstore/server.py
"""
Process startup: probe the database, then serve.

The HTTP port is only bound once a pooled connection has answered the
liveness probe. If the probe fails the process exits without listening.
"""

import logging
import sys
from datetime import datetime
from enum import Enum
from typing import Callable, Optional, Sequence

import uvicorn
from fastapi import FastAPI
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from playstore.config import Settings, get_settings, resolve_port
from playstore.db.engine import build_engine, ping_database
from playstore.main import create_app

logger = logging.getLogger(__name__)

Serve = Callable[..., None]


class StartupState(str, Enum):
    INIT = "init"
    PROBING = "probing"
    LISTENING = "listening"
    FAILED = "failed"


class StartupSequencer:
    def __init__(self, settings: Settings, port: int, serve: Serve = uvicorn.run):
        self.settings = settings
        self.port = port
        self.serve = serve
        self.state = StartupState.INIT
        self.engine: Optional[Engine] = None
        self.app: Optional[FastAPI] = None

    def probe(self) -> bool:
        self.state = StartupState.PROBING
        logger.info("Pinging database..")

        try:
            self.engine = build_engine(self.settings)
            ping_database(self.engine)
        except SQLAlchemyError:
            logger.exception("Server not started as the database could not be reached")
            self.state = StartupState.FAILED
            if self.engine is not None:
                self.engine.dispose()
            return False

        return True

    def run(self) -> int:
        """Probe, then serve until shutdown. Returns the process exit status."""
        if not self.probe():
            return 1

        self.app = create_app(self.settings, self.engine)
        self.state = StartupState.LISTENING
        logger.info("Server start at port %s on %s", self.port, datetime.now())

        self.serve(self.app, host=self.settings.APP_HOST, port=self.port)
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    settings = get_settings()

    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    sequencer = StartupSequencer(settings, resolve_port(argv, settings))
    return sequencer.run()
