# catsapi/main.py
import logging
from typing import Optional

from fastapi import FastAPI

from .cats import cats_router
from .config import get_settings
from .errors import setup_exception_handlers


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("catsapi").setLevel(level)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Cats API",
        description=(
            "Collection of cats stored in a document store. Every new cat "
            "gets a random picture from cataas.com at creation time."
        ),
        version="1.0.0",
    )

    # Liveness check
    @app.get("/")
    def health_check():
        return {"status": "ok"}

    app.include_router(cats_router)
    setup_exception_handlers(app)
    return app


configure_logging()
app = create_app()
