"""
Fitsnap Retrieval — FastAPI app factory.

Use: uvicorn server.app:app
Or:  from server import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup."""
    app = FastAPI(
        title="Fitsnap Retrieval API",
        description="Workout and recipe recommendations from image hints",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def _startup():
        config = get_config()
        logging.basicConfig(
            level=config.log_level,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )
        ok, errors = config.validate()
        for err in errors:
            logger.warning("[startup] %s", err)
        state = get_state()
        logger.info(
            "[startup] Fitsnap Retrieval API ready: loaded=%s config_ok=%s",
            state.is_loaded, ok,
        )

    return app


app = create_app()
