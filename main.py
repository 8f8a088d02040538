# main.py
"""
FitTrack API entry point.

Run with `python main.py` or `uvicorn main:create_app --factory`.
"""
from __future__ import annotations

import logging
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.database import build_engine, build_session_factory, create_tables
from config.logs import configure_logging
from config.settings import Settings, load_settings
from routers import (
    auth_router,
    protected_router,
    exercises_router,
    workouts_router,
    workout_exercises_router,
    status_router,
)
from utils.errors import register_error_handlers
from utils.security import TokenService

API_NAME = "FitTrack API"
API_VERSION = "1.0.0"

log = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    # Missing DATABASE_URL / JWT_SECRET stops the process here
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=API_NAME,
        version=API_VERSION,
        description="Users, exercise catalog and workout plans",
    )

    # ============================================================
    # Process-wide objects, injected into handlers via dependencies
    # ============================================================
    engine = build_engine(settings)
    if settings.create_tables:
        create_tables(engine)

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.tokens = TokenService(
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(hours=settings.token_ttl_hours),
    )

    # CORS; the token travels in a custom header that browsers must be allowed to read
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", settings.token_header],
        expose_headers=[settings.token_header],
    )

    register_error_handlers(app, settings)

    # ============================================================
    # Routers
    # ============================================================
    for router in (
        auth_router,
        protected_router,
        exercises_router,
        workouts_router,
        workout_exercises_router,
        status_router,
    ):
        app.include_router(router, prefix="/api")

    @app.get("/")
    def read_root():
        return {
            "name": API_NAME,
            "version": API_VERSION,
            "documentation": "/docs",
            "redoc": "/redoc",
        }

    log.info("%s ready (env=%s)", API_NAME, settings.environment)
    return app


if __name__ == "__main__":
    import uvicorn

    _settings = load_settings()
    uvicorn.run(create_app(_settings), host="0.0.0.0", port=_settings.port)
