from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from replydesk.routers import compose
from replydesk.settings import settings

_log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="ReplyDesk API", version="0.1.0")

    origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    app.include_router(compose.router, prefix="/api/v1")

    # Mounted last so the catch-all "/" never shadows the API routes.
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True, check_dir=False), name="shell")
    _log.debug("Serving presentation shell from %s", settings.static_dir)

    return app


app = create_app()
