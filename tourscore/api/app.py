from __future__ import annotations

import logging
import platform
import time
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tourscore import __version__
from tourscore.config import get_settings

from .routers import scoring, tours


def create_app() -> FastAPI:
    settings = get_settings()
    logging.getLogger("tourscore").setLevel(settings.log_level.upper())

    app = FastAPI(title="tourscore", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["health"])
    async def health() -> Dict[str, Any]:
        return {
            "status": "ok",
            "version": __version__,
            "ts": time.time(),
            "runtime": {"python": platform.python_version()},
        }

    app.include_router(scoring.router)
    app.include_router(tours.router)
    return app


app = create_app()

__all__ = ["app", "create_app"]
