"""FastAPI app factory — read-only access to the built grid asset."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from elementsgrid import __version__
from elementsgrid.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.elementsgrid_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="elementsgrid",
        description="Periodic table grid asset: elements, categories and Wikipedia extracts",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    from elementsgrid.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
