"""FastAPI entrypoint for the Invoice Actions backend."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invoice_actions import __version__
from invoice_actions.logging_config import setup_logging

from .config import get_settings
from .routers import invoices


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="Invoice Actions API", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins or ["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(invoices.router, prefix=settings.listing_path)

    @app.get("/", tags=["info"])
    def root() -> dict[str, str]:
        return {"message": "Invoice Actions API", "version": __version__, "docs": "/docs"}

    @app.get("/health", tags=["health"])
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()
