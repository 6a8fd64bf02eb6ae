"""
Application factory and entry point for the reservations API.

Run it with ``reservas-api`` or any ASGI server::

    uvicorn reservas_api.main:app --reload

Host, port, storage file and logging come from ``Settings``
(``RESERVAS_*`` environment variables or a ``.env`` file).
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from reservas_api.infrastructure.config import Settings, settings
from reservas_api.infrastructure.logging_config import setup_logging
from reservas_api.presentation.routers import router

logger = logging.getLogger(__name__)

LANDING_PAGE = """<!DOCTYPE html>
<html lang="es">
<head><meta charset="utf-8"><title>{title}</title></head>
<body>
  <h1>{title}</h1>
  <p>{description}</p>
  <p>Reservas: <a href="/api/reservas">/api/reservas</a></p>
  <p>Documentación: <a href="/api-docs">/api-docs</a></p>
</body>
</html>
"""


def create_app(config: Settings = settings) -> FastAPI:
    """Build the FastAPI application.

    Logging is configured first, then the reservations router is mounted
    under ``/api/reservas`` and the interactive docs under ``/api-docs``.
    """
    setup_logging(config.log_level, config.log_file)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Using reservations file %s", config.data_path)
        yield

    app = FastAPI(
        lifespan=lifespan,
        title=config.api_title,
        version=config.api_version,
        description=config.api_description,
        servers=[{"url": f"http://{config.host}:{config.port}"}],
        docs_url="/api-docs",
        redoc_url=None,
    )

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    def index() -> str:
        return LANDING_PAGE.format(title=config.api_title, description=config.api_description)

    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    logger.info("Starting server on http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
