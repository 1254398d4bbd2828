"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI

from httpspell import __version__
from httpspell.config import settings
from httpspell.logging_config import setup_logging
from httpspell.routes import spell_router, static_router
from httpspell.services.spell import SpellService, get_spell_service

# Configure logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Starting httpspell...")

    if not settings.dictionary_dir.is_dir():
        logger.warning(f"Dictionary directory {settings.dictionary_dir} does not exist")

    # Loading a dictionary can take seconds, so optionally do it before the first request
    if settings.preload_languages:
        loaded = await get_spell_service().preload(settings.preload_languages)
        logger.info(f"Preloaded dictionaries: {', '.join(loaded) or 'none'}")

    yield

    logger.info("Shutting down httpspell...")


app = FastAPI(
    title="httpspell",
    description="Spell checking and suggestions over HTTP",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/health")
async def health(service: SpellService = Depends(get_spell_service)) -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
        "dictionaries": service.cache.languages(),
    }


app.include_router(spell_router)
# Catch-all, must come last
app.include_router(static_router)


def run(host: str | None = None, port: int | None = None, reload: bool = False) -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "httpspell.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


if __name__ == "__main__":
    run()
