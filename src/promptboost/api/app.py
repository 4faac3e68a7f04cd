"""FastAPI application factory."""

import logging
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..core.config import Settings, load_settings
from ..dispatch import ToolDispatcher
from .routes import enhancement_router, health_router

logger = logging.getLogger(__name__)

API_TITLE = "PromptBoost API"
API_DESCRIPTION = "Prompt enhancement: context, examples, instructions, domain knowledge"

# uvicorn spells the warning level out
UVICORN_LOG_LEVELS = {"debug": "debug", "info": "info", "warn": "warning", "error": "error"}


def create_app(
    settings: Optional[Settings] = None,
    enable_cors: bool = True,
    cors_origins: Optional[List[str]] = None
) -> FastAPI:
    """
    Build the API around one dispatcher.

    Args:
        settings: Settings for the enhancers (loaded from file when omitted)
        enable_cors: Whether to enable CORS
        cors_origins: Allowed CORS origins (default: ["*"])

    Returns:
        Configured FastAPI application
    """
    settings = settings or load_settings()

    app = FastAPI(
        title=API_TITLE,
        description=API_DESCRIPTION,
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Shared by every request; neither is mutated after startup
    app.state.settings = settings
    app.state.dispatcher = ToolDispatcher.from_settings(settings)
    logger.debug("API serving strategies: %s", ", ".join(app.state.dispatcher.strategy_names))

    if enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins or ["*"],
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

    app.include_router(health_router)
    app.include_router(enhancement_router, prefix="/api/v1")

    return app


app = create_app()


def run_server(
    host: str = "0.0.0.0",
    port: int = 8000,
    reload: bool = False,
    workers: int = 1,
    settings: Optional[Settings] = None
) -> None:
    """
    Serve ``promptboost.api.app:app`` with uvicorn.

    Workers import the module themselves, so they pick up configuration from
    the config file and ``PB_*`` variables rather than from ``settings``,
    which only sets uvicorn's own log level here.
    """
    import uvicorn

    settings = settings or load_settings()
    uvicorn.run(
        "promptboost.api.app:app",
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=UVICORN_LOG_LEVELS.get(settings.log_level, "info"),
    )


if __name__ == "__main__":
    run_server()
