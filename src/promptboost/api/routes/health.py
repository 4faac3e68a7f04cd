"""Health check routes."""

from fastapi import APIRouter, Request

from ... import __version__
from ..schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Health check endpoint.

    Reports each enabled strategy as a component.
    """
    dispatcher = request.app.state.dispatcher
    components = {name: "healthy" for name in dispatcher.strategy_names}

    status = "healthy" if components else "degraded"

    return HealthResponse(
        status=status,
        version=__version__,
        components=components
    )


@router.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "PromptBoost API",
        "version": __version__,
        "description": "Prompt enhancement: context, examples, instructions, domain knowledge",
        "docs": "/docs",
        "endpoints": {
            "enhance": "/api/v1/enhance",
            "strategies": "/api/v1/enhance/strategies",
            "legacy": "/api/v1/enhance/legacy/{context,examples,instructions,comprehensive}",
            "health": "/health"
        }
    }
