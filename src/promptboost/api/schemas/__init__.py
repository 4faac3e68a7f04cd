"""API schemas."""

from .requests import (
    EnhanceRequest,
    ContextChainRequest,
    ExamplesChainRequest,
    InstructionsChainRequest,
    ComprehensiveChainRequest,
)
from .responses import (
    EnhanceResponse,
    StrategyInfo,
    StrategiesResponse,
    ChainResponse,
    HealthResponse,
    ErrorResponse,
)

__all__ = [
    # Requests
    "EnhanceRequest",
    "ContextChainRequest",
    "ExamplesChainRequest",
    "InstructionsChainRequest",
    "ComprehensiveChainRequest",
    # Responses
    "EnhanceResponse",
    "StrategyInfo",
    "StrategiesResponse",
    "ChainResponse",
    "HealthResponse",
    "ErrorResponse",
]
