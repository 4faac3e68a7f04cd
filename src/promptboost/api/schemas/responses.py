"""API response schemas."""

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field


class EnhanceResponse(BaseModel):
    """Response for strategy-based prompt enhancement."""
    success: bool
    strategy: str
    original_prompt: str
    enhanced_prompt: str
    metadata: Dict[str, Any] = Field(default_factory=dict)
    processing_time_ms: float = 0.0


class StrategyInfo(BaseModel):
    """A single enhancement strategy."""
    name: str
    description: str


class StrategiesResponse(BaseModel):
    """Available enhancement strategies."""
    strategies: List[StrategyInfo] = Field(default_factory=list)
    total: int = 0


class ChainResponse(BaseModel):
    """Response for template-chain enhancement."""
    success: bool
    original_prompt: str
    enhanced_prompt: str
    processing_time_ms: float = 0.0


class HealthResponse(BaseModel):
    """Response for health check."""
    status: str
    version: str
    components: Dict[str, str] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Error response."""
    success: bool = False
    error: str
    detail: Optional[str] = None
