"""API request schemas."""

from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class EnhanceRequest(BaseModel):
    """Request for strategy-based prompt enhancement."""
    prompt: str = Field(..., min_length=1, description="The original prompt to enhance")
    strategy: str = Field(
        ...,
        description="Enhancement strategy: context, example, instruction, domain-knowledge"
    )
    options: Dict[str, Any] = Field(
        default_factory=dict,
        description="Strategy-specific options, e.g. {\"domain\": \"physics\"}"
    )


class ContextChainRequest(BaseModel):
    """Request for template-chain context enhancement."""
    prompt: str = Field(..., min_length=1, description="The prompt to enhance")
    topic: Optional[str] = Field(None, description="Topic to add context about")
    depth: Optional[int] = Field(None, description="Depth of context (1-5)")


class ExamplesChainRequest(BaseModel):
    """Request for template-chain example enhancement."""
    prompt: str = Field(..., min_length=1, description="The prompt to enhance")
    topic: Optional[str] = Field(None, description="Topic the examples relate to")
    count: Optional[int] = Field(None, description="Number of examples (1-5)")


class InstructionsChainRequest(BaseModel):
    """Request for template-chain instruction enhancement."""
    prompt: str = Field(..., min_length=1, description="The prompt to enhance")
    instruction_type: str = Field(
        "clarity",
        description="Instruction type: clarity, creativity, precision, reasoning, custom"
    )
    custom_instructions: Optional[str] = Field(
        None,
        description="Instructions used when instruction_type is 'custom'"
    )


class ComprehensiveChainRequest(BaseModel):
    """Request for the full context, examples, instructions chain."""
    prompt: str = Field(..., min_length=1, description="The prompt to enhance")
    topic: Optional[str] = Field(None, description="Topic for context and examples")
    depth: Optional[int] = Field(None, description="Depth of context (1-5)")
    count: Optional[int] = Field(None, description="Number of examples (1-5)")
    instruction_type: str = Field("clarity", description="Instruction type")
    custom_instructions: Optional[str] = Field(None, description="Custom instructions")
