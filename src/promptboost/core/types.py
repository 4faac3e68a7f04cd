"""Core type definitions for the prompt enhancement service."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class Strategy(Enum):
    """Names of the built-in enhancement strategies."""
    CONTEXT = "context"
    EXAMPLE = "example"
    INSTRUCTION = "instruction"
    DOMAIN_KNOWLEDGE = "domain-knowledge"


@dataclass
class EnhancementResult:
    """
    Result of a single enhancement.

    ``metadata`` always carries ``strategy`` and ``modifications``; each
    enhancer adds the option values it resolved.
    """
    enhanced_prompt: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def strategy(self) -> str:
        """Name of the enhancer that produced this result."""
        return self.metadata.get("strategy", "")

    @property
    def modifications(self) -> List[str]:
        """Human-readable change descriptions, in order."""
        return self.metadata.get("modifications", [])

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire shape returned to tool callers."""
        return {
            "enhancedPrompt": self.enhanced_prompt,
            "metadata": self.metadata,
        }
