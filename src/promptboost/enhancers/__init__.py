"""Built-in prompt enhancement strategies."""

from typing import Optional

from ..core.config import Settings
from ..core.registry import EnhancerRegistry
from .context import ContextEnhancer, ContextOptions, extract_key_terms
from .example import ExampleEnhancer, ExampleOptions
from .instruction import InstructionEnhancer, InstructionOptions
from .domain_knowledge import DomainKnowledgeEnhancer, DomainKnowledgeOptions

BUILTIN_ENHANCERS = (
    ContextEnhancer,
    ExampleEnhancer,
    InstructionEnhancer,
    DomainKnowledgeEnhancer,
)


def create_default_registry(settings: Optional[Settings] = None) -> EnhancerRegistry:
    """Registry holding every built-in enhancer, built with the given settings."""
    settings = settings or Settings()
    return EnhancerRegistry(cls(settings) for cls in BUILTIN_ENHANCERS)


__all__ = [
    "BUILTIN_ENHANCERS",
    "create_default_registry",
    "extract_key_terms",
    # Enhancers
    "ContextEnhancer",
    "ExampleEnhancer",
    "InstructionEnhancer",
    "DomainKnowledgeEnhancer",
    # Options
    "ContextOptions",
    "ExampleOptions",
    "InstructionOptions",
    "DomainKnowledgeOptions",
]
