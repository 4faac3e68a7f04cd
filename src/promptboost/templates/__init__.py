"""Template substitution and the template-chain enhancers."""

from .engine import render_template
from .legacy import (
    TemplateChainEnhancer,
    CONTEXT_DEPTHS,
    EXAMPLE_POOL,
    INSTRUCTION_SETS,
    INSTRUCTION_TYPES,
)

__all__ = [
    "render_template",
    "TemplateChainEnhancer",
    "CONTEXT_DEPTHS",
    "EXAMPLE_POOL",
    "INSTRUCTION_SETS",
    "INSTRUCTION_TYPES",
]
