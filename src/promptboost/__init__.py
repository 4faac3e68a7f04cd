"""
PromptBoost - Prompt enhancement strategies

Enhance prompts with context, examples, instructions, or domain knowledge.

Basic Usage:
    >>> from promptboost import PromptBoost
    >>> pb = PromptBoost()
    >>>
    >>> result = pb.enhance("Explain quantum computing", strategy="context")
    >>> print(result.enhanced_prompt)
    >>>
    >>> result = pb.enhance(
    ...     "Explain quantum computing",
    ...     strategy="domain-knowledge",
    ...     options={"domain": "physics"},
    ... )
    >>> print(result.metadata["domain"])

For more control, use the individual modules:
    - promptboost.enhancers: The strategy enhancers and default registry
    - promptboost.templates: Template substitution and template-chain enhancers
    - promptboost.dispatch: Error-enveloping adapter used by the transports
    - promptboost.mcp_server: MCP stdio server
    - promptboost.api: REST API server
    - promptboost.cli: Command-line interface
"""

__version__ = "1.0.0"

from typing import Any, Dict, List, Mapping, Optional

from .core.types import EnhancementResult, Strategy
from .core.base import Enhancer
from .core.config import Settings, load_settings
from .core.exceptions import (
    PromptBoostError,
    EnhancementError,
    UnknownStrategyError,
    MissingDomainError,
    ValidationError,
    InvalidOptionsError,
    InvalidRangeError,
    ConfigurationError,
)
from .core.registry import EnhancerRegistry
from .enhancers import (
    ContextEnhancer,
    ExampleEnhancer,
    InstructionEnhancer,
    DomainKnowledgeEnhancer,
    create_default_registry,
)
from .templates import TemplateChainEnhancer

__all__ = [
    # Main class
    "PromptBoost",
    "enhance",
    # Core types
    "EnhancementResult",
    "Strategy",
    "Enhancer",
    "EnhancerRegistry",
    "Settings",
    "load_settings",
    # Exceptions
    "PromptBoostError",
    "EnhancementError",
    "UnknownStrategyError",
    "MissingDomainError",
    "ValidationError",
    "InvalidOptionsError",
    "InvalidRangeError",
    "ConfigurationError",
    # Individual components (for advanced use)
    "ContextEnhancer",
    "ExampleEnhancer",
    "InstructionEnhancer",
    "DomainKnowledgeEnhancer",
    "TemplateChainEnhancer",
    "create_default_registry",
]


class PromptBoost:
    """
    Main interface for prompt enhancement.

    Unlike the transports, errors are raised rather than enveloped.

    Example:
        >>> pb = PromptBoost()
        >>> pb.enhance("Explain quantum computing", "instruction").enhanced_prompt
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize PromptBoost.

        Args:
            settings: Configuration (defaults plus environment when omitted)
        """
        self.settings = settings or Settings()

        # Initialize components lazily
        self._registry: Optional[EnhancerRegistry] = None
        self._template_chain: Optional[TemplateChainEnhancer] = None

    @property
    def registry(self) -> EnhancerRegistry:
        """Registry of the enhancers enabled by settings."""
        if self._registry is None:
            enabled = create_default_registry(self.settings).load_enabled(self.settings)
            self._registry = EnhancerRegistry(enabled)
        return self._registry

    @property
    def template_chain(self) -> TemplateChainEnhancer:
        """Get or create the template-chain enhancer."""
        if self._template_chain is None:
            self._template_chain = TemplateChainEnhancer(self.settings)
        return self._template_chain

    def enhance(
        self,
        prompt: str,
        strategy: str = Strategy.CONTEXT.value,
        options: Optional[Mapping[str, Any]] = None
    ) -> EnhancementResult:
        """
        Enhance a prompt with a named strategy.

        Args:
            prompt: The prompt to enhance
            strategy: Strategy name (context, example, instruction, domain-knowledge)
            options: Strategy-specific options

        Returns:
            EnhancementResult with the enhanced prompt and metadata
        """
        return self.registry.resolve(strategy).enhance(prompt, options)

    def list_strategies(self) -> List[Dict[str, str]]:
        """Name and description of each enabled strategy."""
        return self.registry.list_strategies()

    def enhance_comprehensive(
        self,
        prompt: str,
        topic: Optional[str] = None,
        depth: Optional[int] = None,
        count: Optional[int] = None,
        instruction_type: str = "clarity"
    ) -> str:
        """Template-chain context, examples and instructions (deprecated)."""
        return self.template_chain.enhance_comprehensive(
            prompt, topic, depth, count, instruction_type
        )


def enhance(
    prompt: str,
    strategy: str = Strategy.CONTEXT.value,
    **options: Any
) -> EnhancementResult:
    """
    Convenience function to enhance a prompt with default settings.

    Args:
        prompt: The prompt to enhance
        strategy: Strategy name
        **options: Strategy options, e.g. ``domain="physics"``

    Returns:
        EnhancementResult with enhanced prompt
    """
    return PromptBoost().enhance(prompt, strategy, options)
