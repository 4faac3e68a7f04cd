"""Dispatch adapter between transports and the enhancement core.

Transports (MCP tools, HTTP routes, CLI) hand requests to a
``ToolDispatcher``. Every ``PromptBoostError`` is translated into an
``{"error": message}`` envelope here so no validation failure escapes to the
transport.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from .core.config import Settings
from .core.exceptions import PromptBoostError, ValidationError
from .core.registry import EnhancerRegistry
from .enhancers import create_default_registry
from .templates.legacy import TemplateChainEnhancer

logger = logging.getLogger(__name__)

Envelope = Dict[str, Any]


class ToolDispatcher:
    """Invokes strategies and template-chain enhancers on behalf of a transport."""

    def __init__(
        self,
        registry: EnhancerRegistry,
        template_chain: Optional[TemplateChainEnhancer] = None
    ):
        self.registry = registry
        self.template_chain = template_chain or TemplateChainEnhancer()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ToolDispatcher":
        """Build a dispatcher over the enhancers enabled in settings."""
        settings = settings or Settings()
        enabled = create_default_registry(settings).load_enabled(settings)
        return cls(EnhancerRegistry(enabled), TemplateChainEnhancer(settings))

    @property
    def strategy_names(self) -> List[str]:
        """Names of the strategies this dispatcher accepts."""
        return self.registry.list_registered()

    def enhance_prompt(
        self,
        prompt: str,
        strategy: str,
        options: Optional[Mapping[str, Any]] = None
    ) -> Envelope:
        """
        Enhance a prompt with a named strategy.

        Returns:
            ``{"enhancedPrompt", "metadata"}`` on success, ``{"error"}`` otherwise
        """
        def run() -> Envelope:
            _require_prompt(prompt)
            logger.info("Enhancing prompt using strategy: %s", strategy)
            enhancer = self.registry.resolve(strategy)
            result = enhancer.enhance(prompt, options or {})
            logger.info("Successfully enhanced prompt")
            return result.to_dict()

        return self._guard("enhancing prompt", run)

    def list_enhancers(self) -> List[Dict[str, str]]:
        """Name and description of each available strategy."""
        logger.info("Listing available enhancers")
        return self.registry.list_strategies()

    def enhance_with_context(
        self,
        prompt: str,
        topic: Optional[str] = None,
        depth: Optional[int] = None
    ) -> Envelope:
        """Template-chain context enhancement."""
        return self._chain(
            "adding context",
            lambda: self.template_chain.enhance_with_context(prompt, topic, depth),
            prompt
        )

    def enhance_with_examples(
        self,
        prompt: str,
        topic: Optional[str] = None,
        count: Optional[int] = None
    ) -> Envelope:
        """Template-chain example enhancement."""
        return self._chain(
            "adding examples",
            lambda: self.template_chain.enhance_with_examples(prompt, topic, count),
            prompt
        )

    def enhance_with_instructions(
        self,
        prompt: str,
        instruction_type: str = "clarity",
        custom_instructions: Optional[str] = None
    ) -> Envelope:
        """Template-chain instruction enhancement."""
        return self._chain(
            "adding instructions",
            lambda: self.template_chain.enhance_with_instructions(
                prompt, instruction_type, custom_instructions
            ),
            prompt
        )

    def enhance_comprehensive(
        self,
        prompt: str,
        topic: Optional[str] = None,
        depth: Optional[int] = None,
        count: Optional[int] = None,
        instruction_type: str = "clarity",
        custom_instructions: Optional[str] = None
    ) -> Envelope:
        """Template-chain context, examples and instructions in sequence."""
        return self._chain(
            "running comprehensive enhancement",
            lambda: self.template_chain.enhance_comprehensive(
                prompt, topic, depth, count, instruction_type, custom_instructions
            ),
            prompt
        )

    def _chain(self, action: str, func: Callable[[], str], prompt: str) -> Envelope:
        def run() -> Envelope:
            _require_prompt(prompt)
            return {"enhancedPrompt": func()}

        return self._guard(action, run)

    @staticmethod
    def _guard(action: str, func: Callable[[], Envelope]) -> Envelope:
        try:
            return func()
        except PromptBoostError as e:
            logger.error("Error %s: %s", action, e.message)
            return {"error": e.message}


def _require_prompt(prompt: Any) -> None:
    if not isinstance(prompt, str) or not prompt:
        raise ValidationError("Prompt must not be empty")


def is_error(envelope: Envelope) -> bool:
    """Whether a dispatcher envelope reports a failure."""
    return "error" in envelope
