"""Template-chain enhancers.

Deprecated alternate surface kept for callers of the original three-tool
API. Each function picks canned text from a lookup table and renders it into
a configured template. New callers should use the strategy enhancers
through ``EnhancerRegistry`` instead.
"""

import logging
from typing import Dict, Optional

from ..core.config import Settings
from ..core.exceptions import InvalidRangeError
from .engine import render_template

logger = logging.getLogger(__name__)

MIN_LEVEL = 1
MAX_LEVEL = 5

CONTEXT_DEPTHS: Dict[int, str] = {
    1: "Basic information about {topic}.",
    2: "Basic information about {topic}, including key concepts and terminology.",
    3: "Comprehensive overview of {topic}, including key concepts, terminology, "
       "and common applications.",
    4: "Detailed information about {topic}, including history, key concepts, "
       "terminology, applications, and current trends.",
    5: "Expert-level information about {topic}, including detailed history, "
       "theoretical foundations, key concepts, terminology, applications, "
       "current trends, and future directions.",
}

EXAMPLE_POOL = (
    "Example 1 related to {topic}: This is a simple demonstration.",
    "Example 2 related to {topic}: This shows a more complex case.",
    "Example 3 related to {topic}: This illustrates an edge case.",
    "Example 4 related to {topic}: This demonstrates best practices.",
    "Example 5 related to {topic}: This shows common pitfalls to avoid.",
)

INSTRUCTION_SETS: Dict[str, str] = {
    "clarity": (
        "Please provide a clear, well-structured response. Use simple language, "
        "avoid jargon unless necessary, and organize information logically with "
        "headings and bullet points where appropriate."
    ),
    "creativity": (
        "Please provide a creative and innovative response. Think outside the box, "
        "consider unconventional approaches, and explore multiple perspectives or "
        "solutions."
    ),
    "precision": (
        "Please provide a precise and accurate response. Focus on factual "
        "information, cite sources where possible, and be explicit about levels of "
        "certainty. Avoid ambiguity and vague statements."
    ),
    "reasoning": (
        "Please provide a response that demonstrates clear reasoning. Explain your "
        "thought process step-by-step, consider multiple angles, identify "
        "assumptions, and evaluate the strength of different arguments or "
        "approaches."
    ),
    "custom": "",
}

INSTRUCTION_TYPES = tuple(INSTRUCTION_SETS)


def _check_range(value: int, field: str, message: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not MIN_LEVEL <= value <= MAX_LEVEL:
        raise InvalidRangeError(message, field=field, value=value)


class TemplateChainEnhancer:
    """Context, example and instruction enhancement through configured templates."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    def enhance_with_context(
        self,
        prompt: str,
        topic: Optional[str] = None,
        depth: Optional[int] = None
    ) -> str:
        """
        Add canned context about a topic.

        Args:
            prompt: The original prompt
            topic: Topic to add context about; without one the prompt is returned unchanged
            depth: Level of detail, 1-5

        Returns:
            The enhanced prompt
        """
        if not topic:
            return prompt

        depth = self.settings.default_context_depth if depth is None else depth
        _check_range(depth, "depth", "Depth must be between 1 and 5")

        context = CONTEXT_DEPTHS[depth].format(topic=topic)
        return render_template(
            self.settings.context_template, CONTEXT=context, PROMPT=prompt
        )

    def enhance_with_examples(
        self,
        prompt: str,
        topic: Optional[str] = None,
        count: Optional[int] = None
    ) -> str:
        """
        Add canned examples about a topic.

        Args:
            prompt: The original prompt
            topic: Topic the examples relate to; without one the prompt is returned unchanged
            count: Number of examples, 1-5

        Returns:
            The enhanced prompt
        """
        if not topic:
            return prompt

        count = self.settings.default_example_count if count is None else count
        _check_range(count, "count", "Example count must be between 1 and 5")

        examples = "\n\n".join(
            example.format(topic=topic) for example in EXAMPLE_POOL[:count]
        )
        return render_template(
            self.settings.example_template, EXAMPLES=examples, PROMPT=prompt
        )

    def enhance_with_instructions(
        self,
        prompt: str,
        instruction_type: str = "clarity",
        custom_instructions: Optional[str] = None
    ) -> str:
        """
        Add a canned instruction paragraph.

        ``custom`` uses ``custom_instructions`` when given. Unknown types and
        ``custom`` without text fall back to ``clarity``.
        """
        if instruction_type == "custom" and custom_instructions:
            instructions = custom_instructions
        else:
            instructions = INSTRUCTION_SETS.get(instruction_type) or INSTRUCTION_SETS["clarity"]

        return render_template(
            self.settings.instruction_template, INSTRUCTIONS=instructions, PROMPT=prompt
        )

    def enhance_comprehensive(
        self,
        prompt: str,
        topic: Optional[str] = None,
        depth: Optional[int] = None,
        count: Optional[int] = None,
        instruction_type: str = "clarity",
        custom_instructions: Optional[str] = None
    ) -> str:
        """Chain context, examples and instructions, each on the previous output."""
        logger.debug("Running comprehensive template chain for topic %r", topic)
        enhanced = self.enhance_with_context(prompt, topic, depth)
        enhanced = self.enhance_with_examples(enhanced, topic, count)
        return self.enhance_with_instructions(enhanced, instruction_type, custom_instructions)
