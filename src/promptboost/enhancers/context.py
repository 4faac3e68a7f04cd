"""Context enhancer: prepends definitions and background for the prompt."""

import re
from typing import List, Literal

from pydantic import Field

from ..core.base import Enhancer, EnhancerOptions
from ..core.types import EnhancementResult, Strategy

# ASCII word boundaries: "Café" yields "Caf"
CAPITALIZED_TERM = re.compile(r"\b[A-Z][a-zA-Z]*\b", re.ASCII)
QUOTED_TERM = re.compile(r'"([^"]+)"')

BACKGROUND_LINE = "Background: Additional context to help understand the prompt."
EXTENDED_LINE = "Extended context: More detailed information about the topic."

CONTEXT_TYPE_LINES = {
    "technical": "Technical context: Specialized information for technical understanding.",
    "creative": "Creative context: Information to inspire creative thinking.",
    "analytical": "Analytical context: Information to support analytical reasoning.",
}

SECTION = "\nCONTEXT:\n{{ context }}\n\nPROMPT:\n{{ prompt }}"


class ContextOptions(EnhancerOptions):
    """Options for the context strategy."""
    context_type: Literal["general", "technical", "creative", "analytical"] = Field(
        "general", alias="contextType"
    )
    depth: Literal["minimal", "moderate", "extensive"] = "moderate"
    include_definitions: bool = Field(True, alias="includeDefinitions")
    include_background: bool = Field(True, alias="includeBackground")


def extract_key_terms(prompt: str) -> List[str]:
    """
    Naive key terms: capitalized words, then double-quoted phrases.

    Each term appears once, at its first position.
    """
    capitalized = CAPITALIZED_TERM.findall(prompt)
    quoted = QUOTED_TERM.findall(prompt)
    return list(dict.fromkeys(capitalized + quoted))


class ContextEnhancer(Enhancer[ContextOptions]):
    """Enhances prompts by adding relevant contextual information."""

    name = Strategy.CONTEXT.value
    description = "Enhances prompts by adding relevant contextual information"
    options_model = ContextOptions

    def _enhance(self, prompt: str, options: ContextOptions) -> EnhancementResult:
        key_terms = extract_key_terms(prompt)

        lines: List[str] = []
        if options.include_definitions:
            lines.extend(f"{term}: A term relevant to this prompt." for term in key_terms)
        if options.include_background:
            lines.append(BACKGROUND_LINE)
        if options.depth == "extensive":
            lines.append(EXTENDED_LINE)
        if options.context_type in CONTEXT_TYPE_LINES:
            lines.append(CONTEXT_TYPE_LINES[options.context_type])

        if lines:
            enhanced = self._render(SECTION, context="\n".join(lines), prompt=prompt)
        else:
            enhanced = prompt

        return self._result(
            enhanced,
            f"Added {len(lines)} context elements",
            contextType=options.context_type,
            depth=options.depth,
            keyTerms=key_terms,
        )
