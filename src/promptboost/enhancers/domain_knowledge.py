"""Domain knowledge enhancer: prepends domain terminology and principles."""

from typing import Literal, Optional

from pydantic import Field

from ..core.base import Enhancer, EnhancerOptions
from ..core.exceptions import MissingDomainError
from ..core.types import EnhancementResult, Strategy

DEPTH_LINES = {
    "basic": "Basic {domain} concepts: Foundational information about this domain.",
    "intermediate": "Intermediate {domain} concepts: More detailed information about this domain.",
    "advanced": "Advanced {domain} concepts: Specialized information for experts in this domain.",
}

SECTION = "\nDOMAIN KNOWLEDGE:\n{{ knowledge }}\n\nPROMPT:\n{{ prompt }}"


class DomainKnowledgeOptions(EnhancerOptions):
    """Options for the domain-knowledge strategy. ``domain`` is required at enhance time."""
    domain: Optional[str] = None
    depth: Literal["basic", "intermediate", "advanced"] = "intermediate"
    include_terminology: bool = Field(True, alias="includeTerminology")
    include_principles: bool = Field(True, alias="includePrinciples")


class DomainKnowledgeEnhancer(Enhancer[DomainKnowledgeOptions]):
    """Enhances prompts by adding domain-specific knowledge."""

    name = Strategy.DOMAIN_KNOWLEDGE.value
    description = "Enhances prompts by adding domain-specific knowledge"
    options_model = DomainKnowledgeOptions

    def _enhance(self, prompt: str, options: DomainKnowledgeOptions) -> EnhancementResult:
        domain = options.domain
        if not domain or not domain.strip():
            raise MissingDomainError(self.name)

        lines = [f"Domain: {domain}"]
        if options.include_terminology:
            lines.append(f"{domain} Terminology: Key terms relevant to this domain.")
        if options.include_principles:
            lines.append(f"{domain} Principles: Fundamental principles in this domain.")
        lines.append(DEPTH_LINES[options.depth].format(domain=domain))

        enhanced = self._render(SECTION, knowledge="\n".join(lines), prompt=prompt)

        return self._result(
            enhanced,
            f"Added {len(lines)} domain knowledge elements",
            domain=domain,
            depth=options.depth,
        )
