"""Example enhancer: inserts placeholder examples around the prompt."""

from typing import List, Literal, Optional

from pydantic import Field

from ..core.base import Enhancer, EnhancerOptions
from ..core.types import EnhancementResult, Strategy

EXAMPLE_PHRASES = {
    "simple": "A simple example related to the prompt.",
    "detailed": "A detailed example with step-by-step explanation.",
    "diverse": "A diverse example showing different aspects of the prompt.",
}

SECTION_BEFORE = "\nEXAMPLES:\n{{ examples }}\n\n\nPROMPT:\n{{ prompt }}"
SECTION_AFTER = "{{ prompt }}\n\n\nEXAMPLES:\n{{ examples }}\n"


class ExampleOptions(EnhancerOptions):
    """Options for the example strategy.

    ``example_count`` left unset takes the configured default.
    """
    example_count: Optional[int] = Field(None, alias="exampleCount")
    example_type: Literal["simple", "detailed", "diverse"] = Field(
        "simple", alias="exampleType"
    )
    position: Literal["before", "after"] = "before"


class ExampleEnhancer(Enhancer[ExampleOptions]):
    """Enhances prompts by adding relevant examples."""

    name = Strategy.EXAMPLE.value
    description = "Enhances prompts by adding relevant examples"
    options_model = ExampleOptions

    def _enhance(self, prompt: str, options: ExampleOptions) -> EnhancementResult:
        count = options.example_count
        if count is None:
            count = self.settings.default_example_count

        phrase = EXAMPLE_PHRASES[options.example_type]
        examples: List[str] = [
            f"Example {i}: {phrase}" for i in range(1, max(0, count) + 1)
        ]

        if not examples:
            enhanced = prompt
        else:
            layout = SECTION_BEFORE if options.position == "before" else SECTION_AFTER
            enhanced = self._render(layout, examples="\n\n".join(examples), prompt=prompt)

        return self._result(
            enhanced,
            f"Added {len(examples)} examples",
            exampleType=options.example_type,
            position=options.position,
        )
