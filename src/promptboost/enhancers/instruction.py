"""Instruction enhancer: appends directives after the prompt."""

from typing import Literal

from pydantic import Field

from ..core.base import Enhancer, EnhancerOptions
from ..core.types import EnhancementResult, Strategy

INSTRUCTION_LINES = {
    "clarity": "Please provide a clear and concise response.",
    "reasoning": "Please explain your reasoning process thoroughly.",
    "structure": "Please structure your response with clear sections and headings.",
    "comprehensive": "Please provide a comprehensive response that covers all aspects of the question.",
}
STEP_BY_STEP_LINE = "Break down your approach into clear, sequential steps."
REASONING_LINE = "For each conclusion, explain the reasoning that led you to it."

SECTION = "{{ prompt }}\n\n\nINSTRUCTIONS:\n{{ instructions }}\n"


class InstructionOptions(EnhancerOptions):
    """Options for the instruction strategy."""
    instruction_type: Literal["clarity", "reasoning", "structure", "comprehensive"] = Field(
        "clarity", alias="instructionType"
    )
    add_step_by_step: bool = Field(True, alias="addStepByStep")
    add_reasoning: bool = Field(True, alias="addReasoning")


class InstructionEnhancer(Enhancer[InstructionOptions]):
    """Enhances prompts by refining instructions for better reasoning and clarity."""

    name = Strategy.INSTRUCTION.value
    description = "Enhances prompts by refining instructions for better reasoning and clarity"
    options_model = InstructionOptions

    def _enhance(self, prompt: str, options: InstructionOptions) -> EnhancementResult:
        # The type sentence is always present, so the section is never empty
        lines = [INSTRUCTION_LINES[options.instruction_type]]
        if options.add_step_by_step:
            lines.append(STEP_BY_STEP_LINE)
        if options.add_reasoning:
            lines.append(REASONING_LINE)

        enhanced = self._render(SECTION, prompt=prompt, instructions="\n".join(lines))

        return self._result(
            enhanced,
            f"Added {len(lines)} instruction enhancements",
            instructionType=options.instruction_type,
            addedStepByStep=options.add_step_by_step,
            addedReasoning=options.add_reasoning,
        )
