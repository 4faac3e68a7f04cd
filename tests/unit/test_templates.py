"""Tests for template rendering and the template-chain enhancers."""

import pytest

from promptboost.core.config import Settings
from promptboost.core.exceptions import InvalidRangeError, TemplateError
from promptboost.templates import (
    CONTEXT_DEPTHS,
    EXAMPLE_POOL,
    INSTRUCTION_SETS,
    TemplateChainEnhancer,
    render_template,
)


class TestRenderTemplate:
    """Tests for render_template."""

    def test_substitution(self):
        assert render_template("{{A}} and {{B}}", A="x", B="y") == "x and y"

    def test_all_occurrences(self):
        """Test every occurrence of a placeholder is replaced."""
        assert render_template("{{P}}/{{P}}", P="z") == "z/z"

    def test_missing_slot_is_empty(self):
        assert render_template("[{{MISSING}}]") == "[]"

    def test_values_not_reinterpreted(self):
        """Test slot values containing braces stay literal."""
        assert render_template("{{PROMPT}}", PROMPT="{{CONTEXT}}", CONTEXT="no") == "{{CONTEXT}}"

    def test_trailing_newline_kept(self):
        assert render_template("{{A}}\n", A="x") == "x\n"

    def test_invalid_template(self):
        with pytest.raises(TemplateError):
            render_template("{{ unclosed")

    def test_sandboxed(self):
        """Test templates cannot reach Python internals."""
        with pytest.raises(TemplateError) as exc:
            render_template("{{ PROMPT.__class__.__mro__ }}", PROMPT="x")
        assert exc.value.message.startswith("Unsafe template:")

    def test_literal_jinja_delimiters_need_escaping(self):
        """Test configured templates follow Jinja syntax."""
        with pytest.raises(TemplateError):
            render_template("{#tag} {{INSTRUCTIONS}}")
        assert render_template("{{ '{#' }}tag} {{INSTRUCTIONS}}", INSTRUCTIONS="go") == "{#tag} go"


class TestTemplateChainContext:
    """Tests for enhance_with_context."""

    @pytest.fixture
    def chain(self, settings):
        return TemplateChainEnhancer(settings)

    def test_default_depth(self, chain, quantum_prompt):
        text = chain.enhance_with_context(quantum_prompt, topic="qubits")
        assert text == (
            "Here is some relevant context that might help with your response:\n\n"
            + CONTEXT_DEPTHS[3].format(topic="qubits")
            + "\n\nNow, please respond to the following:\n"
            + quantum_prompt
        )

    @pytest.mark.parametrize("depth", [1, 2, 3, 4, 5])
    def test_each_depth(self, chain, quantum_prompt, depth):
        text = chain.enhance_with_context(quantum_prompt, topic="qubits", depth=depth)
        assert CONTEXT_DEPTHS[depth].format(topic="qubits") in text

    def test_no_topic(self, chain, quantum_prompt):
        assert chain.enhance_with_context(quantum_prompt) == quantum_prompt
        assert chain.enhance_with_context(quantum_prompt, topic="", depth=99) == quantum_prompt

    @pytest.mark.parametrize("depth", [0, 6, -1, True])
    def test_depth_out_of_range(self, chain, quantum_prompt, depth):
        with pytest.raises(InvalidRangeError) as exc:
            chain.enhance_with_context(quantum_prompt, topic="qubits", depth=depth)
        assert exc.value.message == "Depth must be between 1 and 5"

    def test_configured_template(self, quantum_prompt):
        chain = TemplateChainEnhancer(Settings(context_template="<{{CONTEXT}}>{{PROMPT}}"))
        text = chain.enhance_with_context(quantum_prompt, topic="qubits", depth=1)
        assert text == "<Basic information about qubits.>Explain quantum computing"


class TestTemplateChainExamples:
    """Tests for enhance_with_examples."""

    @pytest.fixture
    def chain(self, settings):
        return TemplateChainEnhancer(settings)

    def test_default_count(self, chain, quantum_prompt):
        text = chain.enhance_with_examples(quantum_prompt, topic="qubits")
        assert EXAMPLE_POOL[0].format(topic="qubits") + "\n\n" + EXAMPLE_POOL[1].format(topic="qubits") in text
        assert "Example 3" not in text

    def test_count(self, chain, quantum_prompt):
        text = chain.enhance_with_examples(quantum_prompt, topic="qubits", count=5)
        assert text.count("related to qubits") == 5

    def test_no_topic(self, chain, quantum_prompt):
        assert chain.enhance_with_examples(quantum_prompt, count=3) == quantum_prompt

    @pytest.mark.parametrize("count", [0, 6])
    def test_count_out_of_range(self, chain, quantum_prompt, count):
        with pytest.raises(InvalidRangeError) as exc:
            chain.enhance_with_examples(quantum_prompt, topic="qubits", count=count)
        assert exc.value.message == "Example count must be between 1 and 5"


class TestTemplateChainInstructions:
    """Tests for enhance_with_instructions."""

    @pytest.fixture
    def chain(self, settings):
        return TemplateChainEnhancer(settings)

    @pytest.mark.parametrize("instruction_type", ["clarity", "creativity", "precision", "reasoning"])
    def test_types(self, chain, quantum_prompt, instruction_type):
        text = chain.enhance_with_instructions(quantum_prompt, instruction_type)
        assert text == (
            INSTRUCTION_SETS[instruction_type]
            + "\n\nPlease respond to the following:\n"
            + quantum_prompt
        )

    def test_custom(self, chain, quantum_prompt):
        text = chain.enhance_with_instructions(quantum_prompt, "custom", "Answer in haiku.")
        assert text.startswith("Answer in haiku.\n")

    @pytest.mark.parametrize("instruction_type,custom", [
        ("custom", None),
        ("custom", ""),
        ("whimsy", None),
    ])
    def test_falls_back_to_clarity(self, chain, quantum_prompt, instruction_type, custom):
        text = chain.enhance_with_instructions(quantum_prompt, instruction_type, custom)
        assert text.startswith(INSTRUCTION_SETS["clarity"])


class TestTemplateChainComprehensive:
    """Tests for enhance_comprehensive."""

    def test_nesting_order(self, settings, quantum_prompt):
        """Test instructions wrap examples which wrap context."""
        text = TemplateChainEnhancer(settings).enhance_comprehensive(
            quantum_prompt, topic="qubits", instruction_type="precision"
        )
        instructions = text.index(INSTRUCTION_SETS["precision"])
        examples = text.index("Here are some examples")
        context = text.index("Here is some relevant context")
        assert instructions < examples < context < text.index(quantum_prompt)
        assert text.endswith(quantum_prompt)

    def test_without_topic_only_instructions(self, settings, quantum_prompt):
        text = TemplateChainEnhancer(settings).enhance_comprehensive(quantum_prompt)
        assert "Here is some relevant context" not in text
        assert "Here are some examples" not in text
        assert text.startswith(INSTRUCTION_SETS["clarity"])

    def test_range_error_propagates(self, settings, quantum_prompt):
        with pytest.raises(InvalidRangeError):
            TemplateChainEnhancer(settings).enhance_comprehensive(
                quantum_prompt, topic="qubits", count=9
            )
