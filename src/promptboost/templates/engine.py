"""Jinja2-based placeholder substitution.

Every enhancer formats its output through ``render_template``: the strategy
enhancers with their section layouts, the template-chain enhancers with the
configured ``{{CONTEXT}}``/``{{EXAMPLES}}``/``{{INSTRUCTIONS}}`` and
``{{PROMPT}}`` templates.

Configured templates are Jinja2 source, so literal ``{#``, ``{%`` or ``{{``
text must be escaped, e.g. ``{{ '{#' }}``. They render in a sandbox.
"""

from functools import lru_cache
from typing import Any

from jinja2 import Template, TemplateSyntaxError
from jinja2.exceptions import SecurityError
from jinja2.sandbox import SandboxedEnvironment

from ..core.exceptions import TemplateError

# Prompts are plain text: no autoescaping, and trailing newlines are kept
# because section layouts end with one.
_env = SandboxedEnvironment(
    autoescape=False,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)


@lru_cache(maxsize=64)
def _compile(source: str) -> Template:
    try:
        return _env.from_string(source)
    except TemplateSyntaxError as e:
        raise TemplateError(
            f"Invalid template: {e.message}",
            details={"line": e.lineno},
            cause=e
        ) from e


def render_template(source: str, **slots: Any) -> str:
    """
    Substitute slot values into a template string.

    Values are inserted verbatim and never re-interpreted as template
    syntax. Placeholders without a value render as empty text.

    Args:
        source: Template text using ``{{NAME}}`` placeholders
        **slots: Placeholder values

    Returns:
        Rendered text
    """
    template = _compile(source)
    try:
        return template.render(**slots)
    except SecurityError as e:
        raise TemplateError(f"Unsafe template: {e}", cause=e) from e
