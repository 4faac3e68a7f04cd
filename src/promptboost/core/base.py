"""Abstract base class for enhancement strategies."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, model_validator
from pydantic import ValidationError as PydanticValidationError

from .config import Settings
from .exceptions import InvalidOptionsError
from .types import EnhancementResult
from ..templates.engine import render_template

logger = logging.getLogger(__name__)


class EnhancerOptions(BaseModel):
    """
    Base for per-strategy option models.

    Wire names are camelCase aliases; attribute names are accepted too.
    Unknown keys are ignored and ``None`` values count as absent.
    """

    model_config = {
        "extra": "ignore",
        "populate_by_name": True,
        "frozen": True,
    }

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {k: v for k, v in data.items() if v is not None}
        return data


OptionsT = TypeVar("OptionsT", bound=EnhancerOptions)


class Enhancer(ABC, Generic[OptionsT]):
    """
    Stateless prompt transformer.

    Subclasses set ``name``, ``description`` and ``options_model`` and
    implement ``_enhance``. Instances are built once with the process
    settings and never mutated afterwards.
    """

    name: str = "base_enhancer"
    description: str = "Base enhancement strategy"
    options_model: Type[OptionsT]

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

    def parse_options(self, options: Optional[Union[Mapping[str, Any], OptionsT]] = None) -> OptionsT:
        """Validate raw options into this strategy's options model."""
        if isinstance(options, self.options_model):
            return options

        try:
            return self.options_model.model_validate(options or {})
        except PydanticValidationError as e:
            errors = [
                {
                    "field": ".".join(str(p) for p in err["loc"]) or "options",
                    "message": err["msg"],
                }
                for err in e.errors()
            ]
            raise InvalidOptionsError(self.name, errors, cause=e) from e

    def enhance(
        self,
        prompt: str,
        options: Optional[Union[Mapping[str, Any], OptionsT]] = None
    ) -> EnhancementResult:
        """
        Enhance a prompt.

        Args:
            prompt: The prompt to enhance
            options: Strategy options as a mapping or options model

        Returns:
            EnhancementResult with the transformed prompt and metadata
        """
        parsed = self.parse_options(options)
        logger.debug(
            "Enhancing prompt with %s: %s",
            self.name, parsed.model_dump(by_alias=True)
        )
        return self._enhance(prompt or "", parsed)

    @abstractmethod
    def _enhance(self, prompt: str, options: OptionsT) -> EnhancementResult:
        """Build the result from validated options."""
        pass

    def _result(self, enhanced_prompt: str, modification: str, **extra: Any) -> EnhancementResult:
        metadata: Dict[str, Any] = {
            "strategy": self.name,
            "modifications": [modification],
        }
        metadata.update(extra)
        return EnhancementResult(enhanced_prompt=enhanced_prompt, metadata=metadata)

    @staticmethod
    def _render(template: str, **slots: Any) -> str:
        return render_template(template, **slots)

    def describe(self) -> Dict[str, str]:
        """Name and description as listed to callers."""
        return {"name": self.name, "description": self.description}
