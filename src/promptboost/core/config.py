"""Configuration management using Pydantic settings.

Settings are built once by an entry point and passed to the components that
need them. Values come from, in increasing priority: built-in defaults,
``PB_*`` environment variables, and an optional JSON configuration file.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import AliasChoices, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsError

from .exceptions import ConfigLoadError, ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "prompt-boost-config.json"
CONFIG_FILE_ENV = "PB_CONFIG_FILE"

DEFAULT_CONTEXT_TEMPLATE = """Here is some relevant context that might help with your response:

{{CONTEXT}}

Now, please respond to the following:
{{PROMPT}}"""

DEFAULT_EXAMPLE_TEMPLATE = """Here are some examples that might help with your response:

{{EXAMPLES}}

Now, please respond to the following:
{{PROMPT}}"""

DEFAULT_INSTRUCTION_TEMPLATE = """{{INSTRUCTIONS}}

Please respond to the following:
{{PROMPT}}"""

LogLevel = Literal["debug", "info", "warn", "error"]


def _setting(default: Any, key: str, env: str, **kwargs) -> Any:
    """Field readable from its camelCase file key or its environment variable."""
    return Field(
        default,
        validation_alias=AliasChoices(key, env),
        serialization_alias=key,
        **kwargs
    )


class Settings(BaseSettings):
    """Process-wide configuration, immutable once constructed."""

    enabled_enhancers: List[str] = _setting(
        [], "enabledEnhancers", "PB_ENABLED_ENHANCERS"
    )
    default_context_depth: int = _setting(
        3, "defaultContextDepth", "PB_DEFAULT_CONTEXT_DEPTH", ge=1, le=5
    )
    default_example_count: int = _setting(
        2, "defaultExampleCount", "PB_DEFAULT_EXAMPLE_COUNT"
    )

    # Templates for the template-chain enhancers
    context_template: str = _setting(
        DEFAULT_CONTEXT_TEMPLATE, "contextTemplate", "PB_CONTEXT_TEMPLATE"
    )
    example_template: str = _setting(
        DEFAULT_EXAMPLE_TEMPLATE, "exampleTemplate", "PB_EXAMPLE_TEMPLATE"
    )
    instruction_template: str = _setting(
        DEFAULT_INSTRUCTION_TEMPLATE, "instructionTemplate", "PB_INSTRUCTION_TEMPLATE"
    )

    log_level: LogLevel = _setting("info", "logLevel", "PB_LOG_LEVEL")
    log_to_file: bool = _setting(False, "logToFile", "PB_LOG_TO_FILE")
    log_file_path: str = _setting(
        "./logs/prompt-boost.log", "logFilePath", "PB_LOG_FILE_PATH"
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }

    def to_file_dict(self) -> dict:
        """Serialize using the configuration file keys."""
        return self.model_dump(by_alias=True)


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Locate the configuration file: argument, then PB_CONFIG_FILE, then cwd."""
    if path is not None:
        return Path(path)
    env_path = os.environ.get(CONFIG_FILE_ENV)
    if env_path:
        return Path(env_path)
    return Path.cwd() / CONFIG_FILE_NAME


def _read_config_file(path: Path) -> Dict[str, Any]:
    """File values, validated on their own so the environment cannot taint them."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise ConfigLoadError(str(path), cause=e) from e

    if not isinstance(data, dict):
        raise ConfigLoadError(
            str(path), cause=TypeError("configuration must be a JSON object")
        )

    try:
        # model_validate skips the environment sources
        Settings.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigLoadError(str(path), cause=e) from e
    return data


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Load settings, merging an optional JSON file over the environment and defaults.

    A missing file yields the environment and defaults. A malformed file is
    reported as a warning and ignored. Invalid ``PB_*`` variables are
    reported the same way and ignored; startup never fails here.

    Args:
        path: Explicit configuration file location

    Returns:
        The loaded Settings
    """
    config_path = resolve_config_path(path)
    file_values: Dict[str, Any] = {}

    if not config_path.exists():
        logger.debug("No configuration file at %s, using defaults", config_path)
    else:
        try:
            file_values = _read_config_file(config_path)
            logger.debug("Loaded configuration from %s", config_path)
        except ConfigLoadError as e:
            logger.warning("Error loading config file, using default configuration: %s", e.message)

    try:
        return Settings(**file_values)
    except (PydanticValidationError, SettingsError) as e:
        logger.warning("Ignoring invalid PB_* environment variables: %s", e)
        return Settings.model_validate(file_values)


def save_settings(
    settings: Settings,
    path: Optional[Union[str, Path]] = None,
    **overrides: Any
) -> Settings:
    """
    Merge overrides into settings and persist the result as JSON.

    Args:
        settings: Current settings
        path: Destination file (defaults as in load_settings)
        **overrides: Field values to change

    Returns:
        The merged Settings that were written
    """
    unknown = [key for key in overrides if key not in Settings.model_fields]
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys: {', '.join(unknown)}",
            config_key=unknown[0]
        )

    try:
        merged = Settings.model_validate({**settings.model_dump(), **overrides})
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", cause=e) from e

    config_path = resolve_config_path(path)
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(
            json.dumps(merged.to_file_dict(), indent=2), encoding="utf-8"
        )
    except OSError as e:
        raise ConfigurationError(
            f"Error saving configuration to {config_path}: {e}",
            details={"path": str(config_path)},
            cause=e
        ) from e

    logger.info("Saved configuration to %s", config_path)
    return merged
