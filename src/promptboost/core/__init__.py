"""Core module - foundational types, base classes, and configuration."""

from .types import EnhancementResult, Strategy
from .base import Enhancer, EnhancerOptions
from .config import Settings, load_settings, save_settings
from .exceptions import (
    PromptBoostError,
    EnhancementError,
    UnknownStrategyError,
    MissingDomainError,
    ValidationError,
    InvalidOptionsError,
    InvalidRangeError,
    ConfigurationError,
    ConfigLoadError,
    TemplateError,
)
from .logging_setup import setup_logging
from .registry import EnhancerRegistry

__all__ = [
    # Types
    "EnhancementResult",
    "Strategy",
    # Base classes
    "Enhancer",
    "EnhancerOptions",
    # Configuration
    "Settings",
    "load_settings",
    "save_settings",
    "setup_logging",
    # Exceptions
    "PromptBoostError",
    "EnhancementError",
    "UnknownStrategyError",
    "MissingDomainError",
    "ValidationError",
    "InvalidOptionsError",
    "InvalidRangeError",
    "ConfigurationError",
    "ConfigLoadError",
    "TemplateError",
    # Registry
    "EnhancerRegistry",
]
