"""CLI commands."""

from .enhance import enhance, strategies, legacy
from .config import config

__all__ = [
    "enhance",
    "strategies",
    "legacy",
    "config",
]
