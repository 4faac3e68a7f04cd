"""Registry of enhancement strategies."""

import logging
from typing import Dict, Iterable, List, Optional

from .base import Enhancer
from .config import Settings
from .exceptions import ConfigurationError, UnknownStrategyError

logger = logging.getLogger(__name__)


class EnhancerRegistry:
    """
    Ordered collection of enhancer instances, keyed by name.

    Names are unique; listing preserves registration order.
    """

    def __init__(self, enhancers: Optional[Iterable[Enhancer]] = None):
        self._items: Dict[str, Enhancer] = {}
        for enhancer in (enhancers or []):
            self.register(enhancer)

    def register(self, enhancer: Enhancer) -> Enhancer:
        """Register an enhancer instance under its name."""
        if enhancer.name in self._items:
            raise ConfigurationError(
                f"Enhancer '{enhancer.name}' is already registered",
                config_key="enabledEnhancers"
            )
        self._items[enhancer.name] = enhancer
        return enhancer

    def list_all(self) -> List[Enhancer]:
        """All enhancers in registration order."""
        return list(self._items.values())

    def list_registered(self) -> List[str]:
        """All registered names in registration order."""
        return list(self._items.keys())

    def resolve(self, name: str) -> Enhancer:
        """Get the enhancer for a strategy name."""
        if not isinstance(name, str) or name not in self._items:
            raise UnknownStrategyError(str(name), available=self.list_registered())
        return self._items[name]

    def is_registered(self, name: str) -> bool:
        """Check if a name is registered."""
        return name in self._items

    def load_enabled(self, settings: Settings) -> List[Enhancer]:
        """
        Enhancers enabled by configuration.

        An empty ``enabled_enhancers`` list enables everything.
        """
        enabled = settings.enabled_enhancers
        if not enabled:
            logger.info("Loading all enhancers: %s", ", ".join(self.list_registered()))
            return self.list_all()

        unknown = [name for name in enabled if name not in self._items]
        if unknown:
            logger.warning("Ignoring unknown enhancers in configuration: %s", ", ".join(unknown))

        logger.info("Loading specific enhancers: %s", ", ".join(enabled))
        return [enhancer for enhancer in self.list_all() if enhancer.name in enabled]

    def list_strategies(self) -> List[Dict[str, str]]:
        """Name and description of every enhancer, in order."""
        return [enhancer.describe() for enhancer in self.list_all()]

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._items
