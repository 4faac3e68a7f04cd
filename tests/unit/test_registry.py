"""Tests for EnhancerRegistry."""

import logging

import pytest

from promptboost.core.config import Settings
from promptboost.core.exceptions import ConfigurationError, UnknownStrategyError
from promptboost.core.registry import EnhancerRegistry
from promptboost.enhancers import ContextEnhancer, ExampleEnhancer, create_default_registry


class TestEnhancerRegistry:
    """Tests for registration and lookup."""

    def test_default_order(self, registry):
        """Test built-ins are listed in registration order."""
        assert registry.list_registered() == [
            "context", "example", "instruction", "domain-knowledge"
        ]
        assert len(registry) == 4

    def test_resolve(self, registry):
        enhancer = registry.resolve("example")
        assert isinstance(enhancer, ExampleEnhancer)
        assert registry.is_registered("example")
        assert "example" in registry

    def test_resolve_unknown(self, registry):
        with pytest.raises(UnknownStrategyError) as exc:
            registry.resolve("magic")
        assert exc.value.message == "Unknown enhancement strategy: magic"
        assert exc.value.details["available"] == registry.list_registered()

    def test_duplicate_registration(self, settings):
        registry = EnhancerRegistry([ContextEnhancer(settings)])
        with pytest.raises(ConfigurationError):
            registry.register(ContextEnhancer(settings))

    @pytest.mark.parametrize("name", [["context"], {"name": "context"}, None, 3])
    def test_resolve_non_string(self, registry, name):
        with pytest.raises(UnknownStrategyError) as exc:
            registry.resolve(name)
        assert exc.value.message == f"Unknown enhancement strategy: {name}"
        assert name not in registry

    def test_empty_registry(self):
        registry = EnhancerRegistry()
        assert registry.list_registered() == []
        assert registry.list_strategies() == []

    def test_list_strategies(self, registry):
        strategies = registry.list_strategies()
        assert strategies[0] == {
            "name": "context",
            "description": "Enhances prompts by adding relevant contextual information",
        }
        assert all(set(s) == {"name", "description"} for s in strategies)


class TestLoadEnabled:
    """Tests for filtering by the enabledEnhancers setting."""

    def test_empty_enables_all(self, registry, settings, caplog):
        with caplog.at_level(logging.INFO, logger="promptboost"):
            enabled = registry.load_enabled(settings)
        assert [e.name for e in enabled] == registry.list_registered()
        assert "Loading all enhancers" in caplog.text

    def test_subset_keeps_registration_order(self, caplog):
        settings = Settings(enabled_enhancers=["domain-knowledge", "context"])
        registry = create_default_registry(settings)
        with caplog.at_level(logging.INFO, logger="promptboost"):
            enabled = registry.load_enabled(settings)
        assert [e.name for e in enabled] == ["context", "domain-knowledge"]
        assert "Loading specific enhancers" in caplog.text

    def test_unknown_names_are_ignored(self, caplog):
        settings = Settings(enabled_enhancers=["example", "telepathy"])
        registry = create_default_registry(settings)
        with caplog.at_level(logging.WARNING, logger="promptboost"):
            enabled = registry.load_enabled(settings)
        assert [e.name for e in enabled] == ["example"]
        assert "telepathy" in caplog.text
