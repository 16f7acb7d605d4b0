import sys
from types import SimpleNamespace

import pytest

from paramtree import ConfigurationError, load_plugin, register_plugin
from paramtree import plugins as plugins_module


class TestPluginRegistry:
    def test_load_registered_plugin(self):
        plugin = SimpleNamespace()
        register_plugin("test_registry_plugin", plugin)
        assert load_plugin("test_registry_plugin") is plugin

    def test_register_twice_replaces(self):
        first, second = SimpleNamespace(), SimpleNamespace()
        register_plugin("test_registry_replaced", first)
        register_plugin("test_registry_replaced", second)
        assert load_plugin("test_registry_replaced") is second

    def test_load_imports_plugin_module_by_naming_convention(self):
        plugin = load_plugin("full_messages")
        assert plugin is sys.modules["paramtree.plugins.full_messages"]
        assert load_plugin("full_messages") is plugin

    def test_unknown_plugin(self):
        with pytest.raises(ConfigurationError, match="plugin unknown_plugin could not be found"):
            load_plugin("unknown_plugin")

    def test_plugin_which_does_not_register_itself(self, monkeypatch):
        imported = []
        monkeypatch.setattr(plugins_module, "importlib", SimpleNamespace(import_module=imported.append))
        with pytest.raises(ConfigurationError, match="did not register itself"):
            load_plugin("silent_plugin")
        assert imported == ["paramtree.plugins.silent_plugin"]
