"""Shared test fixtures for kbn_plugin_generator tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from kbn_plugin_generator.core.contracts.config import PluginConfig
from tests.fakes.config import make_config
from tests.fakes.prompter import ScriptedPrompter


@pytest.fixture
def prompter() -> ScriptedPrompter:
    """A prompter that accepts every default."""
    return ScriptedPrompter()


@pytest.fixture
def full_config() -> PluginConfig:
    """A config with every optional component enabled."""
    return make_config(app=True, translations=True, hack=True, api=True)


@pytest.fixture
def plugin_dir(tmp_path: Path) -> Path:
    """An empty plugin directory with no Kibana checkout next to it."""
    destination = tmp_path / "workspace" / "my-plugin"
    destination.mkdir(parents=True)
    return destination
