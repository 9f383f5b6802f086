"""Shared fixtures for settings tests."""

import pytest

from codegenie.providers import CostKey, DefaultMetadata
from codegenie.settings import SettingsService


@pytest.fixture
def service():
    """A fresh service backed by the built-in default tables."""
    return SettingsService()


@pytest.fixture
def gpt4_defaults():
    """A default table holding only OpenAI gpt-4."""
    key = CostKey("OpenAI", "gpt-4")
    return DefaultMetadata(
        input_costs={key: 30.0},
        output_costs={key: 60.0},
        window_contexts={key: 8192},
    )


@pytest.fixture
def settings_path(tmp_path):
    return tmp_path / "settings.json"
