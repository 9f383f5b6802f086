"""Unit tests for codegenie.settings.store (settings.json persistence)."""

import json

from codegenie.constant import SETTINGS_STORE_ID
from codegenie.providers import DEFAULT_METADATA
from codegenie.providers.registry import PROVIDER_GROQ, PROVIDER_OPENAI
from codegenie.settings import (
    SettingsService,
    SettingsState,
    load_settings_json,
    mask_api_key,
    open_settings_service,
    save_settings_json,
    save_settings_service,
)


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")


class TestLoadSave:
    def test_round_trip(self, settings_path):
        service = SettingsService()
        service.set_api_key(PROVIDER_GROQ, "gsk-1")
        service.set_model_cost(PROVIDER_OPENAI, "gpt-4o", 1.0, 2.0)
        save_settings_service(service, settings_path)

        loaded = load_settings_json(settings_path)
        assert loaded == service.get_state()

    def test_uses_persisted_field_names(self, settings_path):
        save_settings_json(
            SettingsState(openai_key="sk-1", top_p=0.5),
            settings_path,
        )
        raw = json.loads(settings_path.read_text(encoding="utf-8"))
        component = raw[SETTINGS_STORE_ID]
        assert component["openAIKey"] == "sk-1"
        assert component["topP"] == 0.5
        assert "modelInputCosts" in component
        assert "defaultWindowContext" in component

    def test_keeps_other_components(self, settings_path):
        _write(settings_path, {"other.Component": {"a": 1}})
        save_settings_json(SettingsState(), settings_path)
        raw = json.loads(settings_path.read_text(encoding="utf-8"))
        assert raw["other.Component"] == {"a": 1}
        assert SETTINGS_STORE_ID in raw

    def test_creates_parent_directories(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "settings.json"
        save_settings_json(SettingsState(), path)
        assert path.is_file()


class TestLoadFailures:
    def test_missing_file(self, settings_path):
        assert load_settings_json(settings_path) is None

    def test_missing_component(self, settings_path):
        _write(settings_path, {"other.Component": {}})
        assert load_settings_json(settings_path) is None

    def test_corrupt_json(self, settings_path):
        settings_path.write_text("{not json", encoding="utf-8")
        assert load_settings_json(settings_path) is None

    def test_not_an_object(self, settings_path):
        _write(settings_path, [1, 2, 3])
        assert load_settings_json(settings_path) is None

    def test_invalid_snapshot(self, settings_path):
        _write(settings_path, {SETTINGS_STORE_ID: {"temperature": "hot"}})
        assert load_settings_json(settings_path) is None


class TestOpenSettingsService:
    def test_fresh_service_without_file(self, settings_path):
        service = open_settings_service(settings_path)
        assert len(service.get_custom_prompts()) == 3
        assert service.get_state().model_input_costs == {}

    def test_restores_and_back_fills(self, settings_path):
        _write(
            settings_path,
            {
                SETTINGS_STORE_ID: {
                    "groqKey": "gsk-legacy",
                    "modelInputCosts": {"Groq:my-model": 2.5},
                },
            },
        )
        service = open_settings_service(settings_path)
        state = service.get_state()

        assert service.get_api_key(PROVIDER_GROQ) == "gsk-legacy"
        assert state.model_input_costs == {"Groq:my-model": 2.5}
        assert len(state.model_output_costs) == len(
            DEFAULT_METADATA.output_costs,
        )
        assert [p.name for p in state.custom_prompts] == [
            "test",
            "explain",
            "review",
        ]
        assert service.get_model_input_cost(PROVIDER_GROQ, "my-model") == 2.5


class TestMaskApiKey:
    def test_masks_middle(self):
        assert mask_api_key("sk-abcdefghijk") == "sk-*******hijk"

    def test_short_and_empty(self):
        assert mask_api_key("abc") == "***"
        assert mask_api_key("") == ""
