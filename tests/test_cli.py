"""Tests for the codegenie command line."""

import pytest
from click.testing import CliRunner

from codegenie.cli.main import cli
from codegenie.settings import load_settings_json


@pytest.fixture
def run(settings_path):
    runner = CliRunner()

    def _run(*args, **kwargs):
        return runner.invoke(
            cli,
            ["--settings", str(settings_path), *args],
            **kwargs,
        )

    return _run


class TestCosts:
    def test_show_default(self, run):
        result = run("costs", "show", "OpenAI", "gpt-4")
        assert result.exit_code == 0, result.output
        assert "30" in result.output
        assert "8192" in result.output

    def test_set_persists(self, run, settings_path):
        result = run("costs", "set", "OpenAI", "gpt-4o", "1.5", "2.5")
        assert result.exit_code == 0, result.output

        saved = load_settings_json(settings_path)
        assert saved.model_input_costs == {"OpenAI:gpt-4o": 1.5}
        assert saved.model_output_costs == {"OpenAI:gpt-4o": 2.5}

    def test_set_window_persists(self, run, settings_path):
        result = run("costs", "set-window", "Groq", "llama3-8b-8192", "4096")
        assert result.exit_code == 0, result.output
        saved = load_settings_json(settings_path)
        assert saved.model_window_contexts == {"Groq:llama3-8b-8192": 4096}

    def test_set_on_local_provider_warns(self, run, settings_path):
        result = run("costs", "set", "Ollama", "llama3", "1", "2")
        assert result.exit_code == 0
        assert "local runtime" in result.output
        assert not settings_path.exists()

    def test_unknown_provider(self, run):
        result = run("costs", "show", "Nope", "model")
        assert result.exit_code == 1
        assert "Unknown provider: Nope" in result.output

    def test_list_one_provider(self, run):
        result = run("costs", "list", "--provider", "Groq")
        assert result.exit_code == 0, result.output
        assert "mixtral-8x7b-32768" in result.output
        assert "gpt-4o" not in result.output


class TestProviders:
    def test_list(self, run):
        result = run("providers", "list")
        assert result.exit_code == 0, result.output
        assert "Groq (groq) [api]" in result.output
        assert "Ollama (ollama) [local]" in result.output

    def test_set_key(self, run, settings_path):
        result = run("providers", "set-key", "Groq", input="gsk-secret-1\n")
        assert result.exit_code == 0, result.output
        assert load_settings_json(settings_path).groq_key == "gsk-secret-1"

    def test_set_key_on_local_provider_fails(self, run):
        result = run("providers", "set-key", "Ollama")
        assert result.exit_code == 1

    def test_set_url(self, run, settings_path):
        result = run("providers", "set-url", "Jan", "http://box:1337/v1/")
        assert result.exit_code == 0, result.output
        saved = load_settings_json(settings_path)
        assert saved.jan_model_url == "http://box:1337/v1/"


class TestPrompts:
    def test_list_builtin(self, run):
        result = run("prompts", "list")
        assert result.exit_code == 0, result.output
        assert "/test:" in result.output
        assert "/review:" in result.output

    def test_set_replaces_template(self, run, settings_path):
        result = run("prompts", "set", "test", "Write pytest tests.")
        assert result.exit_code == 0, result.output
        prompts = load_settings_json(settings_path).custom_prompts
        assert [p.name for p in prompts] == ["test", "explain", "review"]
        assert prompts[0].prompt == "Write pytest tests."
