"""Unit tests for chat-model parameter resolution."""

from codegenie.providers.registry import PROVIDER_GROQ, PROVIDER_OLLAMA
from codegenie.settings import resolve_chat_model_config


def test_remote_provider(service):
    service.set_api_key(PROVIDER_GROQ, "gsk-1")
    service.update(
        temperature=0.3,
        top_p=0.5,
        timeout=30,
        max_retries=5,
        max_output_tokens=100,
    )

    config = resolve_chat_model_config(service, PROVIDER_GROQ, "llama3-8b-8192")

    assert config.provider == "Groq"
    assert config.model == "llama3-8b-8192"
    assert config.base_url == "https://api.groq.com/openai/v1"
    assert config.api_key == "gsk-1"
    assert config.temperature == 0.3
    assert config.top_p == 0.5
    assert config.timeout == 30
    assert config.max_retries == 5
    assert config.max_tokens == 100


def test_local_provider_by_name(service):
    config = resolve_chat_model_config(service, "Ollama", "llama3")

    assert config.provider == PROVIDER_OLLAMA.name
    assert config.base_url == "http://localhost:11434/"
    assert config.api_key == ""
    assert config.max_retries == 3
