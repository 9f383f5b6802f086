"""Unit tests for the provider catalog and cost keys."""

import pytest

from codegenie.providers import (
    DEFAULT_METADATA,
    PROVIDERS,
    CostKey,
    ProviderDefinition,
    get_provider,
    is_api_based_provider,
    list_providers,
    resolve_provider,
)
from codegenie.providers.registry import PROVIDER_GROQ, PROVIDER_OLLAMA


class TestRegistry:
    def test_lookup_by_name_or_id(self):
        assert get_provider("Groq") is PROVIDER_GROQ
        assert get_provider("groq") is PROVIDER_GROQ
        assert get_provider("LLaMA.c++").id == "llamacpp"
        assert get_provider("unknown") is None

    def test_api_based_flag(self):
        assert is_api_based_provider(PROVIDER_GROQ)
        assert not is_api_based_provider(PROVIDER_OLLAMA)
        assert is_api_based_provider("DeepInfra")
        assert not is_api_based_provider("unknown")
        assert not is_api_based_provider(None)

    def test_resolve_provider(self):
        assert resolve_provider(PROVIDER_GROQ) is PROVIDER_GROQ
        assert resolve_provider("groq") is PROVIDER_GROQ
        assert resolve_provider("Ollama") is PROVIDER_OLLAMA
        assert resolve_provider("unknown") is None
        assert resolve_provider(None) is None

    def test_api_based_flag_follows_id_lookup(self):
        assert is_api_based_provider("openai")
        assert not is_api_based_provider("ollama")

    def test_catalog_split(self):
        local = {p.name for p in list_providers() if not p.api_based}
        assert local == {"Ollama", "LMStudio", "GPT4All", "Jan", "Exo", "LLaMA.c++"}
        assert len(PROVIDERS) == 12

    def test_local_providers_have_no_key_field(self):
        for defn in list_providers():
            if defn.api_based:
                assert defn.api_key_field and defn.default_base_url
            else:
                assert not defn.api_key_field and defn.url_field

    def test_equality_by_name(self):
        twin = ProviderDefinition(id="other", name="Groq")
        assert twin == PROVIDER_GROQ
        assert hash(twin) == hash(PROVIDER_GROQ)


class TestCostKey:
    def test_equality(self):
        assert CostKey.of(PROVIDER_GROQ, "gemma-7b-it") == CostKey(
            "Groq",
            "gemma-7b-it",
        )
        assert CostKey("Groq", "Gemma-7b-it") != CostKey("Groq", "gemma-7b-it")

    @pytest.mark.parametrize(
        "key",
        [
            CostKey("OpenAI", "gpt-4o"),
            CostKey("DeepInfra", "meta-llama/Meta-Llama-3-8B-Instruct"),
            CostKey("Ollama", "llama3:8b"),
        ],
    )
    def test_storage_key_parses_back(self, key):
        assert CostKey.parse(key.storage_key) == key

    def test_storage_key_format(self):
        assert CostKey("OpenAI", "gpt-4o").storage_key == "OpenAI:gpt-4o"


class TestDefaultMetadata:
    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            DEFAULT_METADATA.input_costs[CostKey("OpenAI", "x")] = 1.0

    def test_no_local_provider_defaults(self):
        for key in DEFAULT_METADATA.input_costs:
            assert is_api_based_provider(key.provider)

    def test_every_builtin_remote_model_has_costs(self):
        for defn in list_providers():
            for model in defn.models:
                key = CostKey.of(defn, model)
                assert key in DEFAULT_METADATA.input_costs
                assert key in DEFAULT_METADATA.output_costs
                assert key in DEFAULT_METADATA.window_contexts
