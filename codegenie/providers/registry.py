# -*- coding: utf-8 -*-
"""Built-in provider definitions and registry."""

from __future__ import annotations

from typing import List, Optional, Union

from .models import ProviderDefinition

# ---------------------------------------------------------------------------
# Built-in model lists
# ---------------------------------------------------------------------------

OPENAI_MODELS: List[str] = [
    "gpt-4o",
    "gpt-4o-mini",
    "gpt-4-turbo",
    "gpt-4",
    "gpt-3.5-turbo",
]

ANTHROPIC_MODELS: List[str] = [
    "claude-3-5-sonnet-20240620",
    "claude-3-opus-20240229",
    "claude-3-sonnet-20240229",
    "claude-3-haiku-20240307",
]

MISTRAL_MODELS: List[str] = [
    "open-mistral-7b",
    "open-mixtral-8x7b",
    "open-mixtral-8x22b",
    "mistral-small-latest",
    "mistral-medium-latest",
    "mistral-large-latest",
    "codestral-latest",
]

GROQ_MODELS: List[str] = [
    "gemma-7b-it",
    "llama3-8b-8192",
    "llama3-70b-8192",
    "llama2-70b-4096",
    "mixtral-8x7b-32768",
]

DEEPINFRA_MODELS: List[str] = [
    "meta-llama/Meta-Llama-3-70B-Instruct",
    "meta-llama/Meta-Llama-3-8B-Instruct",
    "mistralai/Mixtral-8x7B-Instruct-v0.1",
    "mistralai/Mixtral-8x22B-Instruct-v0.1",
    "microsoft/WizardLM-2-8x22B",
    "microsoft/WizardLM-2-7B",
    "databricks/dbrx-instruct",
    "openchat/openchat_3.5",
    "google/gemma-7b-it",
    "Phind/Phind-CodeLlama-34B-v2",
    "bigcode/starcoder2-15b",
]

GEMINI_MODELS: List[str] = [
    "gemini-1.5-pro",
    "gemini-1.5-flash",
]

# ---------------------------------------------------------------------------
# Remote (metered) providers
# ---------------------------------------------------------------------------

PROVIDER_OPENAI = ProviderDefinition(
    id="openai",
    name="OpenAI",
    default_base_url="https://api.openai.com/v1",
    api_key_field="openai_key",
    models=OPENAI_MODELS,
)

PROVIDER_ANTHROPIC = ProviderDefinition(
    id="anthropic",
    name="Anthropic",
    default_base_url="https://api.anthropic.com/v1/",
    api_key_field="anthropic_key",
    models=ANTHROPIC_MODELS,
)

PROVIDER_MISTRAL = ProviderDefinition(
    id="mistral",
    name="Mistral",
    default_base_url="https://api.mistral.ai/v1",
    api_key_field="mistral_key",
    models=MISTRAL_MODELS,
)

PROVIDER_GROQ = ProviderDefinition(
    id="groq",
    name="Groq",
    default_base_url="https://api.groq.com/openai/v1",
    api_key_field="groq_key",
    models=GROQ_MODELS,
)

PROVIDER_DEEPINFRA = ProviderDefinition(
    id="deepinfra",
    name="DeepInfra",
    default_base_url="https://api.deepinfra.com/v1/openai",
    api_key_field="deep_infra_key",
    models=DEEPINFRA_MODELS,
)

PROVIDER_GOOGLE = ProviderDefinition(
    id="google",
    name="Google",
    default_base_url="https://generativelanguage.googleapis.com/v1beta",
    api_key_field="gemini_key",
    models=GEMINI_MODELS,
)

# ---------------------------------------------------------------------------
# Local (self-hosted) runtimes; models are discovered at runtime
# ---------------------------------------------------------------------------

PROVIDER_OLLAMA = ProviderDefinition(
    id="ollama",
    name="Ollama",
    api_based=False,
    url_field="ollama_model_url",
)

PROVIDER_LMSTUDIO = ProviderDefinition(
    id="lmstudio",
    name="LMStudio",
    api_based=False,
    url_field="lmstudio_model_url",
)

PROVIDER_GPT4ALL = ProviderDefinition(
    id="gpt4all",
    name="GPT4All",
    api_based=False,
    url_field="gpt4all_model_url",
)

PROVIDER_JAN = ProviderDefinition(
    id="jan",
    name="Jan",
    api_based=False,
    url_field="jan_model_url",
)

PROVIDER_EXO = ProviderDefinition(
    id="exo",
    name="Exo",
    api_based=False,
    url_field="exo_model_url",
)

PROVIDER_LLAMA_CPP = ProviderDefinition(
    id="llamacpp",
    name="LLaMA.c++",
    api_based=False,
    url_field="llama_cpp_url",
)

# Registry: provider name -> ProviderDefinition
PROVIDERS: dict[str, ProviderDefinition] = {
    p.name: p
    for p in (
        PROVIDER_OLLAMA,
        PROVIDER_LMSTUDIO,
        PROVIDER_GPT4ALL,
        PROVIDER_JAN,
        PROVIDER_EXO,
        PROVIDER_LLAMA_CPP,
        PROVIDER_OPENAI,
        PROVIDER_ANTHROPIC,
        PROVIDER_MISTRAL,
        PROVIDER_GROQ,
        PROVIDER_DEEPINFRA,
        PROVIDER_GOOGLE,
    )
}


def get_provider(name: str) -> Optional[ProviderDefinition]:
    """Return a provider definition by name or id, or None if not found."""
    provider = PROVIDERS.get(name)
    if provider is not None:
        return provider
    for defn in PROVIDERS.values():
        if defn.id == name.lower():
            return defn
    return None


def list_providers() -> List[ProviderDefinition]:
    """Return all registered provider definitions."""
    return list(PROVIDERS.values())


ProviderRef = Union[ProviderDefinition, str]


def resolve_provider(
    provider: Optional[ProviderRef],
) -> Optional[ProviderDefinition]:
    """Return the definition for a definition, name or id (None if unknown)."""
    if provider is None or isinstance(provider, ProviderDefinition):
        return provider
    return get_provider(provider)


def is_api_based_provider(provider: Optional[ProviderRef]) -> bool:
    """True for remote, metered providers; False for local or unknown ones."""
    defn = resolve_provider(provider)
    return defn is not None and defn.api_based
