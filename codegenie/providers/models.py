# -*- coding: utf-8 -*-
"""Pydantic data models for providers, models and cost keys."""

from __future__ import annotations

from typing import List, NamedTuple, Union

from pydantic import BaseModel, Field


class ProviderDefinition(BaseModel):
    """Static definition of a provider (remote API or local runtime).

    Two definitions are equal when their names are equal.
    """

    model_config = {"frozen": True}

    id: str = Field(..., description="Provider identifier")
    name: str = Field(..., description="Stable provider name")
    api_based: bool = Field(
        default=True,
        description="Remote, metered API (False for self-hosted runtimes)",
    )
    default_base_url: str = Field(
        default="",
        description="Fixed API base URL for remote providers",
    )
    api_key_field: str = Field(
        default="",
        description="SettingsState field holding the API key",
    )
    url_field: str = Field(
        default="",
        description="SettingsState field holding a configurable base URL",
    )
    models: List[str] = Field(
        default_factory=list,
        description="Built-in model names",
    )

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ProviderDefinition):
            return self.name == other.name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name)


class CostKey(NamedTuple):
    """Composite (provider name, model name) lookup key."""

    provider: str
    model_name: str

    @classmethod
    def of(
        cls,
        provider: Union[ProviderDefinition, str],
        model_name: str,
    ) -> "CostKey":
        name = (
            provider.name
            if isinstance(provider, ProviderDefinition)
            else provider
        )
        return cls(name, model_name)

    @property
    def storage_key(self) -> str:
        """Persisted form, e.g. ``"OpenAI:gpt-4o"``."""
        return f"{self.provider}:{self.model_name}"

    @classmethod
    def parse(cls, storage_key: str) -> "CostKey":
        """Inverse of :attr:`storage_key` (splits on the first ``:``)."""
        provider, _, model_name = storage_key.partition(":")
        return cls(provider, model_name)


class CustomPrompt(BaseModel):
    """A named prompt template."""

    name: str
    prompt: str = ""


class LanguageModel(BaseModel):
    """A known language model and its metadata."""

    model_config = {"populate_by_name": True}

    provider: str = Field(default="", description="Provider name")
    model_name: str = Field(default="", alias="modelName")
    display_name: str = Field(default="", alias="displayName")
    api_key_used: bool = Field(default=False, alias="apiKeyUsed")
    input_cost: float = Field(default=0.0, alias="inputCost")
    output_cost: float = Field(default=0.0, alias="outputCost")
    context_window: int = Field(default=0, alias="contextWindow")


class ResolvedModelConfig(BaseModel):
    """Parameters handed to a chat-model factory for one model."""

    provider: str = Field(default="", description="Provider name")
    model: str = Field(default="", description="Model identifier")
    base_url: str = Field(default="", description="API base URL")
    api_key: str = Field(default="", description="API key")
    max_retries: int = 0
    temperature: float = 0.0
    max_tokens: int = 0
    timeout: int = Field(default=0, description="Timeout in seconds")
    top_p: float = 0.0
