# -*- coding: utf-8 -*-
"""Built-in cost and context-window metadata per (provider, model).

Costs are USD per 1M tokens. The tables are read-only reference data; user
overrides live in the settings state, never here.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from .models import CostKey
from .registry import (
    PROVIDER_ANTHROPIC,
    PROVIDER_DEEPINFRA,
    PROVIDER_GOOGLE,
    PROVIDER_GROQ,
    PROVIDER_MISTRAL,
    PROVIDER_OPENAI,
)

# (provider name, model name, input cost, output cost, context window)
MetadataRow = Tuple[str, str, float, float, int]

_OPENAI = PROVIDER_OPENAI.name
_ANTHROPIC = PROVIDER_ANTHROPIC.name
_MISTRAL = PROVIDER_MISTRAL.name
_GROQ = PROVIDER_GROQ.name
_DEEPINFRA = PROVIDER_DEEPINFRA.name
_GOOGLE = PROVIDER_GOOGLE.name

DEFAULT_ROWS: Tuple[MetadataRow, ...] = (
    (_OPENAI, "gpt-4o", 5.0, 15.0, 128_000),
    (_OPENAI, "gpt-4o-mini", 0.15, 0.6, 128_000),
    (_OPENAI, "gpt-4-turbo", 10.0, 30.0, 128_000),
    (_OPENAI, "gpt-4", 30.0, 60.0, 8_192),
    (_OPENAI, "gpt-3.5-turbo", 0.5, 1.5, 16_385),
    (_ANTHROPIC, "claude-3-5-sonnet-20240620", 3.0, 15.0, 200_000),
    (_ANTHROPIC, "claude-3-opus-20240229", 15.0, 75.0, 200_000),
    (_ANTHROPIC, "claude-3-sonnet-20240229", 3.0, 15.0, 200_000),
    (_ANTHROPIC, "claude-3-haiku-20240307", 0.25, 1.25, 200_000),
    (_MISTRAL, "open-mistral-7b", 0.25, 0.25, 32_000),
    (_MISTRAL, "open-mixtral-8x7b", 0.7, 0.7, 32_000),
    (_MISTRAL, "open-mixtral-8x22b", 2.0, 6.0, 64_000),
    (_MISTRAL, "mistral-small-latest", 1.0, 3.0, 32_000),
    (_MISTRAL, "mistral-medium-latest", 2.7, 8.1, 32_000),
    (_MISTRAL, "mistral-large-latest", 4.0, 12.0, 32_000),
    (_MISTRAL, "codestral-latest", 1.0, 3.0, 32_000),
    (_GROQ, "gemma-7b-it", 0.07, 0.07, 8_192),
    (_GROQ, "llama3-8b-8192", 0.05, 0.08, 8_192),
    (_GROQ, "llama3-70b-8192", 0.59, 0.79, 8_192),
    (_GROQ, "llama2-70b-4096", 0.7, 0.8, 4_096),
    (_GROQ, "mixtral-8x7b-32768", 0.24, 0.24, 32_768),
    (_DEEPINFRA, "meta-llama/Meta-Llama-3-70B-Instruct", 0.59, 0.79, 8_000),
    (_DEEPINFRA, "meta-llama/Meta-Llama-3-8B-Instruct", 0.08, 0.08, 8_000),
    (_DEEPINFRA, "mistralai/Mixtral-8x7B-Instruct-v0.1", 0.24, 0.24, 32_000),
    (_DEEPINFRA, "mistralai/Mixtral-8x22B-Instruct-v0.1", 0.65, 0.65, 64_000),
    (_DEEPINFRA, "microsoft/WizardLM-2-8x22B", 0.63, 0.63, 64_000),
    (_DEEPINFRA, "microsoft/WizardLM-2-7B", 0.07, 0.07, 32_000),
    (_DEEPINFRA, "databricks/dbrx-instruct", 0.6, 0.6, 32_000),
    (_DEEPINFRA, "openchat/openchat_3.5", 0.07, 0.07, 8_192),
    (_DEEPINFRA, "google/gemma-7b-it", 0.07, 0.07, 8_192),
    (_DEEPINFRA, "Phind/Phind-CodeLlama-34B-v2", 0.6, 0.6, 4_096),
    (_DEEPINFRA, "bigcode/starcoder2-15b", 0.4, 0.4, 16_000),
    (_GOOGLE, "gemini-1.5-pro", 7.0, 21.0, 1_000_000),
    (_GOOGLE, "gemini-1.5-flash", 0.35, 1.05, 1_000_000),
)


class DefaultMetadata:
    """Read-only default input/output costs and context windows."""

    def __init__(
        self,
        input_costs: Optional[Mapping[CostKey, float]] = None,
        output_costs: Optional[Mapping[CostKey, float]] = None,
        window_contexts: Optional[Mapping[CostKey, int]] = None,
    ):
        self.input_costs: Mapping[CostKey, float] = MappingProxyType(
            dict(input_costs or {}),
        )
        self.output_costs: Mapping[CostKey, float] = MappingProxyType(
            dict(output_costs or {}),
        )
        self.window_contexts: Mapping[CostKey, int] = MappingProxyType(
            dict(window_contexts or {}),
        )

    @classmethod
    def from_rows(cls, rows: Iterable[MetadataRow]) -> "DefaultMetadata":
        """Build tables from ``(provider, model, in, out, window)`` rows."""
        input_costs: dict[CostKey, float] = {}
        output_costs: dict[CostKey, float] = {}
        window_contexts: dict[CostKey, int] = {}
        for provider, model_name, in_cost, out_cost, window in rows:
            key = CostKey(provider, model_name)
            input_costs[key] = in_cost
            output_costs[key] = out_cost
            if window:
                window_contexts[key] = window
        return cls(input_costs, output_costs, window_contexts)

    def __repr__(self) -> str:
        return (
            f"DefaultMetadata(input_costs={len(self.input_costs)}, "
            f"output_costs={len(self.output_costs)}, "
            f"window_contexts={len(self.window_contexts)})"
        )


DEFAULT_METADATA = DefaultMetadata.from_rows(DEFAULT_ROWS)
