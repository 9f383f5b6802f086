# -*- coding: utf-8 -*-
"""Resolved parameters for chat-model factories."""

from __future__ import annotations

from ..providers.models import ResolvedModelConfig
from ..providers.registry import ProviderRef, resolve_provider
from .service import SettingsService


def resolve_chat_model_config(
    service: SettingsService,
    provider: ProviderRef,
    model_name: str,
) -> ResolvedModelConfig:
    """Collect everything a factory needs to build a client for one model.

    Values are passed through as stored; range checks are left to the
    client library.
    """
    defn = resolve_provider(provider)
    state = service.get_state()
    return ResolvedModelConfig(
        provider=defn.name if defn is not None else str(provider),
        model=model_name,
        base_url=service.get_base_url(provider),
        api_key=service.get_api_key(provider),
        max_retries=state.max_retries,
        temperature=state.temperature,
        max_tokens=state.max_output_tokens,
        timeout=state.timeout,
        top_p=state.top_p,
    )
