# -*- coding: utf-8 -*-
"""Provider catalog: models, registry + default metadata tables."""

from .defaults import (
    DEFAULT_METADATA,
    DefaultMetadata,
)
from .models import (
    CostKey,
    CustomPrompt,
    LanguageModel,
    ProviderDefinition,
    ResolvedModelConfig,
)
from .registry import (
    PROVIDERS,
    ProviderRef,
    get_provider,
    is_api_based_provider,
    list_providers,
    resolve_provider,
)

__all__ = [
    # defaults
    "DEFAULT_METADATA",
    "DefaultMetadata",
    # models
    "CostKey",
    "CustomPrompt",
    "LanguageModel",
    "ProviderDefinition",
    "ResolvedModelConfig",
    # registry
    "PROVIDERS",
    "ProviderRef",
    "get_provider",
    "is_api_based_provider",
    "list_providers",
    "resolve_provider",
]
