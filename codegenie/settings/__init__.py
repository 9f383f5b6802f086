# -*- coding: utf-8 -*-
"""Settings management: state snapshot, service + persistent store."""

from .resolve import resolve_chat_model_config
from .service import (
    DEFAULT_PROMPTS,
    SettingsService,
    family_fallback,
)
from .state import SettingsState
from .store import (
    load_settings_json,
    mask_api_key,
    open_settings_service,
    save_settings_json,
    save_settings_service,
)

__all__ = [
    # resolve
    "resolve_chat_model_config",
    # service
    "DEFAULT_PROMPTS",
    "SettingsService",
    "family_fallback",
    # state
    "SettingsState",
    # store
    "load_settings_json",
    "mask_api_key",
    "open_settings_service",
    "save_settings_json",
    "save_settings_service",
]
