# -*- coding: utf-8 -*-
"""Reading and writing the settings snapshot (settings.json)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..constant import SETTINGS_STORE_ID, get_settings_json_path
from ..providers.defaults import DEFAULT_METADATA, DefaultMetadata
from .service import SettingsService
from .state import SettingsState

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _read_components(path: Path) -> dict:
    """Return the top-level object of *path*, or ``{}`` if unusable."""
    if not path.is_file():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as fh:
            raw = json.load(fh)
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        logger.warning("Could not read settings file %s: %s", path, exc)
        return {}
    if not isinstance(raw, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", path)
        return {}
    return raw


# ---------------------------------------------------------------------------
# Load / Save
# ---------------------------------------------------------------------------


def load_settings_json(
    path: Optional[Path] = None,
) -> Optional[SettingsState]:
    """Load the persisted snapshot, or ``None`` if there is none to load."""
    if path is None:
        path = get_settings_json_path()

    raw = _read_components(path).get(SETTINGS_STORE_ID)
    if raw is None:
        return None
    if not isinstance(raw, dict):
        logger.warning(
            "Ignoring settings component %s in %s: not an object",
            SETTINGS_STORE_ID,
            path,
        )
        return None
    try:
        return SettingsState.model_validate(raw)
    except ValidationError as exc:
        logger.warning("Invalid settings snapshot in %s: %s", path, exc)
        return None


def save_settings_json(
    state: SettingsState,
    path: Optional[Path] = None,
) -> None:
    """Write the snapshot, keeping other components stored in the file."""
    if path is None:
        path = get_settings_json_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    out = _read_components(path)
    out[SETTINGS_STORE_ID] = state.to_json_dict()

    with open(path, "w", encoding="utf-8") as fh:
        json.dump(out, fh, indent=2, ensure_ascii=False)
    logger.debug("Saved settings to %s", path)


def open_settings_service(
    path: Optional[Path] = None,
    defaults: DefaultMetadata = DEFAULT_METADATA,
) -> SettingsService:
    """Create a service and restore the persisted snapshot if one exists."""
    service = SettingsService(defaults=defaults)
    snapshot = load_settings_json(path)
    if snapshot is not None:
        service.load_state(snapshot)
    return service


def save_settings_service(
    service: SettingsService,
    path: Optional[Path] = None,
) -> None:
    save_settings_json(service.get_state(), path)


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


def mask_api_key(api_key: str, visible_chars: int = 4) -> str:
    """Mask an API key for safe display.

    Example: ``"sk-abcdefghijk"`` -> ``"sk-*******hijk"``
    """
    if not api_key:
        return ""
    if len(api_key) <= visible_chars:
        return "*" * len(api_key)
    prefix = api_key[:3] if len(api_key) > 3 else ""
    suffix = api_key[-visible_chars:]
    hidden_len = len(api_key) - len(prefix) - visible_chars
    return f"{prefix}{'*' * max(hidden_len, 4)}{suffix}"
