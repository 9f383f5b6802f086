# -*- coding: utf-8 -*-
"""Settings service: owns the settings state and resolves cost/window data.

One instance is created at startup and handed to every caller. All access to
the state goes through a single re-entrant lock, so readers never observe an
override map while it is being seeded or replaced.
"""

from __future__ import annotations

import logging
import threading
from copy import deepcopy
from typing import Any, Dict, Iterable, List, Mapping, Optional, TypeVar

from ..constant import EXPLAIN_PROMPT, REVIEW_PROMPT, TEST_PROMPT
from ..providers.defaults import DEFAULT_METADATA, DefaultMetadata
from ..providers.models import (
    CostKey,
    CustomPrompt,
    LanguageModel,
    ProviderDefinition,
)
from ..providers.registry import (
    ProviderRef,
    is_api_based_provider,
    resolve_provider,
)
from .state import SettingsState

logger = logging.getLogger(__name__)

_V = TypeVar("_V", float, int)

# Fields that ``update`` refuses, with the setter that keeps them consistent.
_GUARDED_FIELDS = {
    "model_input_costs": "set_model_cost",
    "model_output_costs": "set_model_cost",
    "model_window_contexts": "set_model_window_context",
    "custom_prompts": "set_custom_prompts",
    "language_models": "set_language_models",
}

# Built-in prompts seeded into an empty prompt list.
DEFAULT_PROMPTS = (
    ("test", TEST_PROMPT),
    ("explain", EXPLAIN_PROMPT),
    ("review", REVIEW_PROMPT),
)


def _provider_name(provider: ProviderRef) -> str:
    if isinstance(provider, ProviderDefinition):
        return provider.name
    return provider


def _tracked_key(provider: ProviderRef, model_name: str) -> Optional[CostKey]:
    """Key under which a model's metadata is stored, or None when the
    provider is local or unknown (nothing is tracked for it)."""
    defn = resolve_provider(provider)
    if not is_api_based_provider(defn):
        return None
    return CostKey(defn.name, model_name)


def _unique_prompts(prompts: Iterable[CustomPrompt]) -> List[CustomPrompt]:
    # A repeated name keeps its first slot and its last template.
    by_name: Dict[str, CustomPrompt] = {}
    for prompt in prompts:
        by_name[prompt.name] = prompt.model_copy()
    return list(by_name.values())


def _drop_untracked(overrides: Dict[str, _V], label: str) -> Dict[str, _V]:
    kept = {}
    for storage_key, value in overrides.items():
        if is_api_based_provider(CostKey.parse(storage_key).provider):
            kept[storage_key] = value
        else:
            logger.warning(
                "Dropping %s override for non-API provider: %s",
                label,
                storage_key,
            )
    return kept


def family_fallback(
    table: Mapping[CostKey, _V],
    key: CostKey,
) -> Optional[_V]:
    """Guess a value from a default entry of the same model family.

    The family is the part of the model name before the first ``-``
    (``"gpt-4-1106-preview"`` -> ``"gpt"``). Among the provider's entries
    whose model name starts with it, the lexicographically smallest model
    name wins. Returns None when nothing matches.
    """
    family = key.model_name.split("-")[0]
    candidates = sorted(
        k.model_name
        for k in table
        if k.provider == key.provider and k.model_name.startswith(family)
    )
    if not candidates:
        return None
    return table[CostKey(key.provider, candidates[0])]


class SettingsService:
    """Owner of a :class:`SettingsState` and its lifecycle.

    Construction seeds the built-in prompts only. :meth:`load_state`
    replaces the whole state and then seeds default costs and prompts into
    whatever is still empty.
    """

    def __init__(
        self,
        state: Optional[SettingsState] = None,
        defaults: DefaultMetadata = DEFAULT_METADATA,
    ):
        self._lock = threading.RLock()
        self._defaults = defaults
        self._state = (
            state.model_copy(deep=True)
            if state is not None
            else SettingsState()
        )
        self.initialize_default_prompts()

    @property
    def defaults(self) -> DefaultMetadata:
        return self._defaults

    # -----------------------------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------------------------

    def get_state(self) -> SettingsState:
        """Return an independent copy of the current snapshot."""
        with self._lock:
            return self._state.model_copy(deep=True)

    def load_state(self, snapshot: SettingsState) -> None:
        """Replace every field with the snapshot's, then back-fill defaults.

        Overrides keyed by a local or unknown provider are dropped and a
        repeated prompt name is collapsed as in :meth:`set_custom_prompts`.
        """
        with self._lock:
            state = snapshot.model_copy(deep=True)
            state.model_input_costs = _drop_untracked(
                state.model_input_costs, "input cost",
            )
            state.model_output_costs = _drop_untracked(
                state.model_output_costs, "output cost",
            )
            state.model_window_contexts = _drop_untracked(
                state.model_window_contexts, "window context",
            )
            state.custom_prompts = _unique_prompts(state.custom_prompts)
            self._state = state
            self.initialize_default_costs_if_empty()
            self.initialize_default_prompts()
        logger.debug("Settings state loaded")

    def initialize_default_prompts(self) -> None:
        """Seed the built-in prompts into an empty prompt list."""
        with self._lock:
            if self._state.custom_prompts:
                return
            self._state.custom_prompts = [
                CustomPrompt(name=name, prompt=prompt)
                for name, prompt in DEFAULT_PROMPTS
            ]

    def initialize_default_costs_if_empty(self) -> None:
        """Copy default costs into each override map that is still empty.

        The input and output maps are checked independently.
        """
        with self._lock:
            if not self._state.model_input_costs:
                self._state.model_input_costs = {
                    key.storage_key: cost
                    for key, cost in self._defaults.input_costs.items()
                }
                logger.debug(
                    "Seeded %d default input costs",
                    len(self._state.model_input_costs),
                )
            if not self._state.model_output_costs:
                self._state.model_output_costs = {
                    key.storage_key: cost
                    for key, cost in self._defaults.output_costs.items()
                }
                logger.debug(
                    "Seeded %d default output costs",
                    len(self._state.model_output_costs),
                )

    # -----------------------------------------------------------------------
    # Cost / window resolution
    # -----------------------------------------------------------------------

    def _resolve_cost(
        self,
        overrides: Dict[str, float],
        table: Mapping[CostKey, float],
        key: CostKey,
    ) -> float:
        cost = overrides.get(key.storage_key, 0.0)
        if cost:
            return cost
        cost = table.get(key, 0.0)
        if cost:
            return cost
        fallback = family_fallback(table, key)
        return fallback if fallback is not None else 0.0

    def get_model_input_cost(
        self,
        provider: ProviderRef,
        model_name: str,
    ) -> float:
        """Input cost per 1M tokens; 0.0 when unknown or local."""
        key = _tracked_key(provider, model_name)
        if key is None:
            return 0.0
        with self._lock:
            return self._resolve_cost(
                self._state.model_input_costs,
                self._defaults.input_costs,
                key,
            )

    def get_model_output_cost(
        self,
        provider: ProviderRef,
        model_name: str,
    ) -> float:
        """Output cost per 1M tokens; 0.0 when unknown or local."""
        key = _tracked_key(provider, model_name)
        if key is None:
            return 0.0
        with self._lock:
            return self._resolve_cost(
                self._state.model_output_costs,
                self._defaults.output_costs,
                key,
            )

    def get_model_window_context(
        self,
        provider: ProviderRef,
        model_name: str,
    ) -> int:
        """Context window size, falling back to ``default_window_context``."""
        with self._lock:
            default_window = self._state.default_window_context
            key = _tracked_key(provider, model_name)
            if key is None:
                return default_window
            window = self._state.model_window_contexts.get(key.storage_key, 0)
            if window > 0:
                return window
            table = self._defaults.window_contexts
            window = table.get(key, 0)
            if window > 0:
                return window
            fallback = family_fallback(table, key)
            return fallback if fallback else default_window

    def set_model_cost(
        self,
        provider: ProviderRef,
        model_name: str,
        input_cost: float,
        output_cost: float,
    ) -> None:
        """Override both costs of a model. Ignored for local providers."""
        key = _tracked_key(provider, model_name)
        if key is None:
            logger.debug(
                "Ignoring cost override for non-API provider %s",
                _provider_name(provider),
            )
            return
        with self._lock:
            self._state.model_input_costs[key.storage_key] = input_cost
            self._state.model_output_costs[key.storage_key] = output_cost

    def set_model_window_context(
        self,
        provider: ProviderRef,
        model_name: str,
        window_context: int,
    ) -> None:
        """Override the context window of a model. Ignored for local ones."""
        key = _tracked_key(provider, model_name)
        if key is None:
            logger.debug(
                "Ignoring window override for non-API provider %s",
                _provider_name(provider),
            )
            return
        with self._lock:
            self._state.model_window_contexts[key.storage_key] = window_context

    # -----------------------------------------------------------------------
    # Catalog accessors (callers always get / give independent copies)
    # -----------------------------------------------------------------------

    def get_language_models(self) -> List[LanguageModel]:
        with self._lock:
            return [m.model_copy() for m in self._state.language_models]

    def set_language_models(self, models: List[LanguageModel]) -> None:
        copies = [m.model_copy() for m in models]
        with self._lock:
            self._state.language_models = copies

    def get_custom_prompts(self) -> List[CustomPrompt]:
        with self._lock:
            return [p.model_copy() for p in self._state.custom_prompts]

    def set_custom_prompts(self, prompts: List[CustomPrompt]) -> None:
        """Replace the prompt list; a repeated name keeps its first slot
        and its last template."""
        unique = _unique_prompts(prompts)
        with self._lock:
            self._state.custom_prompts = unique

    # -----------------------------------------------------------------------
    # Credentials and URLs
    # -----------------------------------------------------------------------

    def get_api_key(self, provider: ProviderRef) -> str:
        defn = resolve_provider(provider)
        if defn is None or not defn.api_key_field:
            return ""
        with self._lock:
            return getattr(self._state, defn.api_key_field)

    def set_api_key(self, provider: ProviderRef, api_key: str) -> None:
        defn = resolve_provider(provider)
        if defn is None or not defn.api_key_field:
            raise ValueError(
                f"Provider '{_provider_name(provider)}' has no API key",
            )
        with self._lock:
            setattr(self._state, defn.api_key_field, api_key)

    def get_base_url(self, provider: ProviderRef) -> str:
        """Configured URL for local runtimes, fixed URL for remote APIs."""
        defn = resolve_provider(provider)
        if defn is None:
            return ""
        if not defn.url_field:
            return defn.default_base_url
        with self._lock:
            return getattr(self._state, defn.url_field)

    def set_base_url(self, provider: ProviderRef, base_url: str) -> None:
        defn = resolve_provider(provider)
        if defn is None or not defn.url_field:
            raise ValueError(
                f"Provider '{_provider_name(provider)}' has a fixed base URL",
            )
        with self._lock:
            setattr(self._state, defn.url_field, base_url)

    # -----------------------------------------------------------------------
    # Generic field access
    # -----------------------------------------------------------------------

    def get(self, name: str) -> Any:
        """Return a copy of one setting by field name."""
        if name not in SettingsState.model_fields:
            raise ValueError(f"Unknown setting: {name}")
        with self._lock:
            return deepcopy(getattr(self._state, name))

    def update(self, **fields: Any) -> None:
        """Set several settings by field name (values are copied).

        The batch is validated as a whole; on error nothing changes. Fields
        with invariants of their own must go through their setters.
        """
        unknown = [n for n in fields if n not in SettingsState.model_fields]
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(unknown)}")
        guarded = [n for n in fields if n in _GUARDED_FIELDS]
        if guarded:
            setters = ", ".join(_GUARDED_FIELDS[n] for n in guarded)
            raise ValueError(
                f"Setting(s) {', '.join(guarded)} must be changed with "
                f"{setters}",
            )
        with self._lock:
            merged = self._state.model_dump()
            merged.update(deepcopy(fields))
            self._state = SettingsState.model_validate(merged)
