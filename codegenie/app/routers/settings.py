# -*- coding: utf-8 -*-
"""API routes for provider settings, model costs and prompts."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Body, HTTPException, Path, Request
from pydantic import BaseModel, Field

from ...providers import (
    CustomPrompt,
    LanguageModel,
    ProviderDefinition,
    get_provider,
    list_providers,
)
from ...settings import SettingsService, mask_api_key, save_settings_service

router = APIRouter(prefix="/settings", tags=["settings"])


# ---------------------------------------------------------------------------
# Request / response schemas
# ---------------------------------------------------------------------------


class ProviderInfo(BaseModel):
    """Provider info returned by API (definition + current config)."""

    id: str
    name: str
    api_based: bool
    models: List[str]
    has_api_key: bool = Field(
        default=False,
        description="Whether api_key is configured",
    )
    current_api_key: str = Field(
        default="",
        description="Currently configured API key (masked)",
    )
    current_base_url: str = Field(default="", description="Base URL in use")


class ModelCostInfo(BaseModel):
    """Resolved cost and window metadata of one model."""

    provider: str
    model: str
    input_cost: float
    output_cost: float
    window_context: int


class ModelCostRequest(BaseModel):
    input_cost: float = Field(..., ge=0, description="USD per 1M tokens")
    output_cost: float = Field(..., ge=0, description="USD per 1M tokens")


class WindowContextRequest(BaseModel):
    window_context: int = Field(..., gt=0, description="Context window")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _service(request: Request) -> SettingsService:
    return request.app.state.settings_service


def _persist(request: Request) -> None:
    if request.app.state.persist_settings:
        save_settings_service(
            _service(request),
            request.app.state.settings_path,
        )


def _require_provider(name: str) -> ProviderDefinition:
    provider = get_provider(name)
    if provider is None:
        raise HTTPException(
            status_code=404,
            detail=f"Provider '{name}' not found",
        )
    return provider


def _require_api_based(provider: ProviderDefinition) -> None:
    if not provider.api_based:
        raise HTTPException(
            status_code=400,
            detail=f"Provider '{provider.name}' is a local runtime; "
            "costs and context windows are not tracked.",
        )


def _build_provider_info(
    provider: ProviderDefinition,
    service: SettingsService,
) -> ProviderInfo:
    api_key = service.get_api_key(provider)
    return ProviderInfo(
        id=provider.id,
        name=provider.name,
        api_based=provider.api_based,
        models=provider.models,
        has_api_key=bool(api_key),
        current_api_key=mask_api_key(api_key),
        current_base_url=service.get_base_url(provider),
    )


def _build_cost_info(
    provider: ProviderDefinition,
    model: str,
    service: SettingsService,
) -> ModelCostInfo:
    return ModelCostInfo(
        provider=provider.name,
        model=model,
        input_cost=service.get_model_input_cost(provider, model),
        output_cost=service.get_model_output_cost(provider, model),
        window_context=service.get_model_window_context(provider, model),
    )


# ---------------------------------------------------------------------------
# Endpoints: providers
# ---------------------------------------------------------------------------


@router.get(
    "/providers",
    response_model=List[ProviderInfo],
    summary="List all providers",
)
async def list_all_providers(request: Request) -> List[ProviderInfo]:
    service = _service(request)
    return [_build_provider_info(p, service) for p in list_providers()]


# ---------------------------------------------------------------------------
# Endpoints: costs and windows
# ---------------------------------------------------------------------------


@router.get(
    "/costs/{provider}/{model:path}",
    response_model=ModelCostInfo,
    summary="Resolve cost and window of a model",
)
async def get_model_cost(
    request: Request,
    provider: str = Path(..., description="Provider name or id"),
    model: str = Path(..., description="Model name"),
) -> ModelCostInfo:
    defn = _require_provider(provider)
    return _build_cost_info(defn, model, _service(request))


@router.put(
    "/costs/{provider}/{model:path}",
    response_model=ModelCostInfo,
    summary="Override the cost of a model",
)
async def set_model_cost(
    request: Request,
    provider: str = Path(..., description="Provider name or id"),
    model: str = Path(..., description="Model name"),
    body: ModelCostRequest = Body(...),
) -> ModelCostInfo:
    defn = _require_provider(provider)
    _require_api_based(defn)
    service = _service(request)
    service.set_model_cost(defn, model, body.input_cost, body.output_cost)
    _persist(request)
    return _build_cost_info(defn, model, service)


@router.put(
    "/window/{provider}/{model:path}",
    response_model=ModelCostInfo,
    summary="Override the context window of a model",
)
async def set_model_window(
    request: Request,
    provider: str = Path(..., description="Provider name or id"),
    model: str = Path(..., description="Model name"),
    body: WindowContextRequest = Body(...),
) -> ModelCostInfo:
    defn = _require_provider(provider)
    _require_api_based(defn)
    service = _service(request)
    service.set_model_window_context(defn, model, body.window_context)
    _persist(request)
    return _build_cost_info(defn, model, service)


# ---------------------------------------------------------------------------
# Endpoints: catalogs
# ---------------------------------------------------------------------------


@router.get(
    "/language-models",
    response_model=List[LanguageModel],
    summary="List known language models",
)
async def get_language_models(request: Request) -> List[LanguageModel]:
    return _service(request).get_language_models()


@router.put(
    "/language-models",
    response_model=List[LanguageModel],
    summary="Replace the known language models",
)
async def put_language_models(
    request: Request,
    body: List[LanguageModel] = Body(...),
) -> List[LanguageModel]:
    service = _service(request)
    service.set_language_models(body)
    _persist(request)
    return service.get_language_models()


@router.get(
    "/prompts",
    response_model=List[CustomPrompt],
    summary="List custom prompts",
)
async def get_prompts(request: Request) -> List[CustomPrompt]:
    return _service(request).get_custom_prompts()
