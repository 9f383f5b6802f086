# -*- coding: utf-8 -*-
"""The persisted settings snapshot.

Field aliases are the on-disk names; keep them stable so existing settings
files keep loading.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ..constant import (
    AST_CLASS_REFERENCE,
    AST_FIELD_REFERENCE,
    AST_MODE,
    AST_PARENT_CLASS,
    DEFAULT_WINDOW_CONTEXT,
    EXCLUDED_DIRECTORIES,
    EXO_MODEL_URL,
    EXPLAIN_PROMPT,
    GPT4ALL_MODEL_URL,
    HIDE_SEARCH_BUTTONS,
    INCLUDED_FILE_EXTENSIONS,
    JAN_MODEL_URL,
    LLAMA_CPP_MODEL_URL,
    LMSTUDIO_MODEL_URL,
    MAX_MEMORY,
    MAX_OUTPUT_TOKENS,
    MAX_RETRIES,
    MAX_SEARCH_RESULTS,
    OLLAMA_MODEL_URL,
    REVIEW_PROMPT,
    STREAM_MODE,
    SYSTEM_PROMPT,
    TEMPERATURE,
    TEST_PROMPT,
    TIMEOUT,
    TOP_P,
)
from ..providers.models import CustomPrompt, LanguageModel


class SettingsState(BaseModel):
    """Flat bean of every persisted setting."""

    model_config = {"populate_by_name": True, "validate_assignment": True}

    custom_prompts: List[CustomPrompt] = Field(
        default_factory=list,
        alias="customPrompts",
    )
    language_models: List[LanguageModel] = Field(
        default_factory=list,
        alias="languageModels",
    )

    # Local LLM URLs
    ollama_model_url: str = Field(
        default=OLLAMA_MODEL_URL,
        alias="ollamaModelUrl",
    )
    lmstudio_model_url: str = Field(
        default=LMSTUDIO_MODEL_URL,
        alias="lmstudioModelUrl",
    )
    gpt4all_model_url: str = Field(
        default=GPT4ALL_MODEL_URL,
        alias="gpt4allModelUrl",
    )
    jan_model_url: str = Field(default=JAN_MODEL_URL, alias="janModelUrl")
    exo_model_url: str = Field(default=EXO_MODEL_URL, alias="exoModelUrl")
    llama_cpp_url: str = Field(
        default=LLAMA_CPP_MODEL_URL,
        alias="llamaCPPUrl",
    )

    # LLM API keys
    openai_key: str = Field(default="", alias="openAIKey")
    mistral_key: str = Field(default="", alias="mistralKey")
    anthropic_key: str = Field(default="", alias="anthropicKey")
    groq_key: str = Field(default="", alias="groqKey")
    deep_infra_key: str = Field(default="", alias="deepInfraKey")
    gemini_key: str = Field(default="", alias="geminiKey")

    # Search
    hide_search_buttons_flag: bool = Field(
        default=HIDE_SEARCH_BUTTONS,
        alias="hideSearchButtonsFlag",
    )
    google_search_key: str = Field(default="", alias="googleSearchKey")
    google_csi_key: str = Field(default="", alias="googleCSIKey")
    tavily_search_key: str = Field(default="", alias="tavilySearchKey")
    max_search_results: int = Field(
        default=MAX_SEARCH_RESULTS,
        alias="maxSearchResults",
    )

    # Last selection
    selected_provider: Optional[str] = Field(
        default=None,
        alias="selectedProvider",
    )
    selected_language_model: Optional[str] = Field(
        default=None,
        alias="selectedLanguageModel",
    )

    stream_mode: bool = Field(default=STREAM_MODE, alias="streamMode")

    # Generation parameters
    temperature: float = TEMPERATURE
    top_p: float = Field(default=TOP_P, alias="topP")
    timeout: int = TIMEOUT
    max_retries: int = Field(default=MAX_RETRIES, alias="maxRetries")
    chat_memory_size: int = Field(default=MAX_MEMORY, alias="chatMemorySize")
    max_output_tokens: int = Field(
        default=MAX_OUTPUT_TOKENS,
        alias="maxOutputTokens",
    )

    # AST context
    ast_mode: bool = Field(default=AST_MODE, alias="astMode")
    ast_parent_class: bool = Field(
        default=AST_PARENT_CLASS,
        alias="astParentClass",
    )
    ast_class_reference: bool = Field(
        default=AST_CLASS_REFERENCE,
        alias="astClassReference",
    )
    ast_field_reference: bool = Field(
        default=AST_FIELD_REFERENCE,
        alias="astFieldReference",
    )

    system_prompt: str = Field(default=SYSTEM_PROMPT, alias="systemPrompt")
    test_prompt: str = Field(default=TEST_PROMPT, alias="testPrompt")
    review_prompt: str = Field(default=REVIEW_PROMPT, alias="reviewPrompt")
    explain_prompt: str = Field(default=EXPLAIN_PROMPT, alias="explainPrompt")

    exclude_java_doc: bool = Field(default=False, alias="excludeJavaDoc")

    excluded_directories: List[str] = Field(
        default_factory=lambda: list(EXCLUDED_DIRECTORIES),
        alias="excludedDirectories",
    )
    included_file_extensions: List[str] = Field(
        default_factory=lambda: list(INCLUDED_FILE_EXTENSIONS),
        alias="includedFileExtensions",
    )

    # Cost / window overrides keyed by CostKey.storage_key
    model_input_costs: Dict[str, float] = Field(
        default_factory=dict,
        alias="modelInputCosts",
    )
    model_output_costs: Dict[str, float] = Field(
        default_factory=dict,
        alias="modelOutputCosts",
    )
    model_window_contexts: Dict[str, int] = Field(
        default_factory=dict,
        alias="modelWindowContexts",
    )
    default_window_context: int = Field(
        default=DEFAULT_WINDOW_CONTEXT,
        alias="defaultWindowContext",
    )

    def to_json_dict(self) -> dict:
        """Dump using the persisted (aliased) field names."""
        return self.model_dump(mode="json", by_alias=True)
