# -*- coding: utf-8 -*-
import os
from pathlib import Path

WORKING_DIR = (
    Path(os.environ.get("CODEGENIE_WORKING_DIR", "~/.codegenie"))
    .expanduser()
    .resolve()
)

SETTINGS_FILE = os.environ.get("CODEGENIE_SETTINGS_FILE", "settings.json")

# Component name under which the settings snapshot is stored in SETTINGS_FILE.
SETTINGS_STORE_ID = "codegenie.SettingsState"

# Env key for log level (used by the CLI).
LOG_LEVEL_ENV = "CODEGENIE_LOG_LEVEL"

# ---------------------------------------------------------------------------
# Local LLM runtimes
# ---------------------------------------------------------------------------

OLLAMA_MODEL_URL = "http://localhost:11434/"
LMSTUDIO_MODEL_URL = "http://localhost:1234/v1/"
GPT4ALL_MODEL_URL = "http://localhost:4891/v1/"
JAN_MODEL_URL = "http://localhost:1337/v1/"
EXO_MODEL_URL = "http://localhost:8000/v1/"
LLAMA_CPP_MODEL_URL = "http://localhost:8080"

# ---------------------------------------------------------------------------
# Generation parameters
# ---------------------------------------------------------------------------

TEMPERATURE = 0.7
TOP_P = 0.9
TIMEOUT = 60
MAX_RETRIES = 3
MAX_MEMORY = 10
MAX_OUTPUT_TOKENS = 2500
DEFAULT_WINDOW_CONTEXT = 8000

STREAM_MODE = False
HIDE_SEARCH_BUTTONS = False
MAX_SEARCH_RESULTS = 3

AST_MODE = False
AST_PARENT_CLASS = True
AST_CLASS_REFERENCE = True
AST_FIELD_REFERENCE = True

# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

SYSTEM_PROMPT = (
    "You are a software developer with expert knowledge in any "
    "programming language. Always return the response in Markdown."
)
TEST_PROMPT = "Write a unit test for this code using JUnit."
REVIEW_PROMPT = (
    "Review the selected code, can you spot possible bugs and "
    "suggest improvements?"
)
EXPLAIN_PROMPT = (
    "Break down the code in simple terms to help a junior developer "
    "grasp its functionality."
)

# ---------------------------------------------------------------------------
# Project scanning filters
# ---------------------------------------------------------------------------

EXCLUDED_DIRECTORIES = (
    "build",
    ".git",
    "bin",
    "out",
    "target",
    "node_modules",
    ".idea",
)

INCLUDED_FILE_EXTENSIONS = (
    "java",
    "kt",
    "groovy",
    "scala",
    "xml",
    "json",
    "yaml",
    "yml",
    "properties",
    "txt",
    "md",
)


def get_settings_json_path() -> Path:
    """Return the default settings file path.

    Reads ``CODEGENIE_WORKING_DIR`` / ``CODEGENIE_SETTINGS_FILE`` at import
    time; a relative ``CODEGENIE_SETTINGS_FILE`` is resolved against the
    working directory.
    """
    path = Path(SETTINGS_FILE).expanduser()
    if not path.is_absolute():
        path = WORKING_DIR / path
    return path
