# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI

from ..settings import SettingsService, open_settings_service
from .routers.settings import router as settings_router

logger = logging.getLogger(__name__)


def create_app(
    service: Optional[SettingsService] = None,
    settings_path: Optional[Path] = None,
) -> FastAPI:
    """Build the settings API around one service instance.

    Without *service*, settings are restored from *settings_path* (or the
    default settings file) and every write is saved back to it. With an
    explicit *service*, writes are saved only when *settings_path* is given.
    """
    persist = service is None or settings_path is not None
    if service is None:
        service = open_settings_service(settings_path)

    app = FastAPI(title="codegenie settings")
    app.state.settings_service = service
    app.state.settings_path = settings_path
    app.state.persist_settings = persist
    app.include_router(settings_router)
    logger.debug("Settings API created (persist=%s)", persist)
    return app
