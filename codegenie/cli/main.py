# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import click

from ..constant import LOG_LEVEL_ENV
from ..settings import (
    SettingsService,
    open_settings_service,
    save_settings_service,
)
from .costs_cmd import costs_group
from .prompts_cmd import prompts_group
from .providers_cmd import providers_group


class CliContext:
    """Settings file location shared by all sub-commands."""

    def __init__(self, settings_path: Optional[Path] = None):
        self.settings_path = settings_path

    def open(self) -> SettingsService:
        return open_settings_service(self.settings_path)

    def save(self, service: SettingsService) -> None:
        save_settings_service(service, self.settings_path)


@click.group("codegenie")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: ~/.codegenie/settings.json).",
)
@click.option(
    "--log-level",
    default=lambda: os.environ.get(LOG_LEVEL_ENV, "warning"),
    type=click.Choice(
        ["debug", "info", "warning", "error"],
        case_sensitive=False,
    ),
    show_default="warning",
    help="Log level.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    settings_path: Optional[Path],
    log_level: str,
) -> None:
    """Manage LLM provider settings, model costs and prompts."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = CliContext(settings_path)


cli.add_command(providers_group)
cli.add_command(costs_group)
cli.add_command(prompts_group)


if __name__ == "__main__":
    cli()
