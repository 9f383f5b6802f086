# -*- coding: utf-8 -*-
from __future__ import annotations

import click

from ..providers import ProviderDefinition, get_provider


def require_provider(name: str) -> ProviderDefinition:
    """Return the provider called *name* or exit with an error."""
    defn = get_provider(name)
    if defn is None:
        click.echo(click.style(f"Unknown provider: {name}", fg="red"))
        raise SystemExit(1)
    return defn
