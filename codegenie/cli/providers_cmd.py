# -*- coding: utf-8 -*-
"""CLI commands for managing LLM providers."""
from __future__ import annotations

import click

from ..providers import list_providers
from ..settings import mask_api_key
from .utils import require_provider


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


@click.group("providers")
def providers_group() -> None:
    """Manage provider API keys and base URLs."""


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@providers_group.command("list")
@click.pass_obj
def list_cmd(obj) -> None:
    """Show all providers and their current configuration."""
    service = obj.open()

    click.echo("\n=== Providers ===")
    for defn in list_providers():
        kind = "api" if defn.api_based else "local"

        click.echo(f"\n{'─' * 44}")
        click.echo(f"  {defn.name} ({defn.id}) [{kind}]")
        click.echo(f"{'─' * 44}")
        url = service.get_base_url(defn) or "(not set)"
        click.echo(f"  {'base_url':16s}: {url}")
        if defn.api_key_field:
            key = mask_api_key(service.get_api_key(defn)) or "(not set)"
            click.echo(f"  {'api_key':16s}: {key}")
        if defn.models:
            click.echo(f"  {'models':16s}: {len(defn.models)} built-in")
    click.echo()


# ---------------------------------------------------------------------------
# set-key
# ---------------------------------------------------------------------------


@providers_group.command("set-key")
@click.argument("provider")
@click.pass_obj
def set_key_cmd(obj, provider: str) -> None:
    """Set a remote provider's API key (prompted, hidden)."""
    defn = require_provider(provider)
    if not defn.api_key_field:
        click.echo(
            click.style(
                f"Error: {defn.name} is a local runtime without API key.",
                fg="red",
            ),
        )
        raise SystemExit(1)

    service = obj.open()
    current_key = service.get_api_key(defn)
    api_key = click.prompt(
        "API key",
        default=current_key or "",
        hide_input=True,
        show_default=False,
        prompt_suffix=f" [{'set' if current_key else 'not set'}]: ",
    )
    service.set_api_key(defn, api_key)
    obj.save(service)
    click.echo(
        f"✓ {defn.name} — API Key: {mask_api_key(api_key) or '(not set)'}",
    )


# ---------------------------------------------------------------------------
# set-url
# ---------------------------------------------------------------------------


@providers_group.command("set-url")
@click.argument("provider")
@click.argument("url")
@click.pass_obj
def set_url_cmd(obj, provider: str, url: str) -> None:
    """Set the base URL of a local runtime."""
    defn = require_provider(provider)
    if not defn.url_field:
        click.echo(
            click.style(
                f"Error: {defn.name} uses a fixed base URL "
                f"({defn.default_base_url}).",
                fg="red",
            ),
        )
        raise SystemExit(1)

    service = obj.open()
    service.set_base_url(defn, url.strip())
    obj.save(service)
    click.echo(f"✓ {defn.name} — Base URL: {url.strip()}")
