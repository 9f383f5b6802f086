# -*- coding: utf-8 -*-
"""CLI commands for model costs and context windows."""
from __future__ import annotations

from typing import Optional

import click

from ..providers import list_providers
from .utils import require_provider


def _warn_local(name: str) -> None:
    click.echo(
        click.style(
            f"{name} is a local runtime; costs and windows are not tracked.",
            fg="yellow",
        ),
    )


@click.group("costs")
def costs_group() -> None:
    """Inspect and override model costs (USD per 1M tokens)."""


@costs_group.command("list")
@click.option("--provider", default=None, help="Only this provider.")
@click.pass_obj
def list_cmd(obj, provider: Optional[str]) -> None:
    """Show resolved costs of every built-in model."""
    providers = (
        [require_provider(provider)] if provider else list_providers()
    )
    service = obj.open()
    for defn in providers:
        if not defn.api_based:
            continue
        click.echo(f"\n  {defn.name}")
        for model in defn.models:
            in_cost = service.get_model_input_cost(defn, model)
            out_cost = service.get_model_output_cost(defn, model)
            window = service.get_model_window_context(defn, model)
            click.echo(
                f"    {model:40s} in={in_cost:<8g} out={out_cost:<8g} "
                f"window={window}",
            )
    click.echo()


@costs_group.command("show")
@click.argument("provider")
@click.argument("model")
@click.pass_obj
def show_cmd(obj, provider: str, model: str) -> None:
    """Show the resolved input/output cost and window of one model."""
    defn = require_provider(provider)
    service = obj.open()
    click.echo(f"{'provider':16s}: {defn.name}")
    click.echo(f"{'model':16s}: {model}")
    click.echo(
        f"{'input_cost':16s}: {service.get_model_input_cost(defn, model):g}",
    )
    click.echo(
        f"{'output_cost':16s}: "
        f"{service.get_model_output_cost(defn, model):g}",
    )
    click.echo(
        f"{'window_context':16s}: "
        f"{service.get_model_window_context(defn, model)}",
    )


@costs_group.command("set")
@click.argument("provider")
@click.argument("model")
@click.argument("input_cost", type=float)
@click.argument("output_cost", type=float)
@click.pass_obj
def set_cmd(
    obj,
    provider: str,
    model: str,
    input_cost: float,
    output_cost: float,
) -> None:
    """Override the input and output cost of a model."""
    defn = require_provider(provider)
    if not defn.api_based:
        _warn_local(defn.name)
        return
    service = obj.open()
    service.set_model_cost(defn, model, input_cost, output_cost)
    obj.save(service)
    click.echo(
        f"✓ {defn.name} / {model}: in={input_cost:g} out={output_cost:g}",
    )


@costs_group.command("set-window")
@click.argument("provider")
@click.argument("model")
@click.argument("window", type=click.IntRange(min=1))
@click.pass_obj
def set_window_cmd(obj, provider: str, model: str, window: int) -> None:
    """Override the context window of a model."""
    defn = require_provider(provider)
    if not defn.api_based:
        _warn_local(defn.name)
        return
    service = obj.open()
    service.set_model_window_context(defn, model, window)
    obj.save(service)
    click.echo(f"✓ {defn.name} / {model}: window={window}")
