# -*- coding: utf-8 -*-
"""CLI commands for custom prompts."""
from __future__ import annotations

import click

from ..providers import CustomPrompt


@click.group("prompts")
def prompts_group() -> None:
    """Manage custom prompts."""


@prompts_group.command("list")
@click.pass_obj
def list_cmd(obj) -> None:
    """Show all custom prompts."""
    for prompt in obj.open().get_custom_prompts():
        click.echo(f"/{prompt.name}: {prompt.prompt}")


@prompts_group.command("set")
@click.argument("name")
@click.argument("template")
@click.pass_obj
def set_cmd(obj, name: str, template: str) -> None:
    """Add a prompt, or replace the template of an existing one."""
    service = obj.open()
    prompts = service.get_custom_prompts()
    prompts.append(CustomPrompt(name=name, prompt=template))
    service.set_custom_prompts(prompts)
    obj.save(service)
    click.echo(f"✓ /{name}")
