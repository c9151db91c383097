"""logmeta detect: print the resource this process would tag entries with."""

from __future__ import annotations

import asyncio
import json
import sys

import click
import yaml


@click.command()
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None, help="YAML or JSON config file.")
@click.option("--project-id", default=None, help="Use this project ID instead of looking one up.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    show_default=True,
    help="Output format.",
)
def detect(config_file: str | None, project_id: str | None, output_format: str) -> None:
    """Detect the monitored resource for this environment."""
    from logmeta.core.config import Config
    from logmeta.core.exceptions import LogmetaError
    from logmeta.core.utils.logging import configure_from_settings
    from logmeta.identity import GoogleAuthIdentityProvider
    from logmeta.resource import SKIPPED, ResourceResolver

    config = Config(config_file=config_file)
    if project_id:
        config.set("resource.project_id", project_id)

    try:
        settings = config.validated()
    except LogmetaError as e:
        click.echo(str(e), err=True)
        sys.exit(2)

    configure_from_settings(settings.logging)

    resolver = ResourceResolver.from_config(config, GoogleAuthIdentityProvider())
    try:
        descriptor = asyncio.run(resolver.resolve_default_descriptor())
    except (LogmetaError, ImportError) as e:
        click.echo(f"Could not resolve resource: {e}", err=True)
        sys.exit(1)

    if descriptor is SKIPPED:
        click.echo("Project lookup is disabled; no resource resolved.")
        return

    data = descriptor.to_dict()
    if output_format == "yaml":
        click.echo(yaml.safe_dump(data, sort_keys=False).rstrip())
    else:
        click.echo(json.dumps(data, indent=2))
