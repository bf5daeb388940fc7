"""
universe CLI - inspect the provider a process would expose.
"""

import json
import logging
import sys

import click

from universe import __version__
from universe.config.loader import load_provider_config
from universe.config.provider import ConfigurationError, undeclared_keys
from universe.providers.provider import Provider


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--binary-name",
    help="Resolve the provider name as if started under this binary name",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, binary_name: str | None, debug: bool):
    """
    universe - a generic provider whose resources are implemented by scripts.

    The provider name comes from TERRAFORM_UNIVERSE_PROVIDERNAME or the
    binary name; resource types from TERRAFORM_<NAME>_RESOURCETYPES.
    """
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)
    ctx.obj = {"binary_name": binary_name}


def _provider(ctx: click.Context) -> Provider:
    return Provider(binary_path=ctx.obj["binary_name"])


@cli.command()
@click.pass_context
def name(ctx: click.Context):
    """
    Show the resolved provider name.

    Example:
        universe --binary-name terraform-provider-widget-1.2.3 name
    """
    click.echo(_provider(ctx).name)


@cli.command("resource-types")
@click.pass_context
def resource_types(ctx: click.Context):
    """
    List the resource types the provider exposes.

    Example:
        TERRAFORM_UNIVERSE_RESOURCETYPES="file bucket" universe resource-types
    """
    for resource_type in _provider(ctx).resource_types:
        click.echo(resource_type)


@cli.command()
@click.pass_context
def schema(ctx: click.Context):
    """Print the JSON schema of the provider configuration block."""
    click.echo(json.dumps(_provider(ctx).schema(), indent=2))


@cli.command("check-config")
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def check_config(ctx: click.Context, config_file: str):
    """
    Validate a provider configuration file.

    Prints the normalized configuration as JSON.

    Example:
        universe check-config provider.yaml
    """
    provider = _provider(ctx)
    try:
        config = load_provider_config(config_file)
        for key in undeclared_keys(config):
            click.echo(f"Warning: '{key}' is not a declared provider setting", err=True)
        snapshot = provider.configure(config)
    except ConfigurationError as e:
        click.echo(f"✗ Invalid provider config: {e}", err=True)
        sys.exit(1)

    click.echo(json.dumps(snapshot.to_dict(), indent=2, sort_keys=True, default=str))


if __name__ == "__main__":
    cli()
