"""
Command-line entry point.

Usage:
    frontier generate-action CreateInvoice
    frontier generate-action CreateInvoice --module=billing
    frontier generate-action CreateInvoice --module      # pick a module interactively
"""

import logging

import click

from frontier_actions import __version__
from frontier_actions.console.generator import ActionGenerator
from frontier_actions.console.modules import default_module_lister
from frontier_actions.core.config import Settings, get_settings
from frontier_actions.util.logger import setup_logging

# Value of --module when it is given without one
SELECT_MODULE = "__select__"


def _settings(ctx: click.Context) -> Settings:
    return ctx.ensure_object(dict).get("settings") or get_settings()


def _info(message: str) -> None:
    click.echo(f"{click.style(' INFO ', bg='blue', fg='white')} {message}")


def _warn(message: str) -> None:
    click.echo(f"{click.style(' WARN ', bg='yellow', fg='black')} {message}", err=True)


def _error(message: str) -> None:
    click.echo(f"{click.style(' ERROR ', bg='red', fg='white')} {message}", err=True)


@click.group()
@click.version_option(version=__version__, prog_name="frontier")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Frontier actions tooling."""
    ctx.ensure_object(dict)
    level = logging.DEBUG if verbose else _settings(ctx).log_level
    setup_logging(level)


@cli.command("generate-action")
@click.argument("name")
@click.option(
    "--module",
    is_flag=False,
    flag_value=SELECT_MODULE,
    default=None,
    help=(
        "Module to create the action in, as --module=NAME. "
        "Given without a value it must follow the action name, "
        "e.g. `generate-action CreateInvoice --module`, and you pick the module."
    ),
)
@click.pass_context
def generate_action(ctx: click.Context, name: str, module: str | None) -> None:
    """Create a new action class.

    Pass a module as --module=NAME. A bare --module goes after NAME and
    asks which module to use.
    """
    settings = _settings(ctx)

    if module is not None:
        if "module_lister" in ctx.obj:
            lister = ctx.obj["module_lister"]
        else:
            lister = default_module_lister(settings)

        if lister is None:
            _error(
                "The --module option requires module support. "
                "Enable it with FRONTIER_MODULES_ENABLED=true"
            )
            return

        if module == SELECT_MODULE:
            modules = lister.modules()
            if not modules:
                _warn(f"No modules found in {settings.modules_directory}")
                return
            module = click.prompt("Select a module", type=click.Choice(modules))

    result = ActionGenerator(settings).generate(name, module)
    if result.created:
        _info(f"{result.path} created")
    else:
        _info(f"{result.path} already exists")


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
