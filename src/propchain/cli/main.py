"""
Main CLI entry point for propchain.

Provides commands for inspecting how a hierarchical property name fans out
into candidate names and in which order a fallback chain resolves them.
"""

import json as _json
import logging as _logging
import typing as _typing

import click as _click
import pydantic as _pydantic

import propchain
import propchain.chain as chain
import propchain.config as config

_logger = _logging.getLogger(__name__)

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}


def _load_settings() -> config.Settings:
    try:
        return config.Settings()
    except config.ConfigFileError as e:
        raise _click.ClickException(str(e)) from e
    except _pydantic.ValidationError as e:
        raise _click.ClickException(f"Invalid settings: {e}") from e


def _settings(ctx: _click.Context) -> config.Settings:
    """Load settings on first use and configure logging from them.

    Deferred until a command runs so that --help works with a broken config.
    """
    state: dict[str, _typing.Any] = ctx.ensure_object(dict)
    if "settings" not in state:
        loaded = _load_settings()
        level = "DEBUG" if state.get("verbose") else loaded.log_level
        _logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
        _logger.debug("Loaded settings: %s", loaded.to_dict())
        state["settings"] = loaded
    settings: config.Settings = state["settings"]
    return settings


def _affix_options(func: _typing.Callable[..., _typing.Any]) -> _typing.Callable[..., _typing.Any]:
    """Add the --prefix/--suffix/--json options shared by fan and chain."""
    func = _click.option(
        "--json",
        "json_output",
        is_flag=True,
        help="Output in JSON format",
    )(func)
    func = _click.option(
        "--suffix",
        type=str,
        default=None,
        help="Part appended to every candidate name",
    )(func)
    func = _click.option(
        "--prefix",
        type=str,
        default=None,
        help="Part prepended to every candidate name",
    )(func)
    return func


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(propchain.__version__, "-v", "--version", prog_name="propchain")
@_click.option(
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
@_click.pass_context
def cli(ctx: _click.Context, verbose: bool) -> None:
    """propchain - hierarchical property names with fallback.

    \b
    Examples:
      propchain fan a.b.c --prefix x --suffix y
      propchain chain service.region.host --root localhost
      propchain config
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@_click.argument("name")
@_affix_options
@_click.pass_context
def fan(
    ctx: _click.Context,
    name: str,
    prefix: str | None,
    suffix: str | None,
    json_output: bool,
) -> None:
    """Print the candidate property names for NAME, most general first."""
    settings = _settings(ctx)
    names = chain.fan_property_name(prefix, name, suffix, delimiter=settings.delimiter)

    if json_output:
        _click.echo(_json.dumps(names))
        return
    for candidate in names:
        _click.echo(candidate)


@cli.command(name="chain")
@_click.argument("name")
@_affix_options
@_click.option(
    "--root",
    "root_value",
    type=str,
    default=None,
    help="Value held by the root (most general) node",
)
@_click.pass_context
def chain_command(
    ctx: _click.Context,
    name: str,
    prefix: str | None,
    suffix: str | None,
    json_output: bool,
    root_value: str | None,
) -> None:
    """Print the fallback order of the chain for NAME, most specific first."""
    settings = _settings(ctx)
    node = chain.derive_property_chain(
        name,
        root_value,
        chain.RootLink,
        chain.ChainLink,
        prefix=prefix,
        suffix=suffix,
        delimiter=settings.delimiter,
    )

    order = chain.chain_names(node)
    root = chain.chain_root(node)
    if json_output:
        _click.echo(_json.dumps({"order": order, "root": root}))
        return
    for position, candidate in enumerate(order, start=1):
        _click.echo(f"{position}. {candidate!r}")
    _click.echo(f"root: {root!r}")


@cli.command(name="config")
@_click.pass_context
def config_command(ctx: _click.Context) -> None:
    """Show effective settings."""
    settings = _settings(ctx)
    _click.echo(f"Delimiter:   {settings.delimiter!r}")
    _click.echo(f"Log Level:   {settings.log_level}")
    _click.echo(f"Config File: {settings.config_path}")


def main() -> None:
    """Console script entry point."""
    cli()
