"""
Workshop Command-Line Interface.

Provides the ``workshop`` entry point:

- ``workshop``          : place the demo orders (wooden chair, plastic table)
- ``workshop order``    : place a single order against one store
- ``workshop init``     : generate a starter recipe YAML with all defaults
- ``workshop run``      : place every order listed in a YAML recipe

Usage:
    workshop
    workshop order chair wood
    workshop init
    workshop run recipe.yaml --set orders.0.material=plastic --set telemetry.log_level=DEBUG
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer

from workshop.core.paths import DEFAULT_RECIPE_NAME

app = typer.Typer(
    name="workshop",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=False,
)


# ── App callback ────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from workshop import __version__

        typer.echo(f"workshop-furniture {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    _: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Workshop: furniture stores built on the Factory Method pattern."""
    if ctx.invoked_subcommand is not None:
        return

    from workshop.core.config import Config

    _execute(Config())


# ── Commands ────────────────────────────────────────────────────────────────


@app.command()
def order(
    store: Annotated[str, typer.Argument(help="Store name (e.g. chair, table).")],
    material: Annotated[str, typer.Argument(help="Material tag (e.g. wood, plastic).")],
    log_level: Annotated[
        str,
        typer.Option("--log-level", "-l", help="Logging verbosity."),
    ] = "WARNING",
) -> None:
    """Place a single order. Unknown materials are accepted and produce nothing."""
    from pydantic import ValidationError

    from workshop.core.config import Config

    try:
        cfg = Config.model_validate(
            {
                "orders": [{"store": store, "material": material}],
                "telemetry": {"log_level": log_level},
            }
        )
    except ValidationError as e:
        typer.echo(f"Error: {_first_error(e)}", err=True)
        raise typer.Exit(code=1)

    _execute(cfg)


@app.command()
def init(
    output: Annotated[
        Path,
        typer.Argument(help="Output YAML file path."),
    ] = Path(DEFAULT_RECIPE_NAME),
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite existing file."),
    ] = False,
) -> None:
    """Generate a starter recipe with all config fields and defaults."""
    from workshop.core import save_config_as_yaml
    from workshop.core.config import Config

    if output.exists() and not force:
        typer.echo(f"Error: '{output}' already exists. Use --force to overwrite.", err=True)
        raise typer.Exit(code=1)

    save_config_as_yaml(Config(), output, header=_INIT_HEADER.format(filename=output.name))
    typer.echo(f"Recipe created: {output}")
    typer.echo(f"Run it with:   workshop run {output}")


@app.command()
def run(
    recipe: Annotated[
        Path,
        typer.Argument(help="Path to YAML recipe file."),
    ],
    set_: Annotated[
        list[str] | None,
        typer.Option(
            "--set",
            help="Override config value (repeatable): key.path=value",
        ),
    ] = None,
) -> None:
    """Place every order listed in a YAML recipe."""
    from pydantic import ValidationError

    from workshop.core.config import Config
    from workshop.exceptions import WorkshopConfigError

    if not recipe.exists():
        typer.echo(f"Error: recipe not found: {recipe}", err=True)
        raise typer.Exit(code=1)

    overrides = _parse_overrides(set_ or [])
    try:
        cfg = Config.from_recipe(recipe, overrides=overrides or None)
    except ValidationError as e:
        typer.echo(f"Error: invalid recipe {recipe}: {_first_error(e)}", err=True)
        raise typer.Exit(code=1)
    except WorkshopConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    _execute(cfg)


# ── Private helpers ─────────────────────────────────────────────────────────

_INIT_HEADER = """\
# ==============================================================================
# Workshop: Starter Recipe (generated by `workshop init`)
# ==============================================================================
# Usage:   workshop run {filename}
#
# Each order names a store (chair, table) and a material tag (wood, plastic).
# Unrecognized materials are accepted and simply produce nothing.
# ==============================================================================

"""


def _execute(cfg: Any) -> None:
    """Configure logging from *cfg* and run its orders."""
    from workshop.core import LOGGER_NAME, Logger, LogStyle
    from workshop.pipeline import run_order_phase

    run_logger = Logger.setup(
        name=LOGGER_NAME,
        log_dir=cfg.telemetry.log_dir,
        level=cfg.telemetry.log_level,
    )

    try:
        run_order_phase(cfg, logger_instance=run_logger)
    except Exception as e:  # top-level catch-all for logging; re-raises
        run_logger.error(f"{LogStyle.WARNING} Order run failed: {e}", exc_info=True)
        raise


def _first_error(exc: Any) -> str:
    """Condense a pydantic ValidationError to its first message."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(p) for p in first.get("loc", ()))
    return f"{loc}: {first['msg']}" if loc else first["msg"]


def _auto_cast(value: str) -> Any:
    """
    Cast a CLI string to the appropriate Python scalar type.

    Args:
        value: Raw string from the command line.

    Returns:
        Converted bool, None, int, float, or the original string.
    """
    low = value.lower()
    if low in ("true", "false"):
        return low == "true"
    if low in ("null", "none"):
        return None
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        pass
    return value


def _parse_overrides(raw: list[str]) -> dict[str, Any]:
    """
    Parse ``key.path=value`` strings into a flat override dict.

    Args:
        raw: list of "dotted.key=value" strings from ``--set`` flags.

    Returns:
        dict mapping dotted keys to auto-casted values.

    Raises:
        typer.BadParameter: If an item has no ``=`` or an empty key.
    """
    overrides: dict[str, Any] = {}
    for item in raw:
        if "=" not in item:
            raise typer.BadParameter(f"Override must use key=value format, got: '{item}'")
        key, _, val = item.partition("=")
        key = key.strip()
        if not key:
            raise typer.BadParameter(f"Empty key in override: '{item}'")
        overrides[key] = _auto_cast(val.strip())
    return overrides
