"""Config command - show and change persisted settings."""

from pathlib import Path
from typing import Optional

import click

from fwtui.exceptions import FwTuiError
from fwtui.models import AppConfig, ThemeVariant
from fwtui.models.config import MAX_TICK_INTERVAL_MS, MIN_TICK_INTERVAL_MS, default_config_path


def _config_path(ctx: click.Context) -> Path:
    return ctx.obj.get("config_path") or default_config_path()


@click.group()
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.fwtui/config.json)'
)
@click.pass_context
def config(ctx, config_path: Optional[Path]):
    """Show or change fwtui settings."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@config.command()
@click.pass_context
def show(ctx):
    """Display the configuration."""
    path = _config_path(ctx)
    config_obj = AppConfig.load_or_create(path)
    click.echo(f"# {path}")
    click.echo(config_obj.model_dump_json(indent=2))


@config.command(name="set")
@click.option(
    '--theme',
    type=click.Choice([variant.value for variant in ThemeVariant]),
    default=None,
    help='Colour theme'
)
@click.option(
    '--tick-interval',
    type=click.IntRange(MIN_TICK_INTERVAL_MS, MAX_TICK_INTERVAL_MS),
    default=None,
    help='Refresh interval in milliseconds'
)
@click.option('--framework-tool', type=str, default=None, help='Path of the framework_tool executable')
@click.pass_context
def set_(ctx, theme: Optional[str], tick_interval: Optional[int], framework_tool: Optional[str]):
    """Update configuration values."""
    path = _config_path(ctx)
    config_obj = AppConfig.load_or_create(path)

    updates = {}
    if theme is not None:
        updates["theme"] = ThemeVariant(theme)
    if tick_interval is not None:
        updates["tick_interval_ms"] = tick_interval
    if framework_tool is not None:
        updates["framework_tool"] = framework_tool

    if not updates:
        raise click.UsageError("Nothing to change. Pass --theme, --tick-interval or --framework-tool.")

    try:
        AppConfig.model_validate({**config_obj.model_dump(), **updates}).save(path)
    except FwTuiError as e:
        raise click.ClickException(e.get_full_message()) from e
    except OSError as e:
        raise click.ClickException(f"Could not write {path}: {e}") from e
    click.echo(f"Saved {path}")
