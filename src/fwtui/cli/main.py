"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from fwtui import __version__
from fwtui.models.config import MAX_TICK_INTERVAL_MS, MIN_TICK_INTERVAL_MS, default_config_path
from fwtui.models.enums import ThemeVariant

from .commands import config, snapshot

logger = logging.getLogger(__name__)


def _log_path(debug: bool, log_file: Optional[Path]) -> Path:
    if log_file:
        return log_file
    if debug:
        return Path.cwd() / "fwtui-debug.log"
    return Path.home() / ".fwtui" / "logs" / "fwtui.log"


def setup_logging(verbose: int, debug: bool, log_file: Optional[Path], log_level: str) -> None:
    """
    Configure logging for the application.

    The TUI owns the terminal, so logs always go to a rotating file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging
        log_file: Custom log file path (optional)
        log_level: Log level for file logging (DEBUG/INFO/WARNING/ERROR)
    """
    if debug:
        level = logging.DEBUG
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Override with explicit log level if provided
    if log_file:
        level = getattr(logging, log_level.upper())

    log_path = _log_path(debug, log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")


@click.group(invoke_without_command=True)
@click.pass_context
@click.version_option(version=__version__, prog_name="fwtui")
@click.option('--demo', is_flag=True, help='Use simulated hardware instead of framework_tool')
@click.option(
    '--tick-interval',
    type=click.IntRange(MIN_TICK_INTERVAL_MS, MAX_TICK_INTERVAL_MS),
    default=None,
    help='Refresh interval in milliseconds (saved to the config)'
)
@click.option(
    '--theme',
    type=click.Choice([variant.value for variant in ThemeVariant]),
    default=None,
    help='Colour theme (saved to the config)'
)
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file (default: ~/.fwtui/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./fwtui-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for file logging (default: INFO)'
)
def cli(
    ctx,
    demo: bool,
    tick_interval: Optional[int],
    theme: Optional[str],
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    Framework System - live hardware dashboard for Framework laptops.

    \b
    Keys:
      Tab         switch panels
      Up/Down     move between controls
      Enter       edit / apply
      Left/Right  adjust value
      Esc         cancel edit, dismiss error
      t           next theme
      +/-         slower / faster refresh
      q           quit

    \b
    Examples:
      fwtui
      fwtui --demo
      fwtui --theme dracula --tick-interval 500
      fwtui --debug
      fwtui snapshot --json
      fwtui config show
    """
    if ctx.invoked_subcommand is not None:
        return

    # Lazy imports to keep subcommands light
    from fwtui.core import DashboardController
    from fwtui.hardware import DemoBackend, FrameworkBackend
    from fwtui.models import AppConfig
    from fwtui.tui import FwTuiApp

    setup_logging(verbose, debug, log_file, log_level)
    log_path = _log_path(debug, log_file)

    logger.info("Starting fwtui")

    try:
        config_obj = AppConfig.load_or_create(config_path)

        overrides = {}
        if theme is not None:
            overrides["theme"] = ThemeVariant(theme)
        if tick_interval is not None:
            overrides["tick_interval_ms"] = tick_interval
        if overrides:
            config_obj = AppConfig.model_validate({**config_obj.model_dump(), **overrides})
            config_obj.save(config_path)

        if demo:
            backend = DemoBackend()
        else:
            backend = FrameworkBackend(tool=config_obj.framework_tool)

        controller = DashboardController(
            backend=backend,
            config=config_obj,
            config_path=config_path or default_config_path(),
        )
        FwTuiApp(controller).run()

    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
        click.echo("\nShutting down...", err=True)
    except click.Abort:
        raise
    except Exception as e:
        from fwtui.exceptions import format_error_for_display

        logger.exception("Error running application")

        user_message, recovery_hint = format_error_for_display(e)

        click.echo("\n" + "="*70, err=True)
        click.echo(f"ERROR: {user_message}", err=True)
        click.echo("="*70, err=True)

        if recovery_hint:
            click.echo(f"\n{recovery_hint}", err=True)

        click.echo(f"\nFor details, check the log file: {log_path}", err=True)
        click.echo("For logging options, run: fwtui --help", err=True)

        sys.exit(1)


cli.add_command(config)
cli.add_command(snapshot)

if __name__ == "__main__":
    cli()
