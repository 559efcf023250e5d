"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from luxafor import __version__
from luxafor.exceptions import ConfigurationError
from luxafor.models import AppConfig, LedTarget
from .commands import blink, config, fade, off, pattern, solid, strobe, wave
from .errors import fail
from .params import LED_TARGET
from .state import CliState

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
HANDLER_NAME = "luxafor-cli"

# -v count -> level; 0 turns logging off
VERBOSITY_LEVELS = {
    0: logging.CRITICAL + 10,
    1: logging.ERROR,
    2: logging.WARNING,
    3: logging.INFO,
}


def setup_logging(verbose: int, log_file: Optional[Path] = None) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: Verbosity count (0 = off, 1 = ERROR, 2 = WARNING, 3 = INFO, 4+ = DEBUG)
        log_file: Log to this rotating file instead of stderr (optional)
    """
    level = VERBOSITY_LEVELS.get(verbose, logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    if log_file:
        # Rotating file handler (keeps last 5 files, max 1MB each)
        handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=1024 * 1024,
            backupCount=5
        )
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.set_name(HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing in list(root_logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            root_logger.removeHandler(existing)
            existing.close()
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    logger.debug(f"Logging configured: level={logging.getLevelName(level)}, file={log_file}")


@click.group()
@click.pass_context
@click.version_option(version=__version__, prog_name="lux")
@click.option(
    '--device',
    '-d',
    envvar='LUX_DEVICE',
    type=str,
    default=None,
    help="'usb', or the webhook device identifier (env: LUX_DEVICE)"
)
@click.option(
    '--led',
    '-l',
    type=LED_TARGET,
    default=None,
    help='LED(s) to address: all, front, back or 1-6 (USB only)'
)
@click.option(
    '--timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Webhook request timeout in seconds (default: from config, 10)'
)
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file path (default: ~/.luxafor/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: ERROR, -vv: WARNING, -vvv: INFO, -vvvv: DEBUG)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Write logs to this file instead of stderr'
)
def cli(
    ctx,
    device: Optional[str],
    led: Optional[LedTarget],
    timeout: Optional[float],
    config_path: Optional[Path],
    verbose: int,
    log_file: Optional[Path]
):
    """
    CLI for Luxafor lights, connected over USB or via webhooks.

    \b
    Examples:
      # Solid red on a webhook connected light
      lux -d 2a0f2c73b72 solid red

    \b
      # Save repeating the device on every call
      export LUX_DEVICE=2a0f2c73b72
      lux blink green

    \b
      # Strobe the front LEDs of a USB light
      lux -d usb --led front strobe blue --speed 10 --repeat 5

    \b
      # Turn off, logging at INFO
      lux -vvv -d 2a0f2c73b72 off
    """
    setup_logging(verbose, log_file)

    try:
        config_obj = AppConfig.load_or_default(config_path)
    except ConfigurationError as e:
        logger.error(f"Could not load configuration: {e.technical_message}")
        fail(e)

    if timeout is not None:
        config_obj = config_obj.model_copy(update={"timeout": timeout})

    ctx.obj = CliState(
        config=config_obj,
        config_path=config_path,
        device=device or config_obj.device,
        led=led,
    )


cli.add_command(solid)
cli.add_command(blink)
cli.add_command(strobe)
cli.add_command(fade)
cli.add_command(wave)
cli.add_command(pattern)
cli.add_command(off)
cli.add_command(config)

if __name__ == "__main__":
    cli()
