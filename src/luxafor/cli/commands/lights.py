"""Light command implementations."""

import logging
from collections.abc import Callable

import click

from luxafor.devices import Light, open_light
from luxafor.exceptions import ErrorContext, LuxaforError, ParseError
from luxafor.models import Color, Pattern, WaveStyle
from ..errors import fail
from ..params import COLOR, PATTERN, WAVE_STYLE
from ..state import CliState

logger = logging.getLogger(__name__)

BYTE = click.IntRange(0, 255)


def run_on_light(operation: str, action: Callable[[Light], None]) -> None:
    """
    Open the selected light, run one operation on it and close it.

    Args:
        operation: Description used in log messages
        action: Callable receiving the opened light

    Exits with status 1 on any LuxaforError.
    """
    state = click.get_current_context().find_object(CliState)

    if not state.device:
        raise click.UsageError(
            "No device given. Use --device, set LUX_DEVICE or add 'device' to the config file."
        )

    try:
        light = open_light(state.device, state.config, led=state.led)
    except ParseError as e:
        raise click.BadParameter(e.get_full_message(), param_hint="'--device'") from e
    except LuxaforError as e:
        logger.error(f"Could not open device '{state.device}': {e.technical_message}")
        fail(e)

    try:
        with ErrorContext(operation, logger_instance=logger):
            action(light)
    except LuxaforError as e:
        fail(e)
    finally:
        light.close()


@click.command()
@click.argument("color", type=COLOR)
def solid(color: Color):
    """Set a solid COLOR (named or 6-digit hex, e.g. red or 00ff7f)."""
    run_on_light("set solid color", lambda light: light.set_solid(color))


@click.command()
@click.argument("color", type=COLOR)
def blink(color: Color):
    """Blink a COLOR (webhook only)."""
    run_on_light("set blinking color", lambda light: light.set_solid(color, blink=True))


@click.command()
@click.argument("color", type=COLOR)
@click.option("--speed", "-s", type=BYTE, default=10, show_default=True, help="Time for each strobe")
@click.option("--repeat", "-r", type=BYTE, default=255, show_default=True, help="Number of strobes")
def strobe(color: Color, speed: int, repeat: int):
    """Strobe a COLOR, dimming and brightening it."""
    run_on_light("set strobe", lambda light: light.set_strobe(color, speed, repeat))


@click.command()
@click.argument("color", type=COLOR)
@click.option(
    "--fade-duration", "-f", type=BYTE, default=60, show_default=True,
    help="Time to fade from the current color"
)
def fade(color: Color, fade_duration: int):
    """Fade to a COLOR (USB only)."""
    run_on_light("set fade", lambda light: light.set_fade(color, fade_duration))


@click.command()
@click.argument("color", type=COLOR)
@click.argument("style", type=WAVE_STYLE, default="short")
@click.option("--speed", "-s", type=BYTE, default=30, show_default=True, help="Time for each wave")
@click.option("--repeat", "-r", type=BYTE, default=255, show_default=True, help="Number of waves")
def wave(color: Color, style: WaveStyle, speed: int, repeat: int):
    """
    Run a wave of COLOR (USB only).

    STYLE is one of short, long, "overlapping short" or "overlapping long".
    """
    run_on_light("set wave", lambda light: light.set_wave(color, style, speed, repeat))


@click.command()
@click.argument("pattern", type=PATTERN)
@click.option("--repeat", "-r", type=BYTE, default=255, show_default=True, help="Number of repetitions")
def pattern(pattern: Pattern, repeat: int):
    """
    Show a preset PATTERN.

    \b
    Patterns: police, "traffic lights", "random 1" ... "random 5"
    Extended (when enabled in config): rainbow, sea, "white wave", synthetic
    """
    run_on_light("set pattern", lambda light: light.set_pattern(pattern, repeat))


@click.command()
def off():
    """Turn the light off."""
    run_on_light("turn off", lambda light: light.turn_off())
