"""Click parameter types for domain values.

Each type delegates to the domain parser and reports a ParseError as a
normal click usage error, so bad input never reaches a device.
"""

from abc import ABC, abstractmethod

import click

from luxafor.exceptions import ParseError
from luxafor.models import parse_color, parse_led_target, parse_pattern, parse_wave_style
from .state import CliState


class _DomainParamType(click.ParamType, ABC):
    """Base for types backed by a luxafor parser."""

    @abstractmethod
    def parse(self, value: str, ctx: click.Context | None):
        """Parse a command line token, raising ParseError on bad input."""

    def convert(self, value, param, ctx):
        if not isinstance(value, str):
            return value
        try:
            return self.parse(value, ctx)
        except ParseError as e:
            self.fail(e.get_full_message(), param, ctx)


class ColorParamType(_DomainParamType):
    name = "color"

    def parse(self, value, ctx):
        return parse_color(value)


class PatternParamType(_DomainParamType):
    """Pattern names; extended patterns follow the loaded config."""

    name = "pattern"

    def parse(self, value, ctx):
        extended = False
        if ctx is not None:
            state = ctx.find_object(CliState)
            if state is not None:
                extended = state.config.extended_patterns
        return parse_pattern(value, extended=extended)


class WaveStyleParamType(_DomainParamType):
    name = "style"

    def parse(self, value, ctx):
        return parse_wave_style(value)


class LedTargetParamType(_DomainParamType):
    name = "led"

    def parse(self, value, ctx):
        return parse_led_target(value)


COLOR = ColorParamType()
PATTERN = PatternParamType()
WAVE_STYLE = WaveStyleParamType()
LED_TARGET = LedTargetParamType()
