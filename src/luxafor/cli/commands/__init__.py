"""CLI commands for lux."""

from .config import config
from .lights import blink, fade, off, pattern, solid, strobe, wave

__all__ = ["blink", "config", "fade", "off", "pattern", "solid", "strobe", "wave"]
