"""Command line interface for Luxafor lights."""

from .main import cli

__all__ = ["cli"]
