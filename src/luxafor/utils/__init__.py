"""Generic utility modules for luxafor."""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
