"""Preset patterns and wave styles."""

from enum import Enum

from luxafor.exceptions import InvalidPatternError


class Pattern(str, Enum):
    """Preset patterns the light can show."""

    POLICE = "police"  # Cycles between red and blue
    TRAFFIC_LIGHTS = "traffic lights"  # Cycles green, yellow, red
    RANDOM_1 = "random 1"
    RANDOM_2 = "random 2"
    RANDOM_3 = "random 3"
    RANDOM_4 = "random 4"
    RANDOM_5 = "random 5"
    # Only shipped by the Windows firmware tooling
    RAINBOW = "rainbow"
    SEA = "sea"
    WHITE_WAVE = "white wave"
    SYNTHETIC = "synthetic"

    def __str__(self) -> str:
        return self.value

    @property
    def extended(self) -> bool:
        """True for platform-restricted patterns."""
        return self in EXTENDED_PATTERNS

    @classmethod
    def random(cls, number: int) -> "Pattern":
        """
        Get one of the five random patterns.

        Args:
            number: Random pattern number (1-5)

        Raises:
            InvalidPatternError: If number is outside 1-5
        """
        if not 1 <= number <= 5:
            raise InvalidPatternError(f"random {number}", "random patterns are numbered 1 to 5")
        return cls(f"random {number}")


EXTENDED_PATTERNS = frozenset({
    Pattern.RAINBOW,
    Pattern.SEA,
    Pattern.WHITE_WAVE,
    Pattern.SYNTHETIC,
})


class WaveStyle(str, Enum):
    """
    Wave shapes.

    Waves start at the bottom of the light, fill it and then fade out at
    the top. Overlapping waves start before the previous one completes.
    """

    SHORT = "short"
    LONG = "long"
    OVERLAPPING_SHORT = "overlapping short"
    OVERLAPPING_LONG = "overlapping long"

    def __str__(self) -> str:
        return self.value


def parse_pattern(token: str, extended: bool = False) -> Pattern:
    """
    Parse a pattern name such as "police" or "random 3".

    Args:
        token: User supplied pattern string (case-insensitive)
        extended: Accept the platform-restricted patterns (rainbow, sea,
                  white wave, synthetic)

    Raises:
        InvalidPatternError: Unknown token, or an extended pattern while
                             extended is False
    """
    try:
        pattern = Pattern(token.lower())
    except ValueError:
        raise InvalidPatternError(token) from None

    if pattern.extended and not extended:
        raise InvalidPatternError(token, "pattern is not available on this platform")
    return pattern


def parse_wave_style(token: str) -> WaveStyle:
    """
    Parse a wave style name.

    Raises:
        InvalidPatternError: If the token is not one of the four styles
    """
    try:
        return WaveStyle(token.lower())
    except ValueError:
        raise InvalidPatternError(token, "not a wave style") from None
