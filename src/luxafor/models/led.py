"""LED targeting model."""

from enum import Enum

from luxafor.exceptions import InvalidLEDError


class LedTarget(str, Enum):
    """
    Which LED(s) on the light an operation addresses.

    Numbers follow the physical layout of the Flag, viewed upright:

        | Back | Front |
        |------|-------|
        | 6    | 3     |
        | 5    | 2     |
        | 4    | 1     |
    """

    ALL = "all"
    FRONT = "front"
    BACK = "back"
    LED_1 = "1"
    LED_2 = "2"
    LED_3 = "3"
    LED_4 = "4"
    LED_5 = "5"
    LED_6 = "6"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def number(cls, number: int) -> "LedTarget":
        """
        Get the target for a single LED.

        Args:
            number: LED number (1-6)

        Raises:
            InvalidLEDError: If number is outside 1-6
        """
        if not 1 <= number <= 6:
            raise InvalidLEDError(str(number), "LEDs are numbered 1 to 6")
        return cls(str(number))


def parse_led_target(token: str) -> LedTarget:
    """
    Parse "all", "front", "back" or an LED number.

    Raises:
        InvalidLEDError: If the token is not recognized
    """
    try:
        return LedTarget(token.lower())
    except ValueError:
        raise InvalidLEDError(token) from None
