"""Tests for domain models and token parsers."""

import pytest
from pydantic import ValidationError

from luxafor.exceptions import (
    InvalidColorError,
    InvalidDeviceIDError,
    InvalidLEDError,
    InvalidPatternError,
    ParseError,
)
from luxafor.models import (
    CustomColor,
    LedTarget,
    NamedColor,
    Pattern,
    UsbDeviceId,
    WaveStyle,
    WebhookDeviceId,
    parse_color,
    parse_device_id,
    parse_led_target,
    parse_pattern,
    parse_wave_style,
)


@pytest.mark.unit
class TestColor:
    """Test color parsing and formatting."""

    @pytest.mark.parametrize("token", ["red", "green", "yellow", "blue", "white", "cyan", "magenta"])
    def test_named_colors_format_as_token(self, token):
        """Named colors display as the lowercase token."""
        assert str(parse_color(token)) == token

    def test_named_colors_case_insensitive(self):
        """Upper and mixed case names parse."""
        assert parse_color("RED") is NamedColor.RED
        assert parse_color("Magenta") is NamedColor.MAGENTA

    def test_hex_parses_single_nibbles(self):
        """Custom colors read one hex digit per channel."""
        color = parse_color("a0b0c0")
        assert color == CustomColor(red=10, green=11, blue=12)
        assert str(color) == "0a0b0c"

    def test_hex_uppercase(self):
        """Uppercase hex digits are accepted."""
        assert parse_color("FF8800") == CustomColor(red=15, green=8, blue=0)

    @pytest.mark.parametrize("token", ["123456", "abcdef", "000000", "fedcba"])
    def test_hex_displays_six_digits(self, token):
        """Any valid hex token gives a six hex digit display form."""
        text = str(parse_color(token))
        assert len(text) == 6
        int(text, 16)

    @pytest.mark.parametrize("token", ["", "purple", "12345", "1234567", "12345g", "#12345"])
    def test_invalid_colors(self, token):
        """Unknown names and malformed hex are rejected."""
        with pytest.raises(InvalidColorError) as exc_info:
            parse_color(token)
        assert exc_info.value.token == token
        assert exc_info.value.recovery_hint is not None

    def test_custom_color_display(self):
        """Custom colors display as lowercase two-digit hex per channel."""
        assert str(CustomColor(red=1, green=2, blue=3)) == "010203"
        assert str(CustomColor(red=255, green=171, blue=0)) == "ffab00"

    def test_custom_color_range(self):
        """Channels outside 0-255 fail validation."""
        with pytest.raises(ValidationError):
            CustomColor(red=256, green=0, blue=0)
        with pytest.raises(ValidationError):
            CustomColor(red=0, green=-1, blue=0)

    def test_custom_color_frozen(self):
        """Colors cannot be mutated."""
        color = CustomColor(red=1, green=2, blue=3)
        with pytest.raises(ValidationError):
            color.red = 4

    def test_off_is_black(self):
        """off() is all zero."""
        assert CustomColor.off().rgb == (0, 0, 0)

    def test_named_rgb(self):
        """Named colors map to fixed RGB values."""
        assert NamedColor.RED.rgb == (255, 0, 0)
        assert NamedColor.CYAN.rgb == (0, 255, 255)
        assert NamedColor.YELLOW.rgb == (255, 255, 0)


@pytest.mark.unit
class TestPattern:
    """Test pattern and wave style parsing."""

    def test_random_in_range(self):
        """random 3 parses and formats back."""
        pattern = parse_pattern("random 3")
        assert pattern is Pattern.RANDOM_3
        assert str(pattern) == "random 3"

    @pytest.mark.parametrize("token", ["random 0", "random 6", "random", "disco"])
    def test_invalid_patterns(self, token):
        """Unknown tokens and out of range random numbers are rejected."""
        with pytest.raises(InvalidPatternError):
            parse_pattern(token)

    def test_named_patterns(self):
        """Police and traffic lights parse case-insensitively."""
        assert parse_pattern("POLICE") is Pattern.POLICE
        assert parse_pattern("traffic lights") is Pattern.TRAFFIC_LIGHTS

    def test_extended_patterns_gated(self):
        """Platform patterns need the extended flag."""
        with pytest.raises(InvalidPatternError):
            parse_pattern("rainbow")
        assert parse_pattern("rainbow", extended=True) is Pattern.RAINBOW
        assert parse_pattern("white wave", extended=True) is Pattern.WHITE_WAVE

    def test_extended_flag_does_not_block_base_patterns(self):
        """Base patterns parse with or without the flag."""
        assert parse_pattern("police", extended=True) is Pattern.POLICE

    def test_random_constructor(self):
        """Pattern.random(n) builds the numbered pattern."""
        assert Pattern.random(1) is Pattern.RANDOM_1
        assert Pattern.random(5) is Pattern.RANDOM_5
        with pytest.raises(InvalidPatternError):
            Pattern.random(6)

    def test_extended_property(self):
        """Only the four platform patterns are extended."""
        extended = {p for p in Pattern if p.extended}
        assert extended == {Pattern.RAINBOW, Pattern.SEA, Pattern.WHITE_WAVE, Pattern.SYNTHETIC}

    def test_wave_styles(self):
        """Exactly four wave styles parse."""
        assert len(WaveStyle) == 4
        assert parse_wave_style("short") is WaveStyle.SHORT
        assert parse_wave_style("Overlapping Long") is WaveStyle.OVERLAPPING_LONG

    def test_invalid_wave_style(self):
        """Unknown wave styles raise InvalidPatternError."""
        with pytest.raises(InvalidPatternError):
            parse_wave_style("medium")


@pytest.mark.unit
class TestLedTarget:
    """Test LED target parsing."""

    def test_numbers(self):
        """LED numbers 1-6 parse."""
        assert parse_led_target("3") is LedTarget.LED_3
        assert LedTarget.number(6) is LedTarget.LED_6

    @pytest.mark.parametrize("token", ["0", "7", "left", ""])
    def test_invalid(self, token):
        """Out of range numbers and unknown names are rejected."""
        with pytest.raises(InvalidLEDError):
            parse_led_target(token)

    def test_number_out_of_range(self):
        """number() rejects 0 and 7."""
        with pytest.raises(InvalidLEDError):
            LedTarget.number(0)
        with pytest.raises(InvalidLEDError):
            LedTarget.number(7)

    def test_groups(self):
        """Group names are case-insensitive."""
        assert parse_led_target("ALL") is LedTarget.ALL
        assert parse_led_target("front") is LedTarget.FRONT
        assert parse_led_target("Back") is LedTarget.BACK


@pytest.mark.unit
class TestDeviceId:
    """Test device identifiers."""

    def test_valid_webhook_id(self):
        """Hex strings parse and display unchanged."""
        device_id = parse_device_id("2a0f2c73b72")
        assert isinstance(device_id, WebhookDeviceId)
        assert str(device_id) == "2a0f2c73b72"

    @pytest.mark.parametrize("token", ["", "12g4", "usb", "2a0f 2c"])
    def test_invalid_webhook_id(self, token):
        """Empty or non-hex identifiers are rejected."""
        with pytest.raises(InvalidDeviceIDError):
            parse_device_id(token)

    def test_parse_errors_share_base(self):
        """Every parser failure is a ParseError."""
        for parse, token in [
            (parse_color, "nope"),
            (parse_pattern, "nope"),
            (parse_led_target, "nope"),
            (parse_device_id, "nope"),
        ]:
            with pytest.raises(ParseError):
                parse(token)

    def test_usb_id_display(self):
        """USB identifiers join the descriptor strings."""
        device_id = UsbDeviceId("Microchip", "LUXAFOR FLAG", "<unknown>")
        assert str(device_id) == "Microchip::LUXAFOR FLAG::<unknown>"

    def test_identifiers_are_hashable(self):
        """Identifiers are frozen values."""
        assert len({WebhookDeviceId("ab"), WebhookDeviceId("ab")}) == 1


def mixed_case(values) -> list[str]:
    """Each value's token as written, upper case and title case."""
    return [case for value in values for case in (str(value), str(value).upper(), str(value).title())]


@pytest.mark.unit
class TestFormatInvertsParse:
    """str() of every non-custom value parses back to the same value."""

    @pytest.mark.parametrize("token", mixed_case(NamedColor))
    def test_colors(self, token):
        assert str(parse_color(token)) == token.lower()

    @pytest.mark.parametrize("token", mixed_case(Pattern))
    def test_patterns(self, token):
        pattern = parse_pattern(token, extended=True)
        assert str(pattern) == token.lower()
        assert parse_pattern(str(pattern), extended=True) is pattern

    @pytest.mark.parametrize("pattern", [p for p in Pattern if not p.extended])
    def test_base_patterns_without_flag(self, pattern):
        assert parse_pattern(str(pattern)) is pattern

    @pytest.mark.parametrize("token", mixed_case(WaveStyle))
    def test_wave_styles(self, token):
        style = parse_wave_style(token)
        assert str(style) == token.lower()
        assert parse_wave_style(str(style)) is style

    @pytest.mark.parametrize("token", mixed_case(LedTarget))
    def test_led_targets(self, token):
        target = parse_led_target(token)
        assert str(target) == token.lower()
        assert parse_led_target(str(target)) is target

    def test_every_variant_covered(self):
        assert len(Pattern) == 11
        assert len(LedTarget) == 9
        assert len(WaveStyle) == 4
        assert len(NamedColor) == 7
