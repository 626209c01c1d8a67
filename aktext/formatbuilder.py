"""Low-level output primitives used by the formatter: padding, numbers, floats, hex dumps."""

from __future__ import annotations

import enum
import math
from typing import Optional, Union

__all__ = [
    "Align",
    "SignMode",
    "FormatBuilder",
    "convert_unsigned_to_string",
]

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


class Align(enum.Enum):
    DEFAULT = enum.auto()
    LEFT = enum.auto()
    CENTER = enum.auto()
    RIGHT = enum.auto()


class SignMode(enum.Enum):
    ONLY_IF_NEEDED = enum.auto()
    ALWAYS = enum.auto()
    RESERVED = enum.auto()
    DEFAULT = ONLY_IF_NEEDED


def convert_unsigned_to_string(value: int, base: int = 10, upper_case: bool = False) -> str:
    """Render a non-negative integer in a base between 2 and 16."""
    if not 2 <= base <= 16:
        raise ValueError(f"base must be between 2 and 16, got {base}")
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    if value == 0:
        return "0"
    table = _UPPER_DIGITS if upper_case else _LOWER_DIGITS
    digits = []
    while value > 0:
        value, digit = divmod(value, base)
        digits.append(table[digit])
    return "".join(reversed(digits))


def _split_padding(amount: int) -> tuple[int, int]:
    return amount // 2, (amount + 1) // 2


class FormatBuilder:
    """Accumulates formatted text."""

    def __init__(self) -> None:
        self._parts: list[str] = []

    def __str__(self) -> str:
        return "".join(self._parts)

    def append(self, text: str) -> None:
        """Append text verbatim."""
        self._parts.append(text)

    def put_padding(self, fill: str, amount: int) -> None:
        """Append ``amount`` copies of ``fill``."""
        if amount > 0:
            self._parts.append(fill * amount)

    def put_literal(self, value: str) -> None:
        """Append literal text, collapsing doubled braces into single ones."""
        chars = iter(value)
        for ch in chars:
            self._parts.append(ch)
            if ch in "{}":
                next(chars, None)

    def put_string(
        self,
        value: str,
        align: Align = Align.LEFT,
        min_width: int = 0,
        max_width: Optional[int] = None,
        fill: str = " ",
    ) -> None:
        """Append a string truncated to ``max_width`` and padded to ``min_width``."""
        used_by_string = len(value) if max_width is None else min(max_width, len(value))
        used_by_padding = max(min_width, used_by_string) - used_by_string
        value = value[:used_by_string]

        if align in (Align.LEFT, Align.DEFAULT):
            self.append(value)
            self.put_padding(fill, used_by_padding)
        elif align is Align.CENTER:
            left, right = _split_padding(used_by_padding)
            self.put_padding(fill, left)
            self.append(value)
            self.put_padding(fill, right)
        elif align is Align.RIGHT:
            self.put_padding(fill, used_by_padding)
            self.append(value)

    def put_u64(
        self,
        value: int,
        base: int = 10,
        prefix: bool = False,
        upper_case: bool = False,
        zero_pad: bool = False,
        align: Align = Align.RIGHT,
        min_width: int = 0,
        fill: str = " ",
        sign_mode: SignMode = SignMode.ONLY_IF_NEEDED,
        is_negative: bool = False,
    ) -> None:
        """Append an unsigned integer with optional sign, base prefix and padding."""
        if align is Align.DEFAULT:
            align = Align.RIGHT

        digits = convert_unsigned_to_string(value, base, upper_case)

        used_by_prefix = 0
        # With right alignment and zero padding the sign and prefix do not
        # count towards the width, so "{:#08x}" of 32 gives eight digits.
        if not (align is Align.RIGHT and zero_pad):
            if is_negative or sign_mode is not SignMode.ONLY_IF_NEEDED:
                used_by_prefix += 1
            if prefix:
                used_by_prefix += {8: 1, 16: 2, 2: 2}.get(base, 0)

        used_by_field = used_by_prefix + len(digits)
        used_by_padding = max(used_by_field, min_width) - used_by_field

        sign = ""
        if is_negative:
            sign = "-"
        elif sign_mode is SignMode.ALWAYS:
            sign = "+"
        elif sign_mode is SignMode.RESERVED:
            sign = " "

        base_prefix = ""
        if prefix:
            if base == 2:
                base_prefix = "0B" if upper_case else "0b"
            elif base == 8:
                base_prefix = "0"
            elif base == 16:
                base_prefix = "0X" if upper_case else "0x"
        lead = sign + base_prefix

        if align is Align.LEFT:
            self.append(lead + digits)
            self.put_padding(fill, used_by_padding)
        elif align is Align.CENTER:
            left, right = _split_padding(used_by_padding)
            self.put_padding(fill, left)
            self.append(lead + digits)
            self.put_padding(fill, right)
        elif zero_pad:
            self.append(lead)
            self.put_padding("0", used_by_padding)
            self.append(digits)
        else:
            self.put_padding(fill, used_by_padding)
            self.append(lead + digits)

    def put_i64(
        self,
        value: int,
        base: int = 10,
        prefix: bool = False,
        upper_case: bool = False,
        zero_pad: bool = False,
        align: Align = Align.RIGHT,
        min_width: int = 0,
        fill: str = " ",
        sign_mode: SignMode = SignMode.ONLY_IF_NEEDED,
    ) -> None:
        """Append a signed integer."""
        is_negative = value < 0
        self.put_u64(
            abs(value), base, prefix, upper_case, zero_pad, align, min_width, fill, sign_mode, is_negative
        )

    def put_fixed_point(
        self,
        integer_value: int,
        fraction_value: int,
        fraction_one: int,
        base: int = 10,
        upper_case: bool = False,
        zero_pad: bool = False,
        align: Align = Align.RIGHT,
        min_width: int = 0,
        precision: int = 6,
        fill: str = " ",
        sign_mode: SignMode = SignMode.ONLY_IF_NEEDED,
    ) -> None:
        """Append a fixed-point number given as integer part and fraction over ``fraction_one``."""
        inner = FormatBuilder()
        is_negative = integer_value < 0
        inner.put_u64(abs(integer_value), base, False, upper_case, False, Align.RIGHT, 0, " ", sign_mode, is_negative)

        if precision > 0:
            scale = 10 ** precision
            fraction = (scale * fraction_value) // fraction_one
            if is_negative:
                fraction = scale - fraction
            while fraction != 0 and fraction % 10 == 0:
                fraction //= 10

            visible_precision = 0
            remaining = fraction
            while visible_precision < precision and remaining != 0:
                remaining //= 10
                visible_precision += 1

            if zero_pad or visible_precision > 0:
                inner.append(".")
            if visible_precision > 0:
                inner.put_u64(fraction, base, False, upper_case, True, Align.RIGHT, visible_precision)
            if zero_pad and precision - visible_precision > 0:
                inner.put_u64(0, base, False, False, True, Align.RIGHT, precision - visible_precision)

        self.put_string(str(inner), align, min_width, None, fill)

    def _put_non_finite(
        self, value: float, upper_case: bool, align: Align, min_width: int, fill: str, sign_mode: SignMode
    ) -> None:
        text = ""
        if value < 0.0:
            text = "-"
        elif sign_mode is SignMode.ALWAYS:
            text = "+"
        elif sign_mode is SignMode.RESERVED:
            text = " "
        if math.isnan(value):
            text += "NAN" if upper_case else "nan"
        else:
            text += "INF" if upper_case else "inf"
        self.put_string(text, align, min_width, None, fill)

    @staticmethod
    def _fraction_digits(value: float, precision: int) -> tuple[int, int]:
        """Return the scaled fraction and how many of its digits are visible."""
        value -= int(value)
        epsilon = 0.5
        for _ in range(precision):
            epsilon /= 10.0

        visible_precision = 0
        while visible_precision < precision:
            if value - int(value) < epsilon:
                break
            value *= 10.0
            epsilon *= 10.0
            visible_precision += 1
        return int(value), visible_precision

    def put_f64(
        self,
        value: float,
        base: int = 10,
        upper_case: bool = False,
        zero_pad: bool = False,
        align: Align = Align.RIGHT,
        min_width: int = 0,
        precision: int = 6,
        fill: str = " ",
        sign_mode: SignMode = SignMode.ONLY_IF_NEEDED,
    ) -> None:
        """Append a floating-point number, trimming trailing zeros unless ``zero_pad``."""
        if math.isnan(value) or math.isinf(value):
            self._put_non_finite(value, upper_case, align, min_width, fill, sign_mode)
            return

        inner = FormatBuilder()
        is_negative = value < 0.0
        if is_negative:
            value = -value
        inner.put_u64(int(value), base, False, upper_case, False, Align.RIGHT, 0, " ", sign_mode, is_negative)

        if precision > 0:
            fraction, visible_precision = self._fraction_digits(value, precision)
            if zero_pad or visible_precision > 0:
                inner.append(".")
            if visible_precision > 0:
                inner.put_u64(fraction, base, False, upper_case, True, Align.RIGHT, visible_precision)
            if zero_pad and precision - visible_precision > 0:
                inner.put_u64(0, base, False, False, True, Align.RIGHT, precision - visible_precision)

        self.put_string(str(inner), align, min_width, None, fill)

    def put_f80(
        self,
        value: float,
        base: int = 10,
        upper_case: bool = False,
        align: Align = Align.RIGHT,
        min_width: int = 0,
        precision: int = 6,
        fill: str = " ",
        sign_mode: SignMode = SignMode.ONLY_IF_NEEDED,
    ) -> None:
        """Append an extended-precision float; trailing zeros are always trimmed."""
        if math.isnan(value) or math.isinf(value):
            self._put_non_finite(value, upper_case, align, min_width, fill, sign_mode)
            return

        inner = FormatBuilder()
        is_negative = value < 0.0
        if is_negative:
            value = -value
        inner.put_u64(int(value), base, False, upper_case, False, Align.RIGHT, 0, " ", sign_mode, is_negative)

        if precision > 0:
            fraction, visible_precision = self._fraction_digits(value, precision)
            if visible_precision > 0:
                inner.append(".")
                inner.put_u64(fraction, base, False, upper_case, True, Align.RIGHT, visible_precision)

        self.put_string(str(inner), align, min_width, None, fill)

    def put_hexdump(self, data: Union[bytes, bytearray, memoryview, str], width: int, fill: str = " ") -> None:
        """Append bytes as hex pairs; with a width, each full row is followed by its printable text."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        data = bytes(data)

        def put_char_view(end: int) -> None:
            self.put_padding(fill, 4)
            self.append("".join(chr(b) if 32 <= b <= 127 else "." for b in data[end - width:end]))

        for i, byte in enumerate(data):
            if width > 0 and i and i % width == 0:
                put_char_view(i)
                self.put_literal("\n")
            self.put_u64(byte, 16, False, False, True, Align.RIGHT, 2)

        if width > 0 and data and len(data) % width == 0:
            put_char_view(len(data))