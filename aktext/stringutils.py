"""String search, comparison, trimming and conversion helpers."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "CaseSensitivity",
    "TrimMode",
    "TrimWhitespace",
    "SearchDirection",
    "MaskSpan",
    "all_of",
    "any_of",
    "matches",
    "convert_to_int",
    "convert_to_uint",
    "convert_to_uint_from_hex",
    "convert_to_uint_from_octal",
    "equals_ignoring_case",
    "ends_with",
    "starts_with",
    "contains",
    "is_whitespace",
    "trim",
    "trim_whitespace",
    "find",
    "find_last",
    "find_all",
    "find_any_of",
    "to_snakecase",
    "to_titlecase",
    "replace",
    "count",
]

_WHITESPACE = " \n\t\v\f\r"
_DIGITS = "0123456789"


class CaseSensitivity(enum.Enum):
    CASE_INSENSITIVE = enum.auto()
    CASE_SENSITIVE = enum.auto()


class TrimMode(enum.Enum):
    LEFT = enum.auto()
    RIGHT = enum.auto()
    BOTH = enum.auto()


class TrimWhitespace(enum.Enum):
    YES = enum.auto()
    NO = enum.auto()


class SearchDirection(enum.Enum):
    FORWARD = enum.auto()
    BACKWARD = enum.auto()


@dataclass(frozen=True)
class MaskSpan:
    """A part of a string that a wildcard in a mask matched."""

    start: int
    length: int


def all_of(iterable: Iterable[Any], predicate: Callable[[Any], bool]) -> bool:
    """Return True if the predicate holds for every element."""
    return all(predicate(item) for item in iterable)


def any_of(iterable: Iterable[Any], predicate: Callable[[Any], bool]) -> bool:
    """Return True if the predicate holds for at least one element."""
    return any(predicate(item) for item in iterable)


def _ascii_lower(ch: str) -> str:
    return chr(ord(ch) + 0x20) if "A" <= ch <= "Z" else ch


def _ascii_upper(ch: str) -> str:
    return chr(ord(ch) - 0x20) if "a" <= ch <= "z" else ch


def _is_ascii_space(ch: str) -> bool:
    return ch in _WHITESPACE


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def matches(
    string: Optional[str],
    mask: Optional[str],
    case_sensitivity: CaseSensitivity = CaseSensitivity.CASE_INSENSITIVE,
    spans: Optional[list[MaskSpan]] = None,
) -> bool:
    """Match a string against a mask with '*' and '?' wildcards.

    When ``spans`` is given, the parts matched by each wildcard are appended to it.
    """

    def record(start: int, length: int) -> None:
        if spans is not None:
            spans.append(MaskSpan(start, length))

    if string is None or mask is None:
        return string is None and mask is None

    if mask == "*":
        record(0, len(string))
        return True

    str_len = len(string)
    mask_len = len(mask)
    si = 0
    mi = 0
    while si < str_len and mi < mask_len:
        segment_start = si
        wildcard = mask[mi]
        if wildcard == "*":
            if mi == mask_len - 1:
                record(si, str_len - si)
                return True
            rest_of_mask = mask[mi + 1:]
            while si < str_len and not matches(string[si:], rest_of_mask, case_sensitivity):
                si += 1
            record(segment_start, si - segment_start)
            si -= 1
        elif wildcard == "?":
            record(si, 1)
        else:
            ch = string[si]
            if case_sensitivity is CaseSensitivity.CASE_SENSITIVE:
                if wildcard != ch:
                    return False
            elif _ascii_lower(wildcard) != _ascii_lower(ch):
                return False
        si += 1
        mi += 1

    if si == str_len:
        # A trailing '*' may match nothing.
        while mi != mask_len and mask[mi] == "*":
            record(si, 0)
            mi += 1

    return si == str_len and mi == mask_len


def _prepare(string: str, trim_mode: TrimWhitespace) -> str:
    return trim_whitespace(string) if trim_mode is TrimWhitespace.YES else string


def _check_bits(bits: int) -> None:
    if bits <= 0:
        raise ValueError(f"bit width must be positive, got {bits}")


def convert_to_int(
    string: str,
    trim_whitespace: TrimWhitespace = TrimWhitespace.YES,
    bits: int = 32,
) -> Optional[int]:
    """Parse a signed decimal integer of the given width; None on failure or overflow."""
    _check_bits(bits)
    text = _prepare(string, trim_whitespace)
    if not text:
        return None

    lowest = -(1 << (bits - 1))
    highest = (1 << (bits - 1)) - 1

    sign = 1
    digits = text
    if text[0] in "+-":
        if len(text) == 1:
            return None
        if text[0] == "-":
            sign = -1
        digits = text[1:]

    value = 0
    for ch in digits:
        if ch not in _DIGITS:
            return None
        value *= 10
        if not lowest <= value <= highest:
            return None
        value += sign * (ord(ch) - ord("0"))
        if not lowest <= value <= highest:
            return None
    return value


def convert_to_uint(
    string: str,
    trim_whitespace: TrimWhitespace = TrimWhitespace.YES,
    bits: int = 32,
) -> Optional[int]:
    """Parse an unsigned decimal integer of the given width; None on failure or overflow."""
    _check_bits(bits)
    text = _prepare(string, trim_whitespace)
    if not text:
        return None

    highest = (1 << bits) - 1
    value = 0
    for ch in text:
        if ch not in _DIGITS:
            return None
        value = value * 10 + (ord(ch) - ord("0"))
        if value > highest:
            return None
    return value


def _convert_power_of_two(text: str, bits: int, shift: int, digit_of: Callable[[str], Optional[int]]) -> Optional[int]:
    if not text:
        return None
    limit = ((1 << bits) - 1) >> shift
    value = 0
    for ch in text:
        if value > limit:
            return None
        digit = digit_of(ch)
        if digit is None:
            return None
        value = (value << shift) + digit
    return value


def _hex_digit(ch: str) -> Optional[int]:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "f":
        return 10 + ord(ch) - ord("a")
    if "A" <= ch <= "F":
        return 10 + ord(ch) - ord("A")
    return None


def _octal_digit(ch: str) -> Optional[int]:
    if "0" <= ch <= "7":
        return ord(ch) - ord("0")
    return None


def convert_to_uint_from_hex(
    string: str,
    trim_whitespace: TrimWhitespace = TrimWhitespace.YES,
    bits: int = 32,
) -> Optional[int]:
    """Parse an unsigned hexadecimal integer (no prefix); None on failure or overflow."""
    _check_bits(bits)
    return _convert_power_of_two(_prepare(string, trim_whitespace), bits, 4, _hex_digit)


def convert_to_uint_from_octal(
    string: str,
    trim_whitespace: TrimWhitespace = TrimWhitespace.YES,
    bits: int = 32,
) -> Optional[int]:
    """Parse an unsigned octal integer (no prefix); None on failure or overflow."""
    _check_bits(bits)
    return _convert_power_of_two(_prepare(string, trim_whitespace), bits, 3, _octal_digit)


def equals_ignoring_case(a: str, b: str) -> bool:
    """Compare two strings, treating ASCII letters case-insensitively."""
    if len(a) != len(b):
        return False
    return all(_ascii_lower(x) == _ascii_lower(y) for x, y in zip(a, b))


def ends_with(
    string: str,
    end: str,
    case_sensitivity: CaseSensitivity = CaseSensitivity.CASE_SENSITIVE,
) -> bool:
    """Return True if ``string`` ends with ``end``."""
    if not end:
        return True
    if not string or len(end) > len(string):
        return False
    tail = string[len(string) - len(end):]
    if case_sensitivity is CaseSensitivity.CASE_SENSITIVE:
        return tail == end
    return equals_ignoring_case(tail, end)


def starts_with(
    string: str,
    start: str,
    case_sensitivity: CaseSensitivity = CaseSensitivity.CASE_SENSITIVE,
) -> bool:
    """Return True if ``string`` starts with ``start``."""
    if not start:
        return True
    if not string or len(start) > len(string):
        return False
    head = string[:len(start)]
    if case_sensitivity is CaseSensitivity.CASE_SENSITIVE:
        return head == start
    return equals_ignoring_case(head, start)


def contains(
    string: Optional[str],
    needle: Optional[str],
    case_sensitivity: CaseSensitivity = CaseSensitivity.CASE_SENSITIVE,
) -> bool:
    """Return True if ``needle`` occurs in ``string``.

    An empty ``string`` never contains anything, not even an empty needle.
    """
    if string is None or needle is None or not string or len(needle) > len(string):
        return False
    if not needle:
        return True
    if case_sensitivity is CaseSensitivity.CASE_SENSITIVE:
        return needle in string

    length = len(string)
    needle_first = _ascii_lower(needle[0])
    si = 0
    while si < length:
        if _ascii_lower(string[si]) == needle_first:
            ni = 0
            while si + ni < length:
                if _ascii_lower(string[si + ni]) != _ascii_lower(needle[ni]):
                    if ni > 0:
                        si += ni - 1
                    break
                if ni + 1 == len(needle):
                    return True
                ni += 1
        si += 1
    return False


def is_whitespace(string: str) -> bool:
    """Return True if every character is ASCII whitespace (True for an empty string)."""
    return all_of(string, _is_ascii_space)


def trim(string: str, characters: str, mode: TrimMode = TrimMode.BOTH) -> str:
    """Strip any of ``characters`` from the chosen ends of ``string``."""
    start = 0
    length = len(string)

    if mode in (TrimMode.LEFT, TrimMode.BOTH):
        for ch in string:
            if length == 0:
                return ""
            if ch not in characters:
                break
            start += 1
            length -= 1

    if mode in (TrimMode.RIGHT, TrimMode.BOTH):
        # The first character is never examined from the right.
        for ch in reversed(string[1:]):
            if length == 0:
                return ""
            if ch not in characters:
                break
            length -= 1

    return string[start:start + length]


def trim_whitespace(string: str, mode: TrimMode = TrimMode.BOTH) -> str:
    """Strip ASCII whitespace from the chosen ends of ``string``."""
    return trim(string, _WHITESPACE, mode)


def find(haystack: str, needle: str, start: int = 0) -> Optional[int]:
    """Return the index of the first ``needle`` at or after ``start``, or None."""
    if start > len(haystack):
        return None
    index = haystack.find(needle, start)
    return None if index < 0 else index


def find_last(haystack: str, needle: str) -> Optional[int]:
    """Return the index of the last ``needle``, or None."""
    index = haystack.rfind(needle)
    return None if index < 0 else index


def find_all(haystack: str, needle: str) -> list[int]:
    """Return the start of every occurrence of ``needle``, overlapping ones included."""
    positions: list[int] = []
    current = 0
    while current <= len(haystack):
        index = haystack.find(needle, current)
        if index < 0:
            break
        positions.append(index)
        current = index + 1
    return positions


def find_any_of(
    haystack: str,
    needles: str,
    direction: SearchDirection = SearchDirection.FORWARD,
) -> Optional[int]:
    """Return the index of the first (or last) character that is one of ``needles``."""
    if not haystack or not needles:
        return None
    if direction is SearchDirection.FORWARD:
        return next((i for i, ch in enumerate(haystack) if ch in needles), None)
    last = len(haystack) - 1
    return next(
        (last - i for i, ch in enumerate(reversed(haystack)) if ch in needles),
        None,
    )


def to_snakecase(string: str) -> str:
    """Convert CamelCase text to snake_case."""

    def insert_underscore(i: int, ch: str) -> bool:
        if i == 0:
            return False
        previous = string[i - 1]
        if _is_lower(previous) and _is_upper(ch):
            return True
        if i >= len(string) - 1:
            return False
        return _is_upper(ch) and _is_lower(string[i + 1])

    parts = []
    for i, ch in enumerate(string):
        if insert_underscore(i, ch):
            parts.append("_")
        parts.append(_ascii_lower(ch))
    return "".join(parts)


def to_titlecase(string: str) -> str:
    """Upper-case the first letter of each space-separated word, lower-case the rest."""
    parts = []
    next_is_upper = True
    for ch in string:
        parts.append(_ascii_upper(ch) if next_is_upper else _ascii_lower(ch))
        next_is_upper = ch == " "
    return "".join(parts)


def replace(string: str, needle: str, replacement: str, all_occurrences: bool = False) -> str:
    """Replace the first (or every) occurrence of ``needle``.

    Raises ValueError if occurrences to replace overlap.
    """
    if not string:
        return string

    if all_occurrences:
        positions = find_all(string, needle)
        if not positions:
            return string
    else:
        position = find(string, needle)
        if position is None:
            return string
        positions = [position]

    parts = []
    last = 0
    for position in positions:
        if position < last:
            raise ValueError(f"occurrences of {needle!r} overlap in {string!r}")
        parts.append(string[last:position])
        parts.append(replacement)
        last = position + len(needle)
    parts.append(string[last:])
    return "".join(parts)


def count(string: str, needle: str) -> int:
    """Count occurrences of ``needle``, overlapping ones included.

    An empty needle counts as the length of the string.
    """
    if not needle:
        return len(string)
    return sum(1 for i in range(len(string) - len(needle) + 1) if string.startswith(needle, i))