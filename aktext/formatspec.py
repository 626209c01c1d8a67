"""Parsing of format strings and of the standard format specification."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from aktext.formatbuilder import Align, SignMode

__all__ = [
    "FormatError",
    "FormatSpecifier",
    "FormatParser",
    "FormatParams",
    "Mode",
    "StandardFormatter",
]


class FormatError(ValueError):
    """Raised for a malformed format string or an unusable argument."""


@dataclass(frozen=True)
class FormatSpecifier:
    """A replacement field: the argument index (None for "next") and its flags."""

    index: Optional[int]
    flags: str = ""


class FormatParser:
    """A cursor over a format string or over the flags of one field."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def is_eof(self) -> bool:
        """Return True when all input has been consumed."""
        return self._pos >= len(self._text)

    def peek(self, offset: int = 0) -> str:
        """Return the character ``offset`` ahead, or an empty string past the end."""
        index = self._pos + offset
        return self._text[index] if index < len(self._text) else ""

    def remaining(self) -> str:
        """Return the unconsumed input."""
        return self._text[self._pos:]

    def _next_is(self, expected: str) -> bool:
        return self._text.startswith(expected, self._pos)

    def _consume_specific(self, expected: str) -> bool:
        if not self._next_is(expected):
            return False
        self._pos += len(expected)
        return True

    def _consume(self) -> str:
        if self.is_eof():
            raise FormatError("unexpected end of format string")
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def consume_literal(self) -> str:
        """Consume text up to the next field; doubled braces are kept as they are."""
        begin = self._pos
        while not self.is_eof():
            if self._consume_specific("{{") or self._consume_specific("}}"):
                continue
            if self.peek() in ("{", "}"):
                return self._text[begin:self._pos]
            self._pos += 1
        return self._text[begin:]

    def consume_number(self) -> Optional[int]:
        """Consume a run of decimal digits; None if there is none."""
        begin = self._pos
        while self.peek() and self.peek() in "0123456789":
            self._pos += 1
        if self._pos == begin:
            return None
        return int(self._text[begin:self._pos])

    def consume_specifier(self) -> Optional[FormatSpecifier]:
        """Consume a ``{index:flags}`` field; None if the input does not start with one."""
        if self.peek() == "}":
            raise FormatError(f"unmatched '}}' at offset {self._pos}")
        if not self._consume_specific("{"):
            return None

        index = self.consume_number()

        if self._consume_specific(":"):
            begin = self._pos
            level = 1
            while level > 0:
                if self.is_eof():
                    raise FormatError("unterminated replacement field")
                if self._consume_specific("{"):
                    level += 1
                elif self._consume_specific("}"):
                    level -= 1
                else:
                    self._pos += 1
            return FormatSpecifier(index, self._text[begin:self._pos - 1])

        if not self._consume_specific("}"):
            raise FormatError(f"expected '}}' at offset {self._pos}")
        return FormatSpecifier(index, "")

    def consume_replacement_field(self) -> Optional[FormatSpecifier]:
        """Consume a nested ``{index}`` field; None if the input does not start with one."""
        if not self._consume_specific("{"):
            return None
        index = self.consume_number()
        if not self._consume_specific("}"):
            raise FormatError(f"expected '}}' at offset {self._pos}")
        return FormatSpecifier(index, "")


class FormatParams:
    """The arguments of one formatting call and the automatic index counter."""

    def __init__(self, *args: Any) -> None:
        self.parameters: tuple[Any, ...] = args
        self._next_index = 0

    def take_next_index(self) -> int:
        """Return the next automatic argument index and advance the counter."""
        index = self._next_index
        self._next_index += 1
        return index

    def parameter(self, index: int) -> Any:
        """Return the argument at ``index``."""
        if not 0 <= index < len(self.parameters):
            raise FormatError(f"no argument at index {index} (have {len(self.parameters)})")
        return self.parameters[index]

    def size_at(self, index: int) -> int:
        """Return the argument at ``index`` as a width or precision."""
        value = self.parameter(index)
        if isinstance(value, bool) or not isinstance(value, int):
            raise FormatError(f"argument {index} is not an integer: {value!r}")
        if value < 0:
            raise FormatError(f"argument {index} is negative: {value}")
        return value


class Mode(enum.Enum):
    DEFAULT = enum.auto()
    BINARY = enum.auto()
    BINARY_UPPERCASE = enum.auto()
    DECIMAL = enum.auto()
    OCTAL = enum.auto()
    HEXADECIMAL = enum.auto()
    HEXADECIMAL_UPPERCASE = enum.auto()
    CHARACTER = enum.auto()
    STRING = enum.auto()
    POINTER = enum.auto()
    FLOAT = enum.auto()
    HEXFLOAT = enum.auto()
    HEXFLOAT_UPPERCASE = enum.auto()
    HEX_DUMP = enum.auto()


_MODE_CODES = (
    ("b", Mode.BINARY),
    ("B", Mode.BINARY_UPPERCASE),
    ("d", Mode.DECIMAL),
    ("o", Mode.OCTAL),
    ("x", Mode.HEXADECIMAL),
    ("X", Mode.HEXADECIMAL_UPPERCASE),
    ("c", Mode.CHARACTER),
    ("s", Mode.STRING),
    ("p", Mode.POINTER),
    ("f", Mode.FLOAT),
    ("a", Mode.HEXFLOAT),
    ("A", Mode.HEXFLOAT_UPPERCASE),
    ("hex-dump", Mode.HEX_DUMP),
)

_ALIGN_CODES = (("<", Align.LEFT), ("^", Align.CENTER), (">", Align.RIGHT))
_SIGN_CODES = (("-", SignMode.ONLY_IF_NEEDED), ("+", SignMode.ALWAYS), (" ", SignMode.RESERVED))


@dataclass
class StandardFormatter:
    """The options of a standard specification: [[fill]align][sign][#][0][width][.precision][mode]."""

    align: Align = Align.DEFAULT
    sign_mode: SignMode = SignMode.ONLY_IF_NEEDED
    mode: Mode = Mode.DEFAULT
    alternative_form: bool = False
    fill: str = " "
    zero_pad: bool = False
    width: Optional[int] = None
    precision: Optional[int] = None

    @staticmethod
    def _size(params: FormatParams, field: FormatSpecifier) -> int:
        index = params.take_next_index() if field.index is None else field.index
        return params.size_at(index)

    def parse(self, params: FormatParams, parser: FormatParser) -> None:
        """Read the specification from ``parser``, taking nested widths from ``params``."""
        after = parser.peek(1)
        if after and after in "<^>":
            if parser.peek() in ("{", "}"):
                raise FormatError("a brace cannot be used as fill character")
            self.fill = parser._consume()

        for code, align in _ALIGN_CODES:
            if parser._consume_specific(code):
                self.align = align
                break

        for code, sign_mode in _SIGN_CODES:
            if parser._consume_specific(code):
                self.sign_mode = sign_mode
                break

        if parser._consume_specific("#"):
            self.alternative_form = True

        if parser._consume_specific("0"):
            self.zero_pad = True

        field = parser.consume_replacement_field()
        if field is not None:
            self.width = self._size(params, field)
        else:
            width = parser.consume_number()
            if width is not None:
                self.width = width

        if parser._consume_specific("."):
            field = parser.consume_replacement_field()
            if field is not None:
                self.precision = self._size(params, field)
            else:
                precision = parser.consume_number()
                if precision is not None:
                    self.precision = precision

        for code, mode in _MODE_CODES:
            if parser._consume_specific(code):
                self.mode = mode
                break

        if not parser.is_eof():
            raise FormatError(f"unexpected {parser.remaining()!r} in format specification")