"""A general-purpose cursor over text for hand-written parsers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional, Union

__all__ = [
    "GenericLexer",
    "is_any_of",
    "is_not_any_of",
    "is_path_separator",
    "is_quote",
]

Predicate = Callable[[str], bool]

_DEFAULT_ESCAPE_MAP = "n\nr\rt\tb\bf\f"


def is_any_of(values: str) -> Predicate:
    """Return a predicate that is true for a character that is one of ``values``."""
    return lambda ch: len(ch) == 1 and ch in values


def is_not_any_of(values: str) -> Predicate:
    """Return a predicate that is true for a character that is none of ``values``."""
    return lambda ch: not (len(ch) == 1 and ch in values)


def is_path_separator(char: str) -> bool:
    """Return True for '/' and '\\'."""
    return len(char) == 1 and char in "/\\"


def is_quote(char: str) -> bool:
    """Return True for a single or double quote."""
    return len(char) == 1 and char in "'\""


class GenericLexer:
    """Reads text one piece at a time, keeping track of the position.

    Methods that take a ``stop`` or ``expected`` accept either a string or a
    predicate called with the next character.
    """

    def __init__(self, text: str) -> None:
        self._input = text
        self._index = 0

    def tell(self) -> int:
        """Return the current position."""
        return self._index

    def tell_remaining(self) -> int:
        """Return how many characters are left."""
        return len(self._input) - self._index

    def remaining(self) -> str:
        """Return the unconsumed text."""
        return self._input[self._index:]

    def is_eof(self) -> bool:
        """Return True when everything has been consumed."""
        return self._index >= len(self._input)

    def peek(self, offset: int = 0) -> str:
        """Return the character ``offset`` ahead, or an empty string past the end."""
        index = self._index + offset
        return self._input[index] if index < len(self._input) else ""

    def next_is(self, expected: Union[str, Predicate]) -> bool:
        """Return True if the text ahead starts with ``expected`` or satisfies it."""
        if callable(expected):
            return bool(expected(self.peek()))
        return self._input.startswith(expected, self._index)

    def retreat(self, count: int = 1) -> None:
        """Move back ``count`` characters."""
        if count < 0 or count > self._index:
            raise ValueError(f"cannot retreat {count} characters from position {self._index}")
        self._index -= count

    def consume(self, count: Optional[int] = None) -> str:
        """Consume one character, or up to ``count`` characters when a count is given.

        Consuming a single character at the end of the input raises ValueError.
        """
        if count is None:
            if self.is_eof():
                raise ValueError("unexpected end of input")
            ch = self._input[self._index]
            self._index += 1
            return ch
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        start = self._index
        self._index += min(count, self.tell_remaining())
        return self._input[start:self._index]

    def consume_specific(self, expected: str) -> bool:
        """Consume ``expected`` if the text ahead starts with it."""
        if not self.next_is(expected):
            return False
        self.ignore(len(expected))
        return True

    def consume_escaped_character(self, escape_char: str = "\\", escape_map: str = _DEFAULT_ESCAPE_MAP) -> str:
        """Consume one character, resolving an escape through pairs in ``escape_map``."""
        if not self.consume_specific(escape_char):
            return self.consume()
        ch = self.consume()
        for key, value in zip(escape_map[::2], escape_map[1::2]):
            if ch == key:
                return value
        return ch

    def consume_all(self) -> str:
        """Consume the rest of the input."""
        rest = self.remaining()
        self._index = len(self._input)
        return rest

    def consume_line(self) -> str:
        """Consume up to the end of the line, swallowing a '\\r', '\\n' or '\\r\\n' ending."""
        start = self._index
        while not self.is_eof() and self.peek() not in ("\r", "\n"):
            self._index += 1
        line = self._input[start:self._index]
        self.consume_specific("\r")
        self.consume_specific("\n")
        return line

    def consume_until(self, stop: Union[str, Predicate]) -> str:
        """Consume characters until ``stop`` is next; ``stop`` itself is left in place."""
        start = self._index
        while not self.is_eof() and not self.next_is(stop):
            self._index += 1
        return self._input[start:self._index]

    def consume_while(self, predicate: Predicate) -> str:
        """Consume characters while ``predicate`` holds."""
        start = self._index
        while not self.is_eof() and predicate(self.peek()):
            self._index += 1
        return self._input[start:self._index]

    def consume_quoted_string(self, escape_char: Optional[str] = None) -> str:
        """Consume a single- or double-quoted string and return it without the quotes.

        Escape characters stay in the result. An unterminated string leaves the
        position unchanged and yields an empty string.
        """
        if not self.next_is(is_quote):
            return ""
        quote_char = self.consume()
        start = self._index
        while not self.is_eof():
            if escape_char is not None and self.next_is(escape_char):
                self._index += 1
            elif self.next_is(quote_char):
                break
            self._index += 1
        end = self._index

        if self.peek() != quote_char:
            self._index = start - 1
            return ""

        self.ignore()
        return self._input[start:end]

    def ignore(self, count: int = 1) -> None:
        """Skip up to ``count`` characters."""
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        self._index += min(count, self.tell_remaining())

    def ignore_until(self, stop: Union[str, Predicate]) -> None:
        """Skip to ``stop``; a string stop is skipped too, a predicate's match is not."""
        while not self.is_eof() and not self.next_is(stop):
            self._index += 1
        if not callable(stop):
            self.ignore(len(stop))

    def ignore_while(self, predicate: Predicate) -> None:
        """Skip characters while ``predicate`` holds."""
        while not self.is_eof() and predicate(self.peek()):
            self._index += 1