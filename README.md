# aktext

A small, dependency-free text toolkit.

- **`aktext.stringutils`**: glob-style `matches` with `*` and `?`, which can
  also record a `MaskSpan` for each wildcard. It has strict integer parsing
  with a chosen bit width (`convert_to_int`, `convert_to_uint`,
  `convert_to_uint_from_hex`, `convert_to_uint_from_octal`). These return
  `None` when the input does not parse or overflows. The module also covers
  searching (`find`, `find_last`, `find_all`, `find_any_of`), case-aware
  comparison (`starts_with`, `ends_with`, `contains`, `equals_ignoring_case`),
  trimming (`trim`, `trim_whitespace`), `replace`, `count`, `to_snakecase` and
  `to_titlecase`. The enums `CaseSensitivity`, `TrimMode`, `TrimWhitespace`
  and `SearchDirection` select the behaviour.
- **`aktext.formatbuilder`**: `FormatBuilder` collects rendered output. Its
  methods are:
  - `put_string`, which truncates and pads with `Align` left, center or right;
  - `put_u64` and `put_i64`, which render in bases 2 to 16 with a sign
    (`SignMode`), a base prefix and zero padding;
  - `put_fixed_point`, `put_f64` and `put_f80`;
  - `put_hexdump` and `put_literal`.

  `convert_unsigned_to_string` renders a bare number in a base.
- **`aktext.formatspec`**: parsing for brace-style format strings.
  - `FormatParser` splits a string into literals and `{index:flags}` fields
    (`FormatSpecifier`).
  - `StandardFormatter.parse` reads a `[[fill]align][sign][#][0][width][.precision][mode]`
    specification. A width or precision may come from an argument held in
    `FormatParams`.
  - `Mode` lists the presentation modes (`b B d o x X c s p f a A hex-dump`).
  - Malformed input raises `FormatError`.
- **`aktext.lexer`**: `GenericLexer`, a character cursor. It offers `peek`,
  `next_is`, `consume`, `consume_specific`, `consume_until`, `consume_while`,
  `consume_line`, `consume_quoted_string`, `consume_escaped_character` and the
  `ignore_*` methods. The predicates `is_any_of`, `is_not_any_of`,
  `is_path_separator` and `is_quote` go with it.
- **`aktext.numerals`**: `bijective_base_from` gives spreadsheet-style column
  names. `roman_number_from` gives Roman numerals, with values above 3999 in
  decimal. `escape_html_entities` escapes HTML entities.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from aktext.stringutils import matches, convert_to_int, to_snakecase
from aktext.numerals import bijective_base_from, roman_number_from
from aktext.formatbuilder import FormatBuilder
from aktext.formatspec import FormatParams, FormatParser, StandardFormatter, Mode
from aktext.lexer import GenericLexer

matches("hello.txt", "*.TXT")     # True (case-insensitive by default)
convert_to_int("  -42 ")          # -42
convert_to_int("300", bits=8)     # None (overflow)
to_snakecase("fooBarBaz")         # 'foo_bar_baz'
bijective_base_from(26)           # 'AA'
roman_number_from(1994)           # 'MCMXCIV'

b = FormatBuilder()
b.put_u64(32, 16, prefix=True, zero_pad=True, min_width=8)
str(b)                            # '0x00000020'

spec = StandardFormatter()
spec.parse(FormatParams(), FormatParser("*^10.3x"))
spec.fill, spec.width, spec.precision, spec.mode is Mode.HEXADECIMAL
# ('*', 10, 3, True)

lexer = GenericLexer("key = value")
lexer.consume_until("=")          # 'key '
```

## What it does not do

The package parses format strings and specifications, and it renders numbers,
strings and floats through `FormatBuilder`. It has no single call that takes
a format string and arguments and returns the finished text. Matching each
field's `StandardFormatter` options to a value and to the matching
`FormatBuilder` method is left to the caller.

The package also has no printing helpers, no string-builder class and no
dedicated string type. Its functions work on plain `str`.