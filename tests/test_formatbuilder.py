import math

import pytest

from aktext.formatbuilder import Align, FormatBuilder, SignMode, convert_unsigned_to_string


def build(method, *args, **kwargs):
    builder = FormatBuilder()
    getattr(builder, method)(*args, **kwargs)
    return str(builder)


@pytest.mark.parametrize("base", range(2, 17))
@pytest.mark.parametrize("value", [0, 1, 7, 255, 1000, 2**63, 2**64 - 1])
def test_convert_round_trip(base, value):
    text = convert_unsigned_to_string(value, base)
    assert int(text, base) == value
    assert convert_unsigned_to_string(value, base, True) == text.upper()


def test_convert_zero_is_single_digit():
    assert convert_unsigned_to_string(0, 16) == "0"


@pytest.mark.parametrize("base", [0, 1, 17, 36])
def test_convert_rejects_bad_base(base):
    with pytest.raises(ValueError):
        convert_unsigned_to_string(5, base)


def test_convert_rejects_negative():
    with pytest.raises(ValueError):
        convert_unsigned_to_string(-1, 10)


def test_append_and_padding():
    builder = FormatBuilder()
    builder.append("ab")
    builder.put_padding("*", 3)
    assert str(builder) == "ab" + "*" * 3


def test_put_literal_collapses_braces():
    assert build("put_literal", "{{x}}") == "{x}"
    assert build("put_literal", "plain") == "plain"


@pytest.mark.parametrize("align", [Align.LEFT, Align.DEFAULT, Align.CENTER, Align.RIGHT])
def test_put_string_width(align):
    text = build("put_string", "abc", align, 8, None, "*")
    assert len(text) == 8
    assert text.strip("*") == "abc"


def test_put_string_alignment_positions():
    assert build("put_string", "abc", Align.LEFT, 6, None, "*").startswith("abc")
    assert build("put_string", "abc", Align.RIGHT, 6, None, "*").endswith("abc")
    centered = build("put_string", "abc", Align.CENTER, 6, None, "*")
    left, right = centered.split("abc")
    assert len(left) == 1 and len(right) == 2


def test_put_string_truncates():
    assert build("put_string", "abcdef", Align.LEFT, 0, 2) == "ab"
    assert build("put_string", "abcdef", Align.LEFT, 3) == "abcdef"


def test_put_u64_zero_padded_hex_prefix_not_counted():
    assert build("put_u64", 32, 16, True, False, True, Align.RIGHT, 8) == "0x00000020"


def test_put_u64_prefixes():
    binary = build("put_u64", 5, 2, True)
    assert binary.startswith("0b") and int(binary, 0) == 5
    upper = build("put_u64", 255, 16, True, True)
    assert upper.startswith("0X") and int(upper, 16) == 255
    octal = build("put_u64", 8, 8, True)
    assert octal.startswith("0") and int(octal, 8) == 8


def test_put_u64_sign_modes():
    assert build("put_u64", 7, sign_mode=SignMode.ALWAYS).startswith("+")
    assert build("put_u64", 7, sign_mode=SignMode.RESERVED).startswith(" ")
    assert int(build("put_u64", 7, sign_mode=SignMode.DEFAULT)) == 7


def test_put_u64_width_and_alignment():
    right = build("put_u64", 42, min_width=6, fill="_")
    assert len(right) == 6 and right.endswith("42") and right.strip("_") == "42"
    left = build("put_u64", 42, align=Align.LEFT, min_width=6, fill="_")
    assert left.startswith("42") and len(left) == 6
    center = build("put_u64", 42, align=Align.CENTER, min_width=7, fill="_")
    before, after = center.split("42")
    assert len(before) == 2 and len(after) == 3


def test_put_u64_rejects_negative():
    with pytest.raises(ValueError):
        build("put_u64", -3)


@pytest.mark.parametrize("value", [-1, -42, 0, 17, -(2**63)])
def test_put_i64_round_trip(value):
    assert int(build("put_i64", value)) == value
    assert int(build("put_i64", value, zero_pad=True, min_width=5)) == value


def test_put_i64_negative_sign_first_with_zero_pad():
    text = build("put_i64", -5, zero_pad=True, min_width=4)
    assert text.startswith("-")
    assert len(text) == 5


@pytest.mark.parametrize("integer,fraction,one,expected", [(3, 1, 2, 3.5), (3, 1, 4, 3.25), (3, 0, 4, 3.0)])
def test_put_fixed_point_values(integer, fraction, one, expected):
    assert float(build("put_fixed_point", integer, fraction, one)) == expected


def test_put_fixed_point_zero_pad_fills_precision():
    text = build("put_fixed_point", 1, 1, 2, zero_pad=True, precision=4)
    assert float(text) == 1.5
    assert len(text.split(".")[1]) == 4


def test_put_fixed_point_whole_has_no_dot():
    assert "." not in build("put_fixed_point", 9, 0, 256)


@pytest.mark.parametrize("value", [1.5, 2.25, -2.5, 0.125, 100.0])
def test_put_f64_values(value):
    assert float(build("put_f64", value)) == value


def test_put_f64_zero_pad_and_width():
    text = build("put_f64", 3.0, zero_pad=True, precision=2)
    assert float(text) == 3.0 and len(text.split(".")[1]) == 2
    assert "." not in build("put_f64", 3.0)
    assert len(build("put_f64", 1.5, min_width=10)) == 10


def test_put_f64_non_finite():
    assert build("put_f64", math.nan) == "nan"
    assert build("put_f64", math.inf, upper_case=True) == "INF"
    assert build("put_f64", -math.inf) == "-inf"
    assert build("put_f64", math.nan, upper_case=True) == "NAN"
    assert build("put_f64", math.inf, sign_mode=SignMode.ALWAYS) == "+inf"


@pytest.mark.parametrize("value", [0.25, -7.75, 12.0])
def test_put_f80_values(value):
    assert float(build("put_f80", value)) == value


def test_put_f80_non_finite():
    assert build("put_f80", -math.inf) == "-inf"


def test_put_hexdump_without_width_round_trips():
    data = bytes(range(0, 256, 17))
    assert bytes.fromhex(build("put_hexdump", data, 0)) == data


def test_put_hexdump_rows():
    text = build("put_hexdump", b"ABCD", 2)
    rows = text.split("\n")
    assert len(rows) == 2
    assert rows[0].endswith(" " * 4 + "AB")
    assert rows[1].endswith(" " * 4 + "CD")
    assert bytes.fromhex(rows[0].split()[0]) == b"AB"


def test_put_hexdump_non_printable_shown_as_dot():
    text = build("put_hexdump", b"\x01\xff", 2, "-")
    assert text.endswith("-" * 4 + "..")
    assert bytes.fromhex(text[:4]) == b"\x01\xff"


def test_put_hexdump_partial_row_has_no_text():
    text = build("put_hexdump", b"ABC", 2)
    assert "\n" in text
    assert text.split("\n")[1] == "43"