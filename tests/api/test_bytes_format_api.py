import itertools

import numpy as np
import pytest

import bytesfmt
from bytesfmt import (
    BytesFormatter,
    ByteValueError,
    FormatParseError,
    OptionRangeError,
    OptionTypeError,
    UnprefixedError,
    format_bytes,
    parse_bytes,
)

SAMPLE = bytes([255, 254, 253, 252, 0, 1, 2, 3])
BINARY = "1111111111111110111111011111110000000000000000010000001000000011"


@pytest.mark.parametrize(
    "options, expected",
    [
        (None, "FFFEFDFC00010203"),
        ({"radix": 16}, "FFFEFDFC00010203"),
        ({"radix": 10}, "255254253252000001002003"),
        ({"radix": 8}, "377376375374000001002003"),
        ({"radix": 2}, BINARY),
        ({"lower_case": True}, "fffefdfc00010203"),
        ({"min_integral_digits": 3}, "0FF0FE0FD0FC000001002003"),
        ({"min_integral_digits": 4}, "00FF00FE00FD00FC0000000100020003"),
        ({"prefix": "x"}, "xFFxFExFDxFCx00x01x02x03"),
        ({"suffix": "x"}, "FFxFExFDxFCx00x01x02x03x"),
        ({"separator": "  "}, "FF  FE  FD  FC  00  01  02  03"),
    ],
)
def test_format_and_parse_known_outputs(options, expected):
    assert format_bytes(SAMPLE, options) == expected
    assert parse_bytes(expected, options) == SAMPLE


@pytest.mark.parametrize("options", [None, {"radix": 10}, {"prefix": "x"}, {"separator": "  "}])
def test_empty_input(options):
    assert format_bytes(b"", options) == ""
    assert parse_bytes("", options) == b""


def test_parse_accepts_lower_case_regardless_of_option():
    assert parse_bytes("fffefdfc00010203") == SAMPLE
    assert parse_bytes("FFFEFDFC00010203", {"lower_case": True}) == SAMPLE


def test_round_trip_over_option_combinations():
    data = bytes(range(256))
    radixes = (2, 8, 10, 16)
    extra_digits = (0, 2)
    affixes = ("", "0x", "[")
    separators = ("", " ", "::")
    for radix, extra, prefix, suffix, separator in itertools.product(
        radixes, extra_digits, affixes, affixes, separators
    ):
        options = {
            "radix": radix,
            "min_integral_digits": bytesfmt.min_digits_for_radix(radix) + extra,
            "prefix": prefix,
            "suffix": suffix,
            "separator": separator,
            "lower_case": radix == 16 and extra == 2,
        }
        assert parse_bytes(format_bytes(data, options), options) == data, options


def test_malformed_digits_reported():
    with pytest.raises(FormatParseError, match="parse error: 1F"):
        parse_bytes("0311F", {"radix": 10})


def test_unprefixed_input_reported():
    with pytest.raises(UnprefixedError, match="unprefixed"):
        parse_bytes("xFFyFE", {"prefix": "x"})


def test_strict_options_are_the_default():
    with pytest.raises(OptionRangeError):
        format_bytes(SAMPLE, {"min_integral_digits": 1})
    with pytest.raises(OptionTypeError):
        parse_bytes("", {"radix": 15})


def test_permissive_mode_falls_back():
    assert format_bytes(SAMPLE, {"min_integral_digits": 1}, strict=False) == "FFFEFDFC00010203"
    assert format_bytes(SAMPLE, {"radix": 15}, strict=False) == "FFFEFDFC00010203"
    assert parse_bytes("FF00", {"radix": "16", "min_integral_digits": 1.5}, strict=False) == b"\xff\x00"


def test_format_accepts_sequences_and_arrays():
    assert format_bytes([1, 2, 255]) == "0102FF"
    assert format_bytes(bytearray(b"\x10")) == "10"
    assert format_bytes(memoryview(b"\x10\x20")) == "1020"
    assert format_bytes(np.array([1, 2, 255], dtype=np.uint8)) == "0102FF"
    assert format_bytes(np.array([[1, 2], [3, 4]], dtype=np.int64)) == "01020304"


@pytest.mark.parametrize(
    "data",
    [
        [256],
        [-1],
        "FF",
        12,
        np.array([1.0, 2.0]),
        np.array([0, 300], dtype=np.int32),
    ],
)
def test_format_rejects_non_byte_data(data):
    with pytest.raises(ByteValueError):
        format_bytes(data)


def test_parse_requires_text():
    with pytest.raises(TypeError):
        parse_bytes(b"FF")  # type: ignore[arg-type]


def test_package_level_aliases():
    assert bytesfmt.format(SAMPLE, {"radix": 8}) == "377376375374000001002003"
    assert bytesfmt.parse("377376375374000001002003", {"radix": 8}) == SAMPLE


def test_bytes_formatter_reuses_options():
    formatter = BytesFormatter({"prefix": "0x", "separator": ", ", "lower_case": True})
    assert formatter.unit_width == 4
    text = formatter.format(SAMPLE)
    assert text == "0xff, 0xfe, 0xfd, 0xfc, 0x00, 0x01, 0x02, 0x03"
    assert formatter.parse(text) == SAMPLE
    assert "BytesFormatter(" in repr(formatter)


def test_bytes_formatter_strictness():
    with pytest.raises(OptionRangeError):
        BytesFormatter({"radix": 2, "min_integral_digits": 4})
    assert BytesFormatter({"radix": 2, "min_integral_digits": 4}, strict=False).options.min_integral_digits == 8


@pytest.mark.parametrize("data", [[True, False], (1, np.bool_(True)), 1.5])
def test_format_rejects_bools_and_non_iterables(data):
    with pytest.raises(ByteValueError):
        format_bytes(data)
