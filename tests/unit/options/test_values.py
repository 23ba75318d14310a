from __future__ import annotations

import pytest

from rdsdec.options.config import InputType, OutputType
from rdsdec.options.values import (
    INPUT_KINDS,
    OUTPUT_KINDS,
    format_rate,
    leading_float,
    leading_int,
    magnitude_factor,
    parse_magnitude,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("200k", 200000.0),
        ("200K", 200000.0),
        ("1.2M", 1200000.0),
        ("1.2m", 1200000.0),
        ("250000", 250000.0),
        ("171000.0", 171000.0),
        ("2.5e5", 250000.0),
    ],
)
def test_parse_magnitude(text: str, expected: float):
    assert parse_magnitude(text) == expected


def test_parse_magnitude_single_char_has_no_suffix():
    # "k" alone is not a suffix, and has no numeric prefix either
    assert magnitude_factor("k") == 1.0
    assert parse_magnitude("k") == 0.0
    assert parse_magnitude("8") == 8.0


def test_parse_magnitude_unknown_suffix_is_ignored():
    assert magnitude_factor("48x") == 1.0
    assert parse_magnitude("48x") == 48.0


def test_parse_magnitude_rounds_to_single_precision():
    # 171000.1 is not representable in float32
    assert parse_magnitude("171000.1") == 171000.09375


def test_parse_magnitude_returns_python_float():
    assert type(parse_magnitude("200k")) is float


@pytest.mark.parametrize(
    "text, expected",
    [("200k", 200.0), (" 12.5x", 12.5), ("-3", -3.0), (".5", 0.5), ("1e", 1.0), ("abc", 0.0), ("", 0.0)],
)
def test_leading_float(text: str, expected: float):
    assert leading_float(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("2", 2), ("2x", 2), (" 4", 4), ("-1", -1), ("x2", 0), ("", 0), ("1.9", 1)],
)
def test_leading_int(text: str, expected: int):
    assert leading_int(text) == expected


def test_leading_parsers_reject_non_str():
    with pytest.raises(TypeError):
        leading_float(12)
    with pytest.raises(TypeError):
        leading_int(None)


def test_kind_maps():
    assert INPUT_KINDS == {
        "hex": InputType.HEX,
        "mpx": InputType.MPX_STDIN,
        "tef": InputType.TEF6686,
        "bits": InputType.ASCII_BITS,
    }
    assert OUTPUT_KINDS == {"hex": OutputType.HEX, "json": OutputType.JSON}


def test_format_rate():
    assert format_rate(171000.0) == "171000"
    assert format_rate(1200000.0) == "1200000"
    assert format_rate(0.5) == "0.5"
