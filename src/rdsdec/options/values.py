from __future__ import annotations

import re

import numpy as np

from rdsdec.options.config import InputType, OutputType


INPUT_KINDS: dict[str, InputType] = {
    "hex": InputType.HEX,
    "mpx": InputType.MPX_STDIN,
    "tef": InputType.TEF6686,
    "bits": InputType.ASCII_BITS,
}

OUTPUT_KINDS: dict[str, OutputType] = {
    "hex": OutputType.HEX,
    "json": OutputType.JSON,
}

MAGNITUDE_SUFFIXES: dict[str, float] = {
    "k": 1_000.0,
    "m": 1_000_000.0,
}

# Leading numeric prefix, the way strtod/atof read it.
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


def leading_float(text: str) -> float:
    """
    atof(): parse the longest numeric prefix, 0.0 if there is none.
      "200k" -> 200.0, "1.2M" -> 1.2, "abc" -> 0.0
    """
    if not isinstance(text, str):
        raise TypeError("text must be str")
    m = _FLOAT_PREFIX.match(text)
    if m is None:
        return 0.0
    return float(m.group(0))


def leading_int(text: str) -> int:
    """atoi(): parse the leading integer prefix, 0 if there is none."""
    if not isinstance(text, str):
        raise TypeError("text must be str")
    m = _INT_PREFIX.match(text)
    if m is None:
        return 0
    return int(m.group(0))


def magnitude_factor(text: str) -> float:
    if len(text) <= 1:
        return 1.0
    return MAGNITUDE_SUFFIXES.get(text[-1].lower(), 1.0)


def parse_magnitude(text: str) -> float:
    """
    Numeric value with an optional k/M magnitude suffix (case-insensitive).

      "200k"   -> 200000.0
      "1.2M"   -> 1200000.0
      "250000" -> 250000.0

    The result is rounded to single precision; sample rates are consumed
    by float32 DSP code downstream.
    """
    value = leading_float(text) * magnitude_factor(text)
    return float(np.float32(value))


def format_rate(hz: float) -> str:
    """Compact rate for messages: 171000.0 -> "171000", 1.5 -> "1.5"."""
    hz = float(hz)
    return str(int(hz)) if hz.is_integer() else str(hz)
