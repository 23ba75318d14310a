from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class Action(Enum):
    INPUT_BITS = auto()
    CHANNELS = auto()
    FEED_THROUGH = auto()
    BLER = auto()
    FILE = auto()
    INPUT_HEX = auto()
    INPUT = auto()
    LOCTABLE = auto()
    OUTPUT = auto()
    SHOW_PARTIAL = auto()
    SAMPLERATE = auto()
    SHOW_RAW = auto()
    TIMESTAMP = auto()
    RBDS = auto()
    VERSION = auto()
    OUTPUT_HEX = auto()
    HELP = auto()


@dataclass(frozen=True)
class OptionSpec:
    """
    One recognized option.

    short: single-letter spelling without the dash (None if long-only)
    long: long spelling without the leading "--"
    takes_value: whether the option consumes an argument
    """
    short: Optional[str]
    long: str
    takes_value: bool
    action: Action


OPTION_TABLE: tuple[OptionSpec, ...] = (
    OptionSpec("b", "input-bits", False, Action.INPUT_BITS),
    OptionSpec("c", "channels", True, Action.CHANNELS),
    OptionSpec("e", "feed-through", False, Action.FEED_THROUGH),
    OptionSpec("E", "bler", False, Action.BLER),
    OptionSpec("f", "file", True, Action.FILE),
    OptionSpec("h", "input-hex", False, Action.INPUT_HEX),
    OptionSpec("i", "input", True, Action.INPUT),
    OptionSpec("l", "loctable", True, Action.LOCTABLE),
    OptionSpec("o", "output", True, Action.OUTPUT),
    OptionSpec("p", "show-partial", False, Action.SHOW_PARTIAL),
    OptionSpec("r", "samplerate", True, Action.SAMPLERATE),
    OptionSpec("R", "show-raw", False, Action.SHOW_RAW),
    OptionSpec("t", "timestamp", True, Action.TIMESTAMP),
    OptionSpec("u", "rbds", False, Action.RBDS),
    OptionSpec("v", "version", False, Action.VERSION),
    OptionSpec("x", "output-hex", False, Action.OUTPUT_HEX),
    # "-?" is what getopt-style tools answer with usage
    OptionSpec("?", "help", False, Action.HELP),
)


class AmbiguousOption(LookupError):
    """A long-option prefix matched more than one table entry."""

    def __init__(self, name: str, candidates: list[str]):
        self.name = name
        self.candidates = candidates
        super().__init__(
            f"option '--{name}' is ambiguous; possibilities: "
            + " ".join(f"'--{c}'" for c in candidates)
        )


def find_short(letter: str) -> Optional[OptionSpec]:
    for spec in OPTION_TABLE:
        if spec.short == letter:
            return spec
    return None


def find_long(name: str) -> Optional[OptionSpec]:
    """
    Look up a long option by exact name or unambiguous prefix.

    Returns None if nothing matches. Raises AmbiguousOption if the prefix
    matches several names and none of them exactly.
    """
    if not name:
        return None

    matches = [spec for spec in OPTION_TABLE if spec.long.startswith(name)]
    for spec in matches:
        if spec.long == name:
            return spec

    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        raise AmbiguousOption(name, [spec.long for spec in matches])
    return None


def short_optstring() -> str:
    """getopt-style optstring ("bc:eE..."), handy for usage/docs."""
    out = []
    for spec in OPTION_TABLE:
        if spec.short is None or spec.short == "?":
            continue
        out.append(spec.short + (":" if spec.takes_value else ""))
    return "".join(out)
