from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import json
import logging

from rdsdec.options import table
from rdsdec.options.config import (
    MINIMUM_SAMPLE_RATE_HZ,
    MPX_INPUTS,
    TARGET_SAMPLE_RATE_HZ,
    Disposition,
    InputType,
    Options,
    OutputType,
)
from rdsdec.options.table import Action
from rdsdec.options.values import (
    INPUT_KINDS,
    OUTPUT_KINDS,
    format_rate,
    leading_int,
    parse_magnitude,
)


logger = logging.getLogger(__name__)


# ============================
# Builder
# ============================

@dataclass
class _Builder:
    """
    Mutable twin of Options, local to one parse() call.
    """
    input_type: InputType = InputType.MPX_STDIN
    output_type: OutputType = OutputType.JSON
    sound_filename: Optional[str] = None
    sample_rate_hz: float = 0.0
    rate_defined: bool = False
    num_channels: int = 1
    feed_through: bool = False
    show_partial_groups: bool = False
    show_raw_bits: bool = False
    show_block_error_rate: bool = False
    output_hex: bool = False
    use_rbds_tables: bool = False
    timestamp_enabled: bool = False
    time_format: str = ""
    location_table_directories: List[str] = field(default_factory=list)
    print_usage: bool = False
    print_version: bool = False
    disposition: Disposition = Disposition.CONTINUE

    # positional (non-option) arguments seen during the scan
    extra_args: List[str] = field(default_factory=list)

    def fail(self) -> None:
        self.disposition = Disposition.EXIT_FAILURE
        self.print_usage = True

    def succeed(self) -> None:
        # an earlier failure keeps the process exit code
        if self.disposition is Disposition.CONTINUE:
            self.disposition = Disposition.EXIT_SUCCESS

    def freeze(self) -> Options:
        return Options(
            input_type=self.input_type,
            output_type=self.output_type,
            sound_filename=self.sound_filename,
            sample_rate_hz=self.sample_rate_hz,
            rate_defined=self.rate_defined,
            num_channels=self.num_channels,
            feed_through=self.feed_through,
            show_partial_groups=self.show_partial_groups,
            show_raw_bits=self.show_raw_bits,
            show_block_error_rate=self.show_block_error_rate,
            output_hex=self.output_hex,
            use_rbds_tables=self.use_rbds_tables,
            timestamp_enabled=self.timestamp_enabled,
            time_format=self.time_format,
            location_table_directories=tuple(self.location_table_directories),
            print_usage=self.print_usage,
            print_version=self.print_version,
            disposition=self.disposition,
        )


def _error(b: _Builder, message: str) -> None:
    logger.error("error: %s", message)
    b.fail()


# ============================
# Option effects
# ============================

def _apply(b: _Builder, action: Action, value: Optional[str]) -> bool:
    """
    Apply one recognized option to the builder.
    Returns True if scanning must stop here (version/help).
    """
    if action is Action.INPUT_BITS:
        b.input_type = InputType.ASCII_BITS
    elif action is Action.CHANNELS:
        b.num_channels = leading_int(value)
        if b.num_channels < 1:
            _error(b, "number of channels must be greater than 0")
    elif action is Action.FEED_THROUGH:
        b.feed_through = True
    elif action is Action.BLER:
        b.show_block_error_rate = True
    elif action is Action.FILE:
        b.sound_filename = value
        b.input_type = InputType.MPX_SNDFILE
    elif action is Action.INPUT_HEX:
        b.input_type = InputType.HEX
    elif action is Action.INPUT:
        if value in INPUT_KINDS:
            b.input_type = INPUT_KINDS[value]
        else:
            _error(b, f"unknown input format '{value}'")
    elif action is Action.OUTPUT:
        if value in OUTPUT_KINDS:
            b.output_type = OUTPUT_KINDS[value]
        else:
            _error(b, f"unknown output format '{value}'")
    elif action is Action.OUTPUT_HEX:
        b.output_type = OutputType.HEX
        b.output_hex = True
    elif action is Action.SHOW_PARTIAL:
        b.show_partial_groups = True
    elif action is Action.SAMPLERATE:
        b.sample_rate_hz = parse_magnitude(value)
        b.rate_defined = True
        if b.sample_rate_hz < MINIMUM_SAMPLE_RATE_HZ:
            _error(
                b,
                f"sample rate set to {format_rate(b.sample_rate_hz)}, "
                f"must be {format_rate(MINIMUM_SAMPLE_RATE_HZ)} Hz or higher",
            )
    elif action is Action.SHOW_RAW:
        b.show_raw_bits = True
    elif action is Action.TIMESTAMP:
        b.timestamp_enabled = True
        b.time_format = value
    elif action is Action.RBDS:
        b.use_rbds_tables = True
    elif action is Action.LOCTABLE:
        b.location_table_directories.append(value)
    elif action is Action.VERSION:
        b.print_version = True
        b.succeed()
        return True
    elif action is Action.HELP:
        b.print_usage = True
        b.succeed()
        return True
    else:
        raise ValueError(f"no handler for option action {action}")

    return False


# ============================
# Scanning
# ============================

def _scan(args: Sequence[str], b: _Builder) -> bool:
    """
    Walk the argument vector once, getopt_long style.

    Positional arguments may appear anywhere and are collected into
    b.extra_args; "--" ends option processing.

    Returns True if the whole vector was consumed, False if scanning
    stopped early (version/help, unknown option, malformed invocation).
    """
    i = 0
    n = len(args)
    while i < n:
        arg = args[i]
        i += 1
        if not isinstance(arg, str):
            raise TypeError("arguments must be str")

        if arg == "--":
            b.extra_args.extend(args[i:])
            return True

        if arg.startswith("--"):
            name, eq, attached = arg[2:].partition("=")
            try:
                spec = table.find_long(name)
            except table.AmbiguousOption as e:
                _error(b, str(e))
                return False
            if spec is None:
                _error(b, f"unrecognized option '--{name}'")
                return False

            value = None
            if spec.takes_value:
                if eq:
                    value = attached
                elif i < n:
                    value = args[i]
                    i += 1
                else:
                    _error(b, f"option '--{spec.long}' requires an argument")
                    return False
            elif eq:
                _error(b, f"option '--{spec.long}' doesn't allow an argument")
                return False

            if _apply(b, spec.action, value):
                return False
            continue

        if arg.startswith("-") and arg != "-":
            j = 1
            while j < len(arg):
                letter = arg[j]
                j += 1
                spec = table.find_short(letter)
                if spec is None:
                    _error(b, f"invalid option -- '{letter}'")
                    return False

                value = None
                if spec.takes_value:
                    # rest of the cluster, else the next argument
                    if j < len(arg):
                        value = arg[j:]
                        j = len(arg)
                    elif i < n:
                        value = args[i]
                        i += 1
                    else:
                        _error(b, f"option requires an argument -- '{letter}'")
                        return False

                if _apply(b, spec.action, value):
                    return False
            continue

        b.extra_args.append(arg)

    return True


# ============================
# Post-scan checks
# ============================

def _validate(b: _Builder) -> None:
    if b.extra_args:
        _error(b, "unexpected argument(s): " + " ".join(b.extra_args))

    if b.feed_through and b.input_type is InputType.MPX_SNDFILE:
        _error(b, "feed-thru is not supported for audio file inputs")

    if b.num_channels > 1 and b.input_type not in MPX_INPUTS:
        _error(b, "multi-channel input is only supported for MPX signals")

    assuming_raw_mpx = (
        b.disposition is Disposition.CONTINUE
        and not b.print_usage
        and b.input_type is InputType.MPX_STDIN
    )
    if assuming_raw_mpx and not b.rate_defined:
        notice = {
            "warning": "raw MPX sample rate not defined, assuming "
            f"{format_rate(TARGET_SAMPLE_RATE_HZ)} Hz"
        }
        logger.warning(json.dumps(notice, separators=(",", ":")))
        b.sample_rate_hz = TARGET_SAMPLE_RATE_HZ


# ============================
# Public API
# ============================

def parse(args: Sequence[str]) -> Options:
    """
    Parse a decoder argument vector (without the program name) into Options.

    Never raises for bad user input: problems are logged on this module's
    logger and reported through Options.disposition / print_usage.
    """
    if isinstance(args, (str, bytes)):
        raise TypeError("args must be a sequence of str, not a single string")

    b = _Builder()
    if _scan(list(args), b):
        _validate(b)
    return b.freeze()
