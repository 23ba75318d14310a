from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


VERSION = "0.1.0"

# Decoder DSP runs at this rate; other raw MPX rates get resampled to it.
TARGET_SAMPLE_RATE_HZ = 171000.0
MINIMUM_SAMPLE_RATE_HZ = 128000.0


class InputType(Enum):
    HEX = "hex"
    ASCII_BITS = "bits"
    MPX_STDIN = "mpx"
    MPX_SNDFILE = "sndfile"
    TEF6686 = "tef"


class OutputType(Enum):
    HEX = "hex"
    JSON = "json"


class Disposition(Enum):
    CONTINUE = "continue"
    EXIT_SUCCESS = "exit_success"
    EXIT_FAILURE = "exit_failure"


# Inputs that carry a sampled MPX waveform (and can therefore be multi-channel).
MPX_INPUTS = frozenset({InputType.MPX_STDIN, InputType.MPX_SNDFILE})


@dataclass(frozen=True)
class Options:
    """
    Decoder run configuration, as produced by options.parser.parse().

    Read-only once returned. `disposition` together with `print_usage` /
    `print_version` tells the host process what to print and how to exit.

    Fields:
      - input_type / output_type: how samples/groups come in and go out
      - sound_filename: only set for InputType.MPX_SNDFILE
      - sample_rate_hz: user rate, or the assumed default for raw MPX
      - rate_defined: True only if -r/--samplerate was given
      - time_format: strftime-style format, meaningful if timestamp_enabled
      - location_table_directories: TMC location table search dirs, in order
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
    output_hex: bool = False  # legacy -x; output_type is authoritative
    use_rbds_tables: bool = False

    timestamp_enabled: bool = False
    time_format: str = ""

    location_table_directories: Tuple[str, ...] = ()

    print_usage: bool = False
    print_version: bool = False
    disposition: Disposition = Disposition.CONTINUE

    @property
    def should_exit(self) -> bool:
        return self.disposition is not Disposition.CONTINUE
