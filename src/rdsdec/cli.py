"""
Command-line entry point.

Turns the Options disposition into printed usage/version text and a
process exit code. Decoding itself lives elsewhere; on a normal run this
only reports the resolved configuration at DEBUG level.
"""
from __future__ import annotations

from typing import Optional, Sequence
import logging
import sys

from rdsdec.options import parser
from rdsdec.options.config import (
    TARGET_SAMPLE_RATE_HZ,
    VERSION,
    Disposition,
    Options,
)
from rdsdec.options.values import format_rate


USAGE = f"""\
radio_command | rdsdec [OPTIONS]
rdsdec -f WAVEFILE

By default, a {format_rate(TARGET_SAMPLE_RATE_HZ // 1000)} kHz single-channel 16-bit MPX signal is expected via stdin.

-b, --input-bits       Same as --input bits.

-c, --channels CHANS   Number of channels in the raw input signal. Channels
                       are interleaved streams of samples that are
                       demodulated independently.

-e, --feed-through     Echo the input signal to stdout and print decoded
                       groups to stderr.

-E, --bler             Display the average block error rate.

-f, --file FILENAME    Read an audio file instead of stdin.

-h, --input-hex        Same as --input hex.

-i, --input FORMAT     Decode input in the given format:
                       bits  ASCII stream of "0" and "1"
                       hex   RDS Spy hex format
                       mpx   Mono S16LE PCM-encoded MPX waveform
                       tef   Serial data from the TEF6686 tuner

-l, --loctable DIR     Load TMC location table from a directory in TMC
                       Exchange format. Can be given several times.

-o, --output FORMAT    Print output in the given format:
                       hex   RDS Spy hex format
                       json  Newline-delimited JSON (default)

-p, --show-partial     Show some information even before all related groups
                       have been received.

-r, --samplerate RATE  Set stdin sample frequency in Hz (k and M suffixes
                       allowed). Resampled if this differs from {format_rate(TARGET_SAMPLE_RATE_HZ)} Hz.

-R, --show-raw         Show raw group data as hex in the JSON stream.

-t, --timestamp FORMAT Add time of decoding to JSON groups (strftime format).

-u, --rbds             RBDS mode; use North American program type names.

-v, --version          Print version string and exit.

-x, --output-hex       Same as --output hex.

--help                 Print this text and exit.
"""


_handler: Optional[logging.Handler] = None


def configure_logging(level: int = logging.INFO) -> None:
    """
    Send the options diagnostics to the current stderr as bare lines.
    Calling it again replaces the previous handler.
    """
    global _handler
    log = logging.getLogger("rdsdec")
    if _handler is not None:
        log.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    log.addHandler(_handler)
    log.setLevel(level)


def exit_code(opts: Options) -> int:
    return 1 if opts.disposition is Disposition.EXIT_FAILURE else 0


def report(opts: Options) -> None:
    failed = opts.disposition is Disposition.EXIT_FAILURE
    if opts.print_usage:
        print(USAGE, end="", file=sys.stderr if failed else sys.stdout)
    if opts.print_version:
        print(f"rdsdec {VERSION}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    args = sys.argv[1:] if argv is None else list(argv)

    opts = parser.parse(args)
    report(opts)

    if not opts.should_exit:
        logging.getLogger(__name__).debug("resolved options: %s", opts)
    return exit_code(opts)


if __name__ == "__main__":
    raise SystemExit(main())
