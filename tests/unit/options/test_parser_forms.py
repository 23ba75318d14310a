from __future__ import annotations

import pytest

from rdsdec.options import parser
from rdsdec.options.config import Disposition, InputType


@pytest.mark.parametrize(
    "args",
    [
        ["-r", "200k"],
        ["-r200k"],
        ["--samplerate", "200k"],
        ["--samplerate=200k"],
        ["--samp", "200k"],
        ["--samp=200k"],
    ],
)
def test_samplerate_spellings_are_equivalent(args):
    opts = parser.parse(args)
    assert opts == parser.parse(["-r", "200k"])
    assert opts.sample_rate_hz == 200000.0
    assert opts.rate_defined is True


def test_clustered_short_flags():
    opts = parser.parse(["-pRu"])
    assert opts.show_partial_groups and opts.show_raw_bits and opts.use_rbds_tables


def test_cluster_value_takes_rest_of_argument():
    opts = parser.parse(["-pc2"])
    assert opts.show_partial_groups is True
    assert opts.num_channels == 2


def test_cluster_value_from_next_argument():
    opts = parser.parse(["-pi", "hex"])
    assert opts.input_type is InputType.HEX


def test_value_may_look_like_an_option():
    opts = parser.parse(["-t", "-v"])
    assert opts.time_format == "-v"
    assert opts.print_version is False


def test_ambiguous_long_prefix(diagnostics):
    opts = parser.parse(["--in", "hex"])
    assert opts.disposition is Disposition.EXIT_FAILURE
    assert opts.print_usage is True
    assert any("ambiguous" in m for m in diagnostics.messages)


def test_exact_long_name_beats_prefix_siblings():
    assert parser.parse(["--input", "tef"]).input_type is InputType.TEF6686


@pytest.mark.parametrize("args", [["-r"], ["--samplerate"], ["-i", "hex", "-l"]])
def test_missing_value(args, diagnostics):
    opts = parser.parse(args)
    assert opts.disposition is Disposition.EXIT_FAILURE
    assert opts.print_usage is True
    assert any("requires an argument" in m for m in diagnostics.messages)


def test_flag_given_a_value(diagnostics):
    opts = parser.parse(["--rbds=yes"])
    assert opts.disposition is Disposition.EXIT_FAILURE
    assert "error: option '--rbds' doesn't allow an argument" in diagnostics.messages


def test_double_dash_ends_options():
    opts = parser.parse(["-p", "--", "-R"])
    assert opts.show_partial_groups is True
    assert opts.show_raw_bits is False
    assert opts.disposition is Disposition.EXIT_FAILURE
    assert opts.print_usage is True


def test_trailing_double_dash_alone_is_fine():
    opts = parser.parse(["-r", "171k", "--"])
    assert opts.disposition is Disposition.CONTINUE


def test_single_dash_is_positional():
    opts = parser.parse(["-"])
    assert opts.disposition is Disposition.EXIT_FAILURE
    assert opts.print_usage is True


def test_empty_long_value_is_kept():
    opts = parser.parse(["--timestamp="])
    assert opts.timestamp_enabled is True
    assert opts.time_format == ""
