from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Positional manifest and destination arguments.
2. Mapping of CLI flags to configuration overrides.
3. Unset flags leaving persisted settings untouched.
"""

import pytest

from treewright.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_positional_arguments():
    """Verify manifest and destination are captured."""
    args = parse_args(["tree.yaml", "/tmp/out"])

    assert args.manifest == "tree.yaml"
    assert args.destination == "/tmp/out"
    assert args.config_path is None


def test_missing_destination_is_a_usage_error():
    """Verify argparse exits with status 2 when a positional is missing."""
    with pytest.raises(SystemExit) as info:
        parse_args(["tree.yaml"])
    assert info.value.code == 2


def test_flags_mapping():
    """Verify flags are mapped onto config keys."""
    args = parse_args([
        "tree.json", "out",
        "--dry-run",
        "--json",
        "--debug",
        "--encoding", "latin-1",
        "--log-file", "run.log",
    ])

    overrides = args_to_overrides(args)

    assert overrides == {
        "dry_run": True,
        "json_output": True,
        "log_level": "DEBUG",
        "encoding": "latin-1",
        "log_file": "run.log",
    }


def test_no_flags_no_overrides():
    """Verify that omitted flags do not override persisted settings."""
    assert args_to_overrides(parse_args(["tree.json", "out"])) == {}
