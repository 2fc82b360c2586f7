from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides understood by the domain config layer.
"""

import argparse
from typing import Any, Dict

from treewright.domain.constants import APP_NAME

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treewright CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            "Create the files and directories declared in a JSON or YAML "
            "manifest inside an existing destination directory."
        ),
    )

    # --- Inputs ---
    p.add_argument(
        "manifest",
        help="Path to the tree manifest (.json, .yaml or .yml).",
    )
    p.add_argument(
        "destination",
        help="Existing directory in which the tree is created.",
    )

    # --- Runtime Behaviour ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON settings file (defaults to the user data directory).",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore any persisted settings file.",
    )
    p.add_argument(
        "--encoding",
        default=None,
        help="Codec used to write file contents (default: utf-8).",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate the tree without creating anything.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags that were not given are left out so persisted settings survive.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.encoding:
        overrides["encoding"] = args.encoding
    if args.log_file:
        overrides["log_file"] = args.log_file
    if args.debug:
        overrides["log_level"] = "DEBUG"
    if args.dry_run:
        overrides["dry_run"] = True
    if args.json_output:
        overrides["json_output"] = True

    return overrides
