from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults, persisted
settings, command-line overrides), logging bootstrap, manifest loading, tree
creation and result rendering.

Exit codes:
    0   every entry was created (or validated, with --dry-run)
    1   the error ledger is not empty
    2   usage, manifest or configuration error
    130 interrupted
"""

import json
import sys
from typing import Any, Dict, List, Optional

from treewright.core.creation.creator import TreeCreator
from treewright.domain.config import get_default_config, load_config, validate_config
from treewright.domain.creation_models import CreationReport
from treewright.domain.errors import ManifestError
from treewright.domain.manifest import load_manifest
from treewright.infra.logging import LoggingConfig, configure_logging, get_logger
from treewright.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Configuration hierarchy: defaults < settings file < CLI flags
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_path)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    # 2. Logging bootstrap
    configure_logging(
        LoggingConfig(level=conf["log_level"], console=True, log_file=conf["log_file"])
    )
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 3. Manifest loading
    try:
        root = load_manifest(args.manifest)
    except ManifestError as e:
        logger.error(f"Invalid manifest: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    # 4. Validation and creation
    logger.info(f"Materializing '{root.name}' into {args.destination}")
    try:
        report = TreeCreator(encoding=conf["encoding"]).run(
            root, args.destination, dry_run=conf["dry_run"]
        )
    except KeyboardInterrupt:
        logger.warning("Creation interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Unexpected failure while creating the tree: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILED

    # 5. Output rendering
    if conf["json_output"]:
        print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(report)

    return EXIT_OK if report.ok else EXIT_FAILED

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(report: CreationReport) -> None:
    """
    Print the report to stdout, and each ledger entry to stderr.

    Args:
        report: The creation report to render.
    """
    if report.ok:
        if report.validated_only:
            print(f"Tree is valid for {report.destination} (dry run, nothing created).")
        else:
            print(f"Created {report.created} entries in {report.destination}.")
        return

    phase = "Validation" if report.validated_only else "Creation"
    print(f"{phase} failed with {len(report.errors)} error(s):", file=sys.stderr)
    for entry, message in report.errors:
        print(f"  - {entry.kind} '{entry.name}': {message}", file=sys.stderr)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
