#!/usr/bin/env python3
"""
setup_wizard.py — MCP Metadata Setup Wizard
===========================================
Configures the Salesforce metadata files for a Model Context Protocol (MCP)
server integration by copying the four templates under
force-app/main/default/ to instance files with their tokens substituted.

Usage:
    python setup_wizard.py                          # fully interactive
    python setup_wizard.py --config answers.json    # answers as prompt defaults
    python setup_wizard.py --dry-run                # preview without writing files
    python setup_wizard.py --overwrite              # replace an existing instance
    python setup_wizard.py --list-instances         # see configured instances
    python setup_wizard.py --non-interactive --config answers.yaml   # CI mode

What it produces (for MCP_NAME "weather_api")
---------------------------------------------
  externalCredentials/weather_api.externalCredential-meta.xml
  externalServiceRegistrations/weather_api.externalServiceRegistration-meta.xml
  namedCredentials/weather_api.namedCredential-meta.xml
  permissionsets/weather_api_Perm_Set.permissionset-meta.xml

Template tokens
---------------
  MCP_NAME, MCP_SERVER_URL, AUTH_PROVIDER_URL   → the values entered
  NAMESPACE__                                   → "" or "<namespace>__"
  NAMESPACE                                     → the namespace entered

The templates are left untouched so the wizard can be re-run for further
instances.

Modular implementation
----------------------
The wizard logic lives in the  metadata_wizard/  package; this file is the
CLI entry point only.
"""

import argparse
import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Ensure project root is on sys.path
# ---------------------------------------------------------------------------
ROOT = Path(__file__).parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from metadata_wizard import console
from metadata_wizard.answers import AnswersValidationError, load_answers
from metadata_wizard.collector import SetupCancelledError
from metadata_wizard.runner import DEFAULT_METADATA_ROOT, list_instances, run_wizard

logger = logging.getLogger("mcp-setup-wizard")


# ---------------------------------------------------------------------------
# Logging configuration
# ---------------------------------------------------------------------------

def configure_logging(verbose: bool = False) -> None:
    # The wizard talks to the user through the console module; log records
    # only surface warnings unless --verbose is given.
    level = logging.DEBUG if verbose else logging.WARNING
    fmt   = "%(asctime)s [%(levelname)-8s] %(name)s -- %(message)s"
    logging.basicConfig(level=level, format=fmt, datefmt="%Y-%m-%d %H:%M:%S")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="MCP Metadata Setup Wizard — Salesforce metadata for an MCP server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--root",
        type=str,
        default=str(DEFAULT_METADATA_ROOT),
        metavar="PATH",
        help=f"Metadata directory holding the templates (default: {DEFAULT_METADATA_ROOT}).",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default=None,
        metavar="PATH",
        help=(
            "Path to a JSON or YAML file with pre-filled answers. "
            "Values are used as defaults in interactive mode, or as the "
            "complete answer set in --non-interactive mode."
        ),
    )
    parser.add_argument(
        "--non-interactive",
        action="store_true",
        help=(
            "Run without any user prompts. Requires --config with "
            "MCP_NAME, MCP_SERVER_URL and AUTH_PROVIDER_URL."
        ),
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview which files would be created without writing them.",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Replace an existing instance without asking.",
    )
    parser.add_argument(
        "--list-instances", "-l",
        action="store_true",
        help="List previously configured MCP instances and exit.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable DEBUG-level logging.",
    )
    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.list_instances:
        list_instances(args.root)
        return 0

    if args.non_interactive and not args.config:
        console.error("--non-interactive requires --config <path>")
        return 1

    # ---- Load pre-fill from answers file ----
    prefill: dict | None = None
    if args.config:
        try:
            prefill = load_answers(args.config, complete=args.non_interactive)
        except (FileNotFoundError, AnswersValidationError) as exc:
            console.error(str(exc))
            return 1
        logger.info("Loaded wizard answers from: %s", args.config)

    try:
        run_wizard(
            args.root,
            prefill=prefill,
            non_interactive=args.non_interactive,
            dry_run=args.dry_run,
            overwrite=args.overwrite,
        )
    except SetupCancelledError as exc:
        logger.info("Setup cancelled: %s", exc)
        console.line()
        console.warning("Setup cancelled. No changes were made.")
        return 0
    except Exception as exc:
        logger.debug("Setup failed", exc_info=True)
        console.error(str(exc))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
