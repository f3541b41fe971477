"""Command-line entry point for llmkube.

Parses general flags, configures logging, runs the update advisory once as a
pre-run hook and dispatches to the selected subcommand.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from .logging_utils import configure_logging, log_event
from .updates import (
    CacheStore,
    Skipped,
    check_for_update,
    detect_install_origin,
    fetch_latest_version,
    report_version_check,
    resolve_latest_version,
)
from .utils import get_git_commit, get_version


def add_general_args(p: argparse.ArgumentParser) -> None:
    """Attach general, cross-cutting flags to the parser."""
    general = p.add_argument_group("General")
    general.add_argument(
        "-V", "--version", action="store_true", help="Print version and exit"
    )
    general.add_argument(
        "-v", "--verbose", action="store_true", help="Enable INFO/DEBUG logging"
    )
    general.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        help="Explicit log level (overrides --verbose)",
    )
    general.add_argument("--log-file", help="Write logs to a file")
    general.add_argument(
        "--log-json", action="store_true", help="Also log JSON to stdout"
    )
    general.add_argument(
        "--no-update-check",
        action="store_true",
        help="Skip the automatic check for a newer llmkube release",
    )


def add_version_command(subparsers) -> None:
    p = subparsers.add_parser(
        "version",
        help="Print version information",
        description="Display the llmkube version and optionally check for updates.",
    )
    p.add_argument(
        "-c", "--check", action="store_true", help="Check for updates"
    )
    p.set_defaults(func=run_version)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments (defaults to ``sys.argv[1:]``)."""
    p = argparse.ArgumentParser(
        prog="llmkube",
        description=(
            "LLMKube: deploy and manage local LLM inference services on Kubernetes."
        ),
    )
    add_general_args(p)
    subparsers = p.add_subparsers(dest="command", metavar="<command>")
    add_version_command(subparsers)
    args = p.parse_args(argv)
    args._parser = p
    return args


def run_version(args: argparse.Namespace, current_version: str) -> int:
    print(f"llmkube version {current_version}")
    print(f"  git commit: {get_git_commit()}")
    if not args.check:
        return 0

    print("\nChecking for updates...")
    outcome = resolve_latest_version(CacheStore(), fetch_latest_version, force=True)
    if isinstance(outcome, Skipped):
        report_version_check(current_version, None, outcome.reason, "")
    else:
        report_version_check(
            current_version, outcome.version, None, detect_install_origin()
        )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose, args.log_file, args.log_json, args.log_level)
    current_version = get_version()

    if args.version:
        print(current_version)
        return 0

    handler = getattr(args, "func", None)
    if handler is None:
        args._parser.print_help()
        return 0

    # An explicit version --check already reports on updates.
    forced = getattr(args, "check", False)
    if not args.no_update_check and not forced:
        check_for_update(current_version)

    log_event("command_started", command=args.command)
    try:
        return handler(args, current_version)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130


__all__ = ["add_general_args", "parse_args", "run_version", "main"]
