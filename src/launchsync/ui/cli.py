from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from launchsync.app import reconcile_manifest
from launchsync.config import configure_logging
from launchsync.domain.errors import ReconciliationError
from launchsync.domain.model import DuplicatePolicy, ErrorPolicy
from launchsync.domain.reconciliation import parse_launch_date

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile the launch manifest wiki against the launch registry"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    reconcile = subparsers.add_parser("reconcile", help="Run one reconciliation pass")
    reconcile.add_argument(
        "--dry-run",
        action="store_true",
        help="Plan and log updates without patching the registry or sending the heartbeat",
    )
    reconcile.add_argument(
        "--collect-errors",
        action="store_true",
        help="Skip rows whose date or site cannot be read instead of aborting the pass",
    )
    reconcile.add_argument(
        "--reject-duplicates",
        action="store_true",
        help="Abort before patching if two rows produce the same flight number",
    )
    reconcile.add_argument(
        "--offline-sites",
        action="store_true",
        help="Resolve launchpads from the built-in snapshot instead of the registry",
    )

    parse_date = subparsers.add_parser(
        "parse-date",
        help="Show how a manifest date cell is interpreted",
    )
    parse_date.add_argument("text", type=str, help="Raw manifest date cell")
    parse_date.add_argument(
        "--timezone",
        type=str,
        default="UTC",
        help="IANA timezone for the local rendering (default: %(default)s)",
    )

    return parser.parse_args(list(argv))


def _run_parse_date(args: argparse.Namespace) -> None:
    parsed = parse_launch_date(args.text, timezone=args.timezone)
    log.info(
        "precision=%s tbd=%s utc=%s local=%s",
        parsed.precision,
        parsed.is_tentative,
        parsed.instant.isoformat(),
        parsed.local_time.isoformat(),
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(verbose=parsed_args.verbose)

    try:
        if parsed_args.command == "reconcile":
            result = reconcile_manifest(
                dry_run=parsed_args.dry_run,
                error_policy=(
                    ErrorPolicy.COLLECT if parsed_args.collect_errors else ErrorPolicy.ABORT
                ),
                duplicate_policy=(
                    DuplicatePolicy.REJECT
                    if parsed_args.reject_duplicates
                    else DuplicatePolicy.WARN
                ),
                offline_sites=parsed_args.offline_sites,
            )
            if result.plan.failures:
                sys.exit(1)
        elif parsed_args.command == "parse-date":
            _run_parse_date(parsed_args)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except ReconciliationError:
        log.exception("Reconciliation aborted")
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
