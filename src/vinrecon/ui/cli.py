from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from vinrecon.app import reconcile_vehicle, unwrap_primary_response, unwrap_secondary_response
from vinrecon.config import (
    ConfigurationError,
    configure_logging,
    get_log_level,
    get_reconciliation_config,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile saved vehicle data responses")
    subparsers = parser.add_subparsers(dest="command", required=True)

    reconcile = subparsers.add_parser(
        "reconcile",
        help="Reconcile an NHTSA decode with an optional EPA vehicle record",
    )
    reconcile.add_argument(
        "--vin",
        type=str,
        required=True,
        help="17-character vehicle identification number",
    )
    reconcile.add_argument(
        "--primary",
        type=Path,
        required=True,
        help="JSON file with an NHTSA DecodeVinValues envelope or its result row",
    )
    reconcile.add_argument(
        "--secondary",
        type=Path,
        help="Optional JSON file with an EPA vehicle record",
    )
    reconcile.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the JSON output",
    )

    return parser.parse_args(list(argv))


def _load_json(path: Path) -> object:
    try:
        with path.open(encoding="utf-8") as handle:
            return json.load(handle)
    except OSError as exc:
        raise ValueError(f"Cannot read {path}: {exc.strerror}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path} is not valid JSON: {exc.msg}") from exc


def _normalize_vin(value: str) -> str:
    return value.strip().upper()


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        level = get_log_level()
    except ConfigurationError:
        configure_logging()
        log.exception("Invalid logging configuration")
        sys.exit(2)
    configure_logging(level=level)

    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        config = get_reconciliation_config()
        parsed_args = _parse_args(args_list)
        vin = _normalize_vin(parsed_args.vin)
        primary_raw = unwrap_primary_response(_load_json(parsed_args.primary))
        secondary_raw = (
            unwrap_secondary_response(_load_json(parsed_args.secondary))
            if parsed_args.secondary is not None
            else None
        )
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        result = reconcile_vehicle(
            vin,
            primary_raw,
            secondary_raw,
            config=config,
        )
    except ValueError:
        log.exception("Cannot reconcile vin=%s", vin)
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)

    json.dump(result.as_dict(), sys.stdout, indent=2 if parsed_args.pretty else None)
    sys.stdout.write("\n")


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
