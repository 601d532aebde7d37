"""
Command line interface.

    stojson check FILE       validate a JSON file with the full parser
    stojson extract FILE KEY read one string member with the key extractor
    stojson status           query the launcher server status
"""

import argparse
import dataclasses
import logging
import os
import sys
from pathlib import Path

from stojson import DEFAULT_MAX_DEPTH
from stojson import ParseError
from stojson import parse_bytes
from stojson.extract import ExtractError
from stojson.extract import extract_json_str
from stojson.status import ServerStatus
from stojson.status import StatusError
from stojson.status import StatusSettings
from stojson.status import check_server_status

logger = logging.getLogger("stojson")


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="stojson",
        description="JSON decoder and launcher status checker",
    )
    ap.add_argument(
        "-v", "--verbose", action="store_true", help="log debug output"
    )
    sub = ap.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="validate a JSON file")
    check.add_argument("file", type=Path)
    check.add_argument("--max-depth", type=_positive_int, default=DEFAULT_MAX_DEPTH)
    check.add_argument("--allow-leading-zeros", action="store_true")

    extract = sub.add_parser("extract", help="read one string member")
    extract.add_argument("file", type=Path)
    extract.add_argument("key")

    status = sub.add_parser("status", help="query launcher server status")
    status.add_argument("--host")
    status.add_argument("--timeout", type=float)

    return ap


def _configure_logging(ap: argparse.ArgumentParser, verbose: bool) -> None:
    raw = os.environ.get("STOJSON_LOG_LEVEL", "WARNING")
    level = "DEBUG" if verbose else raw.upper()
    if level not in logging.getLevelNamesMapping():
        ap.error(f"STOJSON_LOG_LEVEL must be a logging level name, got {raw!r}")
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read(path: Path) -> bytes | None:
    try:
        return path.read_bytes()
    except OSError as e:
        print(f"error: cannot read {path}: {e.strerror}", file=sys.stderr)
        return None


def _cmd_check(args: argparse.Namespace) -> int:
    data = _read(args.file)
    if data is None:
        return 2

    try:
        value = parse_bytes(
            data,
            max_depth=args.max_depth,
            allow_leading_zeros=args.allow_leading_zeros,
        )
    except ParseError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    print(f"OK {value.kind.value}")
    return 0


def _cmd_extract(args: argparse.Namespace) -> int:
    data = _read(args.file)
    if data is None:
        return 2

    try:
        print(extract_json_str(data, args.key))
    except ExtractError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1
    return 0


def _cmd_status(args: argparse.Namespace) -> int:
    try:
        settings = StatusSettings.from_env()
        overrides = {
            name: getattr(args, name)
            for name in ("host", "timeout")
            if getattr(args, name) is not None
        }
        settings = dataclasses.replace(settings, **overrides)
        report = check_server_status(settings)
    except (StatusError, ValueError):
        logger.debug("status check failed", exc_info=True)
        print("status unavailable", file=sys.stderr)
        return 1

    if report.status is ServerStatus.UNKNOWN:
        print(f"unknown ({report.raw})")
    else:
        print(report.status.value)
    return 0


_COMMANDS = {
    "check": _cmd_check,
    "extract": _cmd_extract,
    "status": _cmd_status,
}


def main(argv: list[str] | None = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)
    _configure_logging(ap, args.verbose)
    return _COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
