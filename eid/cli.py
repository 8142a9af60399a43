"""eid.cli

Command line interface for eid.

Design constraints:
- argparse-based.
- Developer tooling only; the library never needs it.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from pathlib import Path

EPILOG = "Every failure has an address. Grep for it."


@dataclass(frozen=True)
class CliContext:
    repo_root: Path


def _repo_root_from_cwd() -> Path:
    return Path.cwd()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eid",
        description="Exception ids for guarded preconditions.",
        epilog=EPILOG,
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: ./config/default.yaml when present).",
    )

    sub = parser.add_subparsers(dest="command")

    p_new = sub.add_parser("new", help="Mint new ids (YYYYMMDD:HHMMSS, UTC)")
    p_new.add_argument("--count", type=int, default=1, help="How many ids, one second apart.")

    p_describe = sub.add_parser("describe", help="Show ref, uniq and the rendered message of an id")
    p_describe.add_argument("id")
    p_describe.add_argument("--message", default=None, help="Message to render with the id.")

    sub.add_parser("config", help="Print the active config as JSON")

    return parser


def _print_version() -> None:
    from eid import __version__

    print(f"eid v{__version__}")


def _cmd_new(ctx: CliContext, args: argparse.Namespace) -> int:
    from eid.core.identity import new_id

    if args.count < 1:
        print("--count must be >= 1", file=sys.stderr)
        return 2

    start = datetime.now(UTC)
    for i in range(args.count):
        print(new_id(start + timedelta(seconds=i)))
    return 0


def _cmd_describe(ctx: CliContext, args: argparse.Namespace) -> int:
    from eid.core.exceptions import EidRuntimeError
    from eid.core.identity import Eid

    try:
        eid = Eid(args.id)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    rendered = str(EidRuntimeError(eid, args.message))
    print(f"id:      {eid.id}")
    print(f"ref:     {eid.ref}")
    print(f"uniq:    {eid.uniq}")
    print(f"eid:     {eid}")
    print(f"message: {rendered}")
    return 0


def _cmd_config(ctx: CliContext, args: argparse.Namespace) -> int:
    from eid.core.config import get_config

    print(json.dumps(get_config().model_dump(), indent=2, sort_keys=True))
    return 0


def _load_config(path: Path) -> int:
    from pydantic import ValidationError

    from eid.core.config import ConfigError, EidConfig, configure

    try:
        configure(EidConfig.from_yaml(path))
    except (ConfigError, ValidationError) as e:
        print(f"Invalid config: {e}", file=sys.stderr)
        return 2
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        _print_version()
        return 0

    if not args.command:
        parser.print_help()
        return 2

    ctx = CliContext(repo_root=_repo_root_from_cwd())

    config_path = args.config or ctx.repo_root / "config" / "default.yaml"
    if args.config is not None or config_path.exists():
        rc = _load_config(config_path)
        if rc:
            return rc

    dispatch: dict[str, Callable[[CliContext, argparse.Namespace], int]] = {
        "new": _cmd_new,
        "describe": _cmd_describe,
        "config": _cmd_config,
    }

    fn = dispatch.get(str(args.command))
    if fn is None:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return 2

    return int(fn(ctx, args))


if __name__ == "__main__":
    raise SystemExit(main())
