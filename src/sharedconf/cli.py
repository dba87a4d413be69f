from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from sharedconf.config import load_settings, resolve_inheritance, resolve_log_dir, resolve_log_level, resolve_roots
from sharedconf.core import merge_configs, resolve
from sharedconf.errors import ConfigLoadError, InvalidArgumentError
from sharedconf.pipeline import load_item
from sharedconf.utils import dump_json_document, load_dotenv_files, load_json_object, setup_logging

_HANDLED_ERRORS = (InvalidArgumentError, ConfigLoadError, ValueError, OSError)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sharedconf",
        description="Resolve and merge machine-specific and shared configuration",
    )
    parser.add_argument("--settings", default="", help="Path to a settings.yaml file.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser("resolve", help="Find which backup root holds an item")
    resolve_parser.add_argument("item", help="Item path relative to the backup roots (e.g. registry/app.json).")
    _add_root_arguments(resolve_parser)

    merge_parser = subparsers.add_parser("merge", help="Deep merge two JSON configuration files")
    merge_parser.add_argument("base", help="Base JSON document.")
    merge_parser.add_argument("override", help="Override JSON document.")

    load_parser = subparsers.add_parser("load", help="Resolve an item and merge it over defaults")
    load_parser.add_argument("item", help="Item path relative to the backup roots.")
    _add_root_arguments(load_parser)
    load_parser.add_argument("--defaults", default="", help="JSON document with default values.")
    load_parser.add_argument(
        "--mode",
        default="",
        choices=["merge", "override"],
        help="Inheritance mode. Defaults to settings inheritance.mode.",
    )
    load_parser.add_argument(
        "--fallback",
        default="",
        choices=["use_shared", "none"],
        help="Fallback strategy. Defaults to settings inheritance.fallback_strategy.",
    )

    return parser


def _add_root_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--machine-root", default="", help="Override the machine-specific backup root.")
    parser.add_argument("--shared-root", default="", help="Override the shared backup root.")


def _roots(args: argparse.Namespace, settings: Dict[str, Any]) -> Tuple[Path, Path]:
    if args.machine_root:
        settings["roots"]["machine"] = args.machine_root
    if args.shared_root:
        settings["roots"]["shared"] = args.shared_root
    return resolve_roots(settings)


def _emit(payload: Any) -> None:
    print(dump_json_document(payload))


def _run_resolve(args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    machine_root, shared_root = _roots(args, settings)
    result = resolve(args.item, machine_root, shared_root)
    _emit(result.to_dict())
    if not result.found:
        print(f"No configuration found for item {args.item}", file=sys.stderr)
        return 1
    return 0


def _run_merge(args: argparse.Namespace) -> int:
    merged = merge_configs(load_json_object(Path(args.base)), load_json_object(Path(args.override)))
    _emit(merged)
    return 0


def _run_load(args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    machine_root, shared_root = _roots(args, settings)
    mode, strategy = resolve_inheritance(settings)
    defaults = load_json_object(Path(args.defaults)) if args.defaults else None
    loaded = load_item(
        args.item,
        machine_root,
        shared_root,
        defaults,
        inheritance_mode=args.mode or mode,
        fallback_strategy=args.fallback or strategy,
    )
    _emit(loaded.to_dict())
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.settings:
            load_dotenv_files(Path(args.settings).expanduser().resolve().parent)
        settings, _ = load_settings(args.settings or None)
        setup_logging(resolve_log_level(settings), resolve_log_dir(settings))

        if args.command == "resolve":
            code = _run_resolve(args, settings)
        elif args.command == "merge":
            code = _run_merge(args)
        elif args.command == "load":
            code = _run_load(args, settings)
        else:
            parser.error(f"Unknown command: {args.command}")
            return
    except _HANDLED_ERRORS as err:
        raise SystemExit(f"sharedconf {args.command} failed: {err}") from None

    if code:
        raise SystemExit(code)
