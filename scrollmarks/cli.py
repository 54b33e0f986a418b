"""CLI entrypoints for scrollmarks commands."""

from __future__ import annotations

import argparse
import json
import os
import sys
from dataclasses import replace
from pathlib import Path
from typing import Dict, Iterator, List

from .config import ConfigError, ScrollmarksConfig, load_config
from .document import DocumentSnapshot
from .language import detect_language_mode, is_known_source
from .logging import configure_logging, get_logger
from .models import FeatureFlags, LanguageMode, Marker
from .pipeline import DocumentScanner
from .stores import SettingsStore

# CLI switch -> FeatureFlags field
_FLAG_OPTIONS = {
    "headers": "show_headers",
    "functions": "show_functions",
    "classes": "show_classes",
    "access-specifiers": "show_access_specifiers",
    "shorten-access-specifiers": "shorten_access_specifiers",
}

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".vs",
    ".idea",
    ".scrollmarks",
    "node_modules",
    "bin",
    "obj",
}


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        default=".",
        help="Path to .scrollmarks.yml or the directory containing it (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scrollmarks",
        description="Find section headers, classes, functions and access specifiers in C-family and C# sources.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan_parser = subparsers.add_parser(
        "scan",
        help="Print the structural markers of one or more source files.",
    )
    _add_verbose_option(scan_parser, suppress_default=True)
    _add_config_option(scan_parser)
    scan_parser.add_argument(
        "paths",
        nargs="+",
        help="Source files to scan. Directories are searched for files with a configured suffix.",
    )
    scan_parser.add_argument(
        "--language",
        choices=[mode.value for mode in LanguageMode],
        default=None,
        help="Force a language mode instead of detecting it from the file suffix.",
    )
    scan_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit markers as JSON.",
    )
    for option, field_name in _FLAG_OPTIONS.items():
        scan_parser.add_argument(
            f"--{option}",
            dest=field_name,
            action=argparse.BooleanOptionalAction,
            default=None,
            help=f"Override the stored {field_name} setting for this run.",
        )

    settings_parser = subparsers.add_parser(
        "settings",
        help="Show or change the persisted display settings.",
    )
    _add_verbose_option(settings_parser, suppress_default=True)
    _add_config_option(settings_parser)
    settings_parser.add_argument(
        "--set",
        dest="assignments",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Persist a boolean setting, e.g. show_access_specifiers=true. Repeatable.",
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the HTTP scan service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    _add_config_option(serve_parser)
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind.")

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for scrollmarks commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    try:
        config = load_config(Path(args.config))
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")
    store = SettingsStore(
        config.settings_path,
        collection=config.settings.collection,
        defaults=config.flags,
    )

    if args.command == "serve":
        from .service import run_service

        # Re-read per request so `scrollmarks settings --set` applies without a restart.
        run_service(
            host=args.host,
            port=args.port,
            flags_factory=store.load,
            csharp_suffixes=config.languages.csharp_suffixes,
        )
    elif args.command == "scan":
        flags = _apply_overrides(store.flags, args)
        try:
            results = {
                str(path): _scan_file(path, config, args.language, flags)
                for path in _expand_paths(args.paths, config)
            }
        except OSError as exc:
            parser.exit(1, f"scrollmarks scan failed: {exc}\n")
        _print_results(results, as_json=bool(args.json))
    elif args.command == "settings":
        if args.assignments:
            try:
                store.update(_parse_assignments(args.assignments))
            except ValueError as exc:
                parser.exit(1, f"{exc}\n")
        for name, value in store.flags.as_dict().items():
            print(f"{name} = {str(value).lower()}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _apply_overrides(flags: FeatureFlags, args: argparse.Namespace) -> FeatureFlags:
    overrides = {
        field_name: getattr(args, field_name)
        for field_name in _FLAG_OPTIONS.values()
        if getattr(args, field_name, None) is not None
    }
    return replace(flags, **overrides) if overrides else flags


def _expand_paths(paths: List[str], config: ScrollmarksConfig) -> Iterator[Path]:
    for raw in paths:
        path = Path(raw)
        if not path.is_dir():
            yield path
            continue
        for dirpath, dirnames, filenames in os.walk(path):
            dirnames[:] = sorted(name for name in dirnames if name not in _EXCLUDED_DIRS)
            for filename in sorted(filenames):
                candidate = Path(dirpath) / filename
                if is_known_source(
                    candidate,
                    csharp_suffixes=config.languages.csharp_suffixes,
                    clike_suffixes=config.languages.clike_suffixes,
                ):
                    yield candidate


def _scan_file(
    path: Path, config: ScrollmarksConfig, language: str | None, flags: FeatureFlags
) -> List[Marker]:
    if language:
        mode = LanguageMode.parse(language)
    else:
        mode = detect_language_mode(path, csharp_suffixes=config.languages.csharp_suffixes)
        if not is_known_source(
            path,
            csharp_suffixes=config.languages.csharp_suffixes,
            clike_suffixes=config.languages.clike_suffixes,
        ):
            get_logger("cli").info("No language registered for %s; using C-like rules", path)
    get_logger("cli").debug("Scanning %s as %s", path, mode.value)
    snapshot = DocumentSnapshot.from_path(path)
    return DocumentScanner(mode).scan(snapshot, flags)


def _parse_assignments(assignments: List[str]) -> Dict[str, bool]:
    changes: Dict[str, bool] = {}
    for assignment in assignments:
        if "=" not in assignment:
            raise ValueError(f"Expected NAME=VALUE, got {assignment!r}")
        name, raw = assignment.split("=", 1)
        lowered = raw.strip().lower()
        if lowered in {"true", "yes", "on", "1"}:
            changes[name.strip()] = True
        elif lowered in {"false", "no", "off", "0"}:
            changes[name.strip()] = False
        else:
            raise ValueError(f"Setting {name.strip()} expects a boolean, got {raw!r}")
    return changes


def _print_results(results: Dict[str, List[Marker]], *, as_json: bool) -> None:
    if as_json:
        payload = {path: [marker.as_dict() for marker in markers] for path, markers in results.items()}
        print(json.dumps(payload, indent=2))
        return
    show_path = len(results) > 1
    for path, markers in results.items():
        if show_path:
            print(f"{path}:")
        for marker in markers:
            print(f"{marker.line:>6}  {marker.kind.value:<16} {marker.name}")


if __name__ == "__main__":
    main(sys.argv[1:])
