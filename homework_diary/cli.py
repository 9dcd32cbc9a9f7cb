"""
homework_diary/cli.py

Command-line interface for the homework sentence formatter.

Examples:
    homework-diary format --subject Maths --activity Reading --chapter 3
    homework-diary batch --input rows.json --fonts-dir server/fonts
    homework-diary languages
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from pydantic import ValidationError

from homework_diary.adapters.fonts.filesystem_catalog import FileSystemFontCatalog
from homework_diary.core.domain.models import ActivityInput
from homework_diary.core.domain.packs import list_packs
from homework_diary.core.use_cases.format_homework import FormatHomework
from homework_diary.shared.config import settings
from homework_diary.shared.logging_config import configure_logging

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="homework-diary",
        description="Format homework rows as display sentences (English, Telugu, Hindi).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level for diagnostics written to stderr.",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    # `format` command
    fmt = subparsers.add_parser(
        "format",
        help="Format a single homework row given as options.",
    )
    fmt.add_argument("--subject", required=True, help="Subject name (drives the language).")
    fmt.add_argument("--activity", default="", help="Activity type, e.g. 'Reading' or 'Test'.")
    fmt.add_argument("--source", default=None, help="e.g. 'Textbook'.")
    fmt.add_argument("--chapter", default=None)
    fmt.add_argument("--page", default=None)
    fmt.add_argument("--description", default="", help="Usually question numbers.")
    fmt.add_argument(
        "--english",
        action="store_true",
        help="Force the English sentence regardless of subject.",
    )
    fmt.add_argument(
        "--json",
        action="store_true",
        help="Print the full result (language, isTest) as JSON.",
    )
    fmt.add_argument(
        "--fonts-dir",
        default=settings.FONTS_DIR,
        help="Directory with the Telugu/Devanagari TTF files.",
    )

    # `batch` command
    batch = subparsers.add_parser(
        "batch",
        help="Format a JSON list of homework rows.",
    )
    batch.add_argument(
        "--input",
        "-i",
        metavar="PATH",
        help=(
            "JSON file holding a list of rows or {\"rows\": [...]}. "
            "If omitted or '-', read from stdin."
        ),
    )
    batch.add_argument(
        "--english",
        action="store_true",
        help="Force English sentences for every row.",
    )
    batch.add_argument(
        "--fonts-dir",
        default=settings.FONTS_DIR,
        help="Directory with the Telugu/Devanagari TTF files.",
    )

    # `languages` command
    subparsers.add_parser(
        "languages",
        help="List the registered language packs.",
    )

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_rows(path: Optional[str]) -> List[Any]:
    """
    Load a JSON list of rows from a file or stdin.
    """
    if not path or path == "-":
        raw = sys.stdin.read()
    else:
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise SystemExit(f"Error: cannot read {path} ({exc}).") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Error: invalid JSON input ({exc}).") from exc

    if isinstance(data, dict) and "rows" in data:
        data = data["rows"]

    if not isinstance(data, list):
        raise SystemExit("Error: expected a JSON list of rows (or an object with 'rows').")

    return data


def _dump(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_format(args: argparse.Namespace) -> int:
    activity = ActivityInput(
        activity_type=args.activity,
        subject_name=args.subject,
        source=args.source,
        chapter=args.chapter,
        page=args.page,
        description=args.description,
    )

    use_case = FormatHomework(FileSystemFontCatalog(args.fonts_dir))
    result = asyncio.run(use_case.execute(activity, english_only=args.english))

    if args.json:
        print(_dump(result.model_dump(mode="json", by_alias=True)))
    else:
        print(result.text)
    return 0


def _cmd_batch(args: argparse.Namespace) -> int:
    raw_rows = _load_rows(args.input)

    try:
        rows = [ActivityInput.model_validate(row) for row in raw_rows]
    except ValidationError as exc:
        raise SystemExit(f"Error: invalid homework row ({exc.error_count()} errors).\n{exc}") from exc

    use_case = FormatHomework(FileSystemFontCatalog(args.fonts_dir))
    results = asyncio.run(use_case.execute_batch(rows, english_only=args.english))

    print(_dump([r.model_dump(mode="json", by_alias=True) for r in results]))
    return 0


def _cmd_languages(args: argparse.Namespace) -> int:
    for pack in list_packs():
        print(f"{pack.language.value}\t{pack.script.value}\t{pack.test_marker}")
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

_COMMANDS = {
    "format": _cmd_format,
    "batch": _cmd_batch,
    "languages": _cmd_languages,
}


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(log_format="console", log_level=args.log_level)

    handler = _COMMANDS.get(args.command)
    if handler is None:
        parser.error(f"Unknown command: {args.command}")
        return

    raise SystemExit(handler(args))


if __name__ == "__main__":
    main()
