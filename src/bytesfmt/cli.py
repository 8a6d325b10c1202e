"""Command line interface for the bytes formatting toolkit."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Dict, Iterable, Sequence

from rich.console import Console
from rich.markup import escape

from .api import format_bytes, parse_bytes
from .exceptions import BytesFormatError, FormatParseError
from .options import RADIXES
from .utils.logging import configure_logging

console = Console(stderr=True)


def _read_bytes(path: str | None) -> bytes:
    if not path or path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _write_bytes(path: str | None, data: bytes) -> None:
    if not path or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    Path(path).write_bytes(data)


def _read_text(path: str | None, *, encoding: str = "utf-8") -> str:
    if not path or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding=encoding)


def _write_text(path: str | None, data: str, *, encoding: str = "utf-8") -> None:
    if not path or path == "-":
        sys.stdout.write(data + "\n")
        sys.stdout.flush()
        return
    Path(path).write_text(data, encoding=encoding)


def _strip_line_ending(text: str) -> str:
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def _add_format_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--radix", type=int, choices=RADIXES, help="Numeral base (default: 16)")
    parser.add_argument(
        "--min-digits",
        dest="min_integral_digits",
        type=int,
        help="Zero padded digit count per byte (default depends on radix)",
    )
    parser.add_argument("--lower", dest="lower_case", action="store_true", help="Use lower case hex digits")
    parser.add_argument("--prefix", default=None, help="Text placed before every byte")
    parser.add_argument("--suffix", default=None, help="Text placed after every byte")
    parser.add_argument("--separator", default=None, help="Text placed between bytes")
    parser.add_argument(
        "--permissive",
        action="store_true",
        help="Fall back to defaults for invalid numeric options instead of failing",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: $BYTESFMT_LOG_LEVEL or INFO)")


def _options_from_namespace(namespace: argparse.Namespace) -> Dict[str, object]:
    options: Dict[str, object] = {}
    for key in ("radix", "min_integral_digits", "prefix", "suffix", "separator"):
        value = getattr(namespace, key, None)
        if value is not None:
            options[key] = value
    if namespace.lower_case:
        options["lower_case"] = True
    return options


def _handle_format(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(prog="bytesfmt format", description="Format binary input as text.")
    parser.add_argument("-i", "--in", dest="input_path", default="-", help="Binary input file (default: stdin)")
    parser.add_argument("-o", "--out", dest="output_path", default="-", help="Text output file (default: stdout)")
    _add_format_arguments(parser)
    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    data = _read_bytes(args.input_path)
    try:
        text = format_bytes(data, _options_from_namespace(args), strict=not args.permissive)
    except BytesFormatError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 1

    _write_text(args.output_path, text)
    return 0


def _handle_parse(argv: Sequence[str]) -> int:
    parser = argparse.ArgumentParser(prog="bytesfmt parse", description="Parse formatted text back into bytes.")
    parser.add_argument("-i", "--in", dest="input_path", default="-", help="Text input file (default: stdin)")
    parser.add_argument("-o", "--out", dest="output_path", default="-", help="Binary output file (default: stdout)")
    parser.add_argument(
        "--keep-newline",
        action="store_true",
        help="Do not strip a trailing line ending from the input",
    )
    _add_format_arguments(parser)
    args = parser.parse_args(list(argv))
    configure_logging(args.log_level)

    text = _read_text(args.input_path)
    if not args.keep_newline:
        text = _strip_line_ending(text)
    try:
        data = parse_bytes(text, _options_from_namespace(args), strict=not args.permissive)
    except FormatParseError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))} (unit {exc.index}: {escape(repr(exc.unit))})")
        return 1
    except BytesFormatError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 1

    _write_bytes(args.output_path, data)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bytesfmt",
        description="Format byte sequences as radix encoded text and parse them back.",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("format", help="Format binary input as text")
    subparsers.add_parser("parse", help="Parse formatted text back into bytes")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    if not args or args[0] in {"-h", "--help"}:
        build_parser().print_help()
        return 0

    command, rest = args[0], args[1:]

    if command == "format":
        return _handle_format(rest)
    if command == "parse":
        return _handle_parse(rest)

    console.print(f"[red]Error:[/red] unknown command '{escape(command)}'")
    build_parser().print_help()
    return 1


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
