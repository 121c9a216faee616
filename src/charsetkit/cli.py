"""Command-line interface for charsetkit."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import charsetkit
from charsetkit._utils import DEFAULT_MAX_BYTES
from charsetkit.detector import ChardetDetector
from charsetkit.errors import CharsetError
from charsetkit.registry import DEFAULT_REGISTRY

_PROG = "charset"


def _read_input(path: str | None) -> bytes:
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _detector(args: argparse.Namespace) -> ChardetDetector:
    return ChardetDetector(
        max_bytes=args.max_bytes, should_rename_legacy=args.rename_legacy
    )


def _fail(error: CharsetError) -> NoReturn:
    print(f"{_PROG}: {error.title}: {error}", file=sys.stderr)
    raise SystemExit(1)


def _run_detect(args: argparse.Namespace) -> None:
    detector = _detector(args)
    inputs = args.files or ["-"]
    failed = False
    for name in inputs:
        try:
            data = _read_input(name)
        except OSError as e:
            print(f"{_PROG}: {name}: {e}", file=sys.stderr)
            failed = True
            continue
        result = charsetkit.classify(data, detector)
        label = "stdin" if name == "-" else name
        if args.minimal:
            print(result.label)
        elif args.json:
            print(json.dumps(result.to_dict(), ensure_ascii=False))
        elif result.language:
            print(
                f"{label}: {result.label} ({result.language}) "
                f"with confidence {result.confidence}"
            )
        else:
            print(f"{label}: {result.label} with confidence {result.confidence}")
    if failed:
        raise SystemExit(1)


def _run_decode(args: argparse.Namespace) -> None:
    data = _read_input(args.input)
    try:
        text = charsetkit.decode(data, args.charset, detector=_detector(args))
        output = charsetkit.encode(text, "utf-8")
    except CharsetError as e:
        _fail(e)
    sys.stdout.buffer.write(output)
    sys.stdout.buffer.flush()


def _run_encode(args: argparse.Namespace) -> None:
    data = _read_input(args.input)
    try:
        text = charsetkit.decode(data, "utf-8")
        encoded = charsetkit.encode(text, args.charset)
    except CharsetError as e:
        _fail(e)
    sys.stdout.buffer.write(encoded)
    sys.stdout.buffer.flush()


def _run_list(args: argparse.Namespace) -> None:
    for label in DEFAULT_REGISTRY.labels():
        print(label)


def _add_detection_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--max-bytes",
        type=int,
        default=DEFAULT_MAX_BYTES,
        help="Number of leading bytes examined by detection",
    )
    parser.add_argument(
        "--rename-legacy",
        action="store_true",
        help="Report Windows supersets instead of legacy ISO encodings",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=_PROG,
        description="Detect character encodings and convert between them.",
    )
    parser.add_argument(
        "--version", action="version", version=f"charsetkit {charsetkit.__version__}"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    detect = commands.add_parser("detect", help="Detect the charset of input")
    detect.add_argument("files", nargs="*", help="Files to detect encoding of")
    output = detect.add_mutually_exclusive_group()
    output.add_argument(
        "--minimal", action="store_true", help="Output only the charset name"
    )
    output.add_argument(
        "--json", action="store_true", help="Output the detection record as JSON"
    )
    _add_detection_options(detect)
    detect.set_defaults(run=_run_detect)

    decode = commands.add_parser("decode", help="Decode input to UTF-8 text")
    decode.add_argument(
        "charset", nargs="?", default=None, help="Source charset (detected if omitted)"
    )
    decode.add_argument("-i", "--input", help="Input file (default: stdin)")
    _add_detection_options(decode)
    decode.set_defaults(run=_run_decode)

    encode = commands.add_parser("encode", help="Encode UTF-8 text to a charset")
    encode.add_argument("charset", help="Target charset")
    encode.add_argument("-i", "--input", help="Input file (default: stdin)")
    encode.set_defaults(run=_run_encode)

    labels = commands.add_parser("list", help="List known charset labels")
    labels.set_defaults(run=_run_list)
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the ``charset`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s"
        )
    if getattr(args, "max_bytes", DEFAULT_MAX_BYTES) < 1:
        parser.error("--max-bytes must be a positive integer")
    try:
        args.run(args)
    except OSError as e:
        print(f"{_PROG}: {e}", file=sys.stderr)
        raise SystemExit(1) from None


if __name__ == "__main__":
    main()
