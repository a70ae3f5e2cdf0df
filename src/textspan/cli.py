from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict

from .errors import SpanError
from .spans import (
    Span,
    enclosing,
    enclosing_from_inclusive_to_exclusive_start,
    gap,
    overlaps,
    parse,
)


logger = logging.getLogger(__name__)

_BINARY = {
    "enclosing": (enclosing, "Span from the earlier start to the later span's end"),
    "gap": (gap, "Span strictly between two spans"),
    "inner": (
        enclosing_from_inclusive_to_exclusive_start,
        "Span from the start of A up to the start of B",
    ),
    "overlaps": (overlaps, "Whether two spans share an offset"),
}


def _to_jsonable(obj):
    if isinstance(obj, Span):
        return {**asdict(obj), "end": obj.end, "text": obj.format()}
    if isinstance(obj, list):
        return [_to_jsonable(x) for x in obj]
    return obj


def _to_text(obj) -> str:
    if isinstance(obj, bool):
        return "true" if obj else "false"
    return str(obj)


def _run(args: argparse.Namespace) -> list[object]:
    if args.command == "format":
        return [Span(args.start, args.length)]
    if args.command == "parse":
        return [parse(text) for text in args.spans]

    fn, _ = _BINARY[args.command]
    return [fn(parse(args.a), parse(args.b))]


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="textspan", description="Compute and convert source text spans")
    ap.add_argument("--json", action="store_true", help="Print results as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("format", help="Print the canonical [start:end] form")
    p.add_argument("start", type=int)
    p.add_argument("length", type=int)

    p = sub.add_parser("parse", help="Parse [start:end] text")
    p.add_argument("spans", nargs="+", metavar="SPAN")

    for name, (_, help_text) in _BINARY.items():
        p = sub.add_parser(name, help=help_text)
        p.add_argument("a", metavar="A")
        p.add_argument("b", metavar="B")

    args = ap.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.debug("running %s", args.command)

    try:
        results = _run(args)
    except SpanError as e:
        print(f"textspan: error: {e}", file=sys.stderr)
        return 1

    for res in results:
        if args.json:
            print(json.dumps(_to_jsonable(res), sort_keys=True))
        elif args.command == "parse":
            print(f"start={res.start} length={res.length} end={res.end}")
        else:
            print(_to_text(res))
    return 0
