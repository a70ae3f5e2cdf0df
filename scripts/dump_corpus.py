from __future__ import annotations

import argparse

from textspan.testing import describe_pair, generate_spans


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="dump_corpus")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=100)
    args = ap.parse_args(argv)

    spans = generate_spans(seed=args.seed, count=args.count)
    for a, b in zip(spans, spans[1:]):
        print(describe_pair(a, b))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
