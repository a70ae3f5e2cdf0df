from __future__ import annotations

import argparse
from pathlib import Path

from textspan import parse
from textspan.testing import describe_pair


_DEFAULT_BASELINE = Path(__file__).resolve().parents[1] / "tests" / "fixtures" / "combinator_baseline.txt"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="update_baseline")
    ap.add_argument("--path", default=str(_DEFAULT_BASELINE))
    args = ap.parse_args(argv)

    path = Path(args.path).resolve()
    out: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        if not line.strip() or line.startswith("#"):
            out.append(line)
            continue
        a, b = line.split()[:2]
        out.append(describe_pair(parse(a), parse(b)))

    path.write_text("\n".join(out) + "\n", encoding="utf-8")
    print(str(path))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
