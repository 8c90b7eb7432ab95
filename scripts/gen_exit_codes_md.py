#!/usr/bin/env python3
"""Generate docs/exit_codes.md from src/huffcore/errors.py (single source of truth).

  python scripts/gen_exit_codes_md.py           # (re)write the file
  python scripts/gen_exit_codes_md.py --check   # exit 1 if the file is stale
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Render docs/exit_codes.md")
    ap.add_argument("--check", action="store_true", help="Only verify the file is up to date")
    ns = ap.parse_args(argv)

    repo = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo / "src"))

    from huffcore import errors  # noqa: E402

    out = repo / "docs" / "exit_codes.md"
    text = errors.render_exit_codes_markdown()

    if ns.check:
        current = out.read_text(encoding="utf-8") if out.is_file() else ""
        if current != text:
            print(f"[huffcore] {out} is stale; run scripts/gen_exit_codes_md.py", file=sys.stderr)
            return 1
        print(f"[huffcore] {out} up to date")
        return 0

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    print(f"[huffcore] wrote {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
