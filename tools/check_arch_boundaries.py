from __future__ import annotations

import sys
from pathlib import Path


def main() -> int:
    repo_root = Path(__file__).resolve().parents[1]
    test_path = repo_root / "tests" / "test_arch_boundaries.py"
    if not test_path.is_file():
        print("ERROR: tests/test_arch_boundaries.py not found.", file=sys.stderr)
        return 3

    ns: dict[str, object] = {"__file__": str(test_path)}
    code = test_path.read_text(encoding="utf-8")
    exec(compile(code, str(test_path), "exec"), ns, ns)

    checks = [
        name
        for name, fn in sorted(ns.items())
        if name.startswith("test_") and callable(fn)
    ]
    if not checks:
        print("ERROR: no boundary checks found in tests/test_arch_boundaries.py.", file=sys.stderr)
        return 3

    failed = 0
    for name in checks:
        try:
            ns[name]()  # type: ignore[operator]
        except AssertionError as e:
            failed += 1
            print(f"[{name}] {e}", file=sys.stderr)

    if failed:
        return 2
    print(f"OK: architecture boundaries respected ({len(checks)} checks).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
