#!/usr/bin/env python3
"""Deterministic round-trip smoke test for huffcore.

Goal:
- repeatable random inputs (seeded) pushed through the whole chain:
  freq -> tree -> code table -> encode -> pack -> unpack -> decode
- produce a JSON report
- fail fast (non-zero exit) on any mismatch

Usage examples:
  python tools/smoke_roundtrip.py --iters 50
  python tools/smoke_roundtrip.py --iters 200 --seed 123 --json-out /tmp/report.json
  python tools/smoke_roundtrip.py --input some_file.bin
"""

from __future__ import annotations

import argparse
import hashlib
import json
import random
import sys
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from huffcore.core.codetable import is_prefix_free
from huffcore.core.htree import is_htree
from huffcore.errors import EXIT_GENERIC, HuffError
from huffcore.huffman import (
    build_code_table,
    build_frequency_table,
    build_tree,
    decode,
    encode,
    pack,
    unpack,
)


@dataclass
class CaseResult:
    name: str
    ok: bool
    n: int
    distinct: int
    nbits: int
    packed_bytes: int
    sha256: str
    error: str | None = None


def _gen_input(rng: random.Random, max_bytes: int) -> bytes:
    n = rng.randint(2, max(2, max_bytes))
    # alfabeto piccolo o pieno, per avere alberi sia bassi che profondi
    alphabet = rng.sample(range(256), rng.randint(2, 256))
    weights = [rng.random() ** 3 for _ in alphabet]
    data = rng.choices(alphabet, weights=weights, k=n)
    data[0], data[1] = alphabet[0], alphabet[1]
    return bytes(data)


def roundtrip_case(name: str, data: bytes) -> CaseResult:
    freq = build_frequency_table(data)
    tree = build_tree(freq)
    table = build_code_table(tree)
    bits = encode(table, data)
    packed = pack(bits)
    back_bits = unpack(packed, len(packed))
    decoded, count = decode(tree, back_bits, len(data))

    problems: list[str] = []
    if not is_htree(tree):
        problems.append("tree invariant violated")
    if tree.freq != len(data):
        problems.append(f"root weight {tree.freq} != input length {len(data)}")
    if not is_prefix_free(table):
        problems.append("code table not prefix-free")
    if back_bits[: len(bits)] != bits or set(back_bits[len(bits):]) - {"0"}:
        problems.append("pack/unpack mismatch")
    if decoded != data or count != len(data):
        problems.append("decoded data mismatch")

    return CaseResult(
        name=name,
        ok=not problems,
        n=len(data),
        distinct=sum(1 for f in freq if f > 0),
        nbits=len(bits),
        packed_bytes=len(packed),
        sha256=hashlib.sha256(data).hexdigest(),
        error="; ".join(problems) or None,
    )


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="huffcore deterministic round-trip smoke test")
    ap.add_argument("--iters", type=int, default=20, help="Number of random inputs (default: 20)")
    ap.add_argument("--seed", type=int, default=12345, help="Deterministic RNG seed (default: 12345)")
    ap.add_argument("--max-bytes", type=int, default=20_000, help="Max input size (default: 20000)")
    ap.add_argument("--input", type=Path, action="append", default=[], help="Also round-trip this file")
    ap.add_argument("--json-out", type=Path, default=None, help="Write JSON report to file")
    ap.add_argument("--debug", action="store_true", help="Show stack traces on errors")
    ns = ap.parse_args(argv)

    rng = random.Random(ns.seed)
    report: dict[str, Any] = {
        "ok": True,
        "seed": ns.seed,
        "iters": ns.iters,
        "max_bytes": ns.max_bytes,
        "cases": [],
    }

    try:
        cases: list[tuple[str, bytes]] = [
            (f"random_{i:03d}", _gen_input(rng, ns.max_bytes)) for i in range(ns.iters)
        ]
        for p in ns.input:
            cases.append((str(p), p.read_bytes()))

        for name, data in cases:
            res = roundtrip_case(name, data)
            report["cases"].append(asdict(res))
            if not res.ok:
                report["ok"] = False
                print(f"[huffcore] FAIL {name}: {res.error}", file=sys.stderr)

    except HuffError as e:
        if ns.debug:
            raise
        print(f"[huffcore] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)

    text = json.dumps(report, indent=2, sort_keys=True)
    if ns.json_out:
        ns.json_out.parent.mkdir(parents=True, exist_ok=True)
        ns.json_out.write_text(text + "\n", encoding="utf-8")
        print(f"[huffcore] wrote {ns.json_out}", file=sys.stderr)
    else:
        print(text)

    if not report["ok"]:
        return EXIT_GENERIC
    print(f"[huffcore] OK: {len(report['cases'])} round trips", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
