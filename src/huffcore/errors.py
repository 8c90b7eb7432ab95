"""Typed errors for huffcore.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- The core never retries: every operation is pure, so the caller decides.
- Tools map errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_INSUFFICIENT_SYMBOLS = 11
EXIT_SYMBOL_NOT_IN_TABLE = 12
EXIT_INVALID_TREE = 13


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage error (invalid arguments, out-of-range symbol, etc.)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (corrupt bit-string, truncated bytes, round-trip mismatch)"),
    ExitCodeInfo(
        EXIT_INSUFFICIENT_SYMBOLS,
        "INSUFFICIENT_SYMBOLS",
        "Tree construction needs at least two distinct non-zero-frequency symbols",
    ),
    ExitCodeInfo(EXIT_SYMBOL_NOT_IN_TABLE, "SYMBOL_NOT_IN_TABLE", "Encoding asked for a symbol with no code"),
    ExitCodeInfo(EXIT_INVALID_TREE, "INVALID_TREE", "Huffman tree fails the invariant check"),
)

_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE. Do not edit manually.\n")
    lines.append("> Source of truth: `src/huffcore/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the exit codes the developer tools return.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Every library error extends `HuffError` and carries an `exit_code`.\n")
    lines.append("- `--debug` on the tools re-raises errors to show full stack traces.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class HuffError(Exception):
    """Base error for huffcore."""

    exit_code: int = EXIT_GENERIC


class UsageError(HuffError):
    exit_code = EXIT_USAGE


class CorruptPayload(HuffError):
    exit_code = EXIT_GENERIC


class InsufficientSymbols(HuffError):
    exit_code = EXIT_INSUFFICIENT_SYMBOLS

    def __init__(self, distinct: int) -> None:
        super().__init__(
            f"need at least two non-zero frequency symbols, got {distinct}"
        )
        self.distinct = distinct


class SymbolNotInTable(HuffError):
    exit_code = EXIT_SYMBOL_NOT_IN_TABLE

    def __init__(self, symbol: int, position: int | None = None) -> None:
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"symbol {symbol} has no code in the table{where}")
        self.symbol = symbol
        self.position = position


class InvalidTree(HuffError):
    exit_code = EXIT_INVALID_TREE
