from __future__ import annotations

from itertools import combinations
from typing import List, Optional

from huffcore.core.freqtable import NUM_SYMBOLS
from huffcore.core.htree import HuffmanNode, require_htree
from huffcore.errors import SymbolNotInTable

CodeTable = List[Optional[str]]


def build_code_table(root: HuffmanNode) -> CodeTable:
    """
    Albero -> tabella densa di 256 codici ('0' = sinistra, '1' = destra).
    None per i simboli che non compaiono come foglia.
    """
    require_htree(root)
    codes: CodeTable = [None] * NUM_SYMBOLS

    def dfs(node: HuffmanNode, path: str) -> None:
        if node.is_leaf:
            codes[node.symbol] = path
            return
        dfs(node.left, path + "0")
        dfs(node.right, path + "1")

    dfs(root, "")
    return codes


def code_symbols(table: CodeTable) -> List[int]:
    return [sym for sym, code in enumerate(table) if code is not None]


def is_prefix_free(table: CodeTable) -> bool:
    present = [code for code in table if code is not None]
    for a, b in combinations(present, 2):
        if a.startswith(b) or b.startswith(a):
            return False
    return True


def encoded_bit_length(freq: List[int], table: CodeTable) -> int:
    """Somma di freq[s] * len(code[s]): lunghezza esatta del bit-string codificato."""
    total = 0
    for sym, f in enumerate(freq):
        if f == 0:
            continue
        code = table[sym]
        if code is None:
            raise SymbolNotInTable(sym)
        total += f * len(code)
    return total
