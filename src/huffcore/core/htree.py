from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import List, Optional

from huffcore.core.freqtable import NUM_SYMBOLS
from huffcore.core.pqueue import PriorityQueue
from huffcore.errors import InsufficientSymbols, InvalidTree


# -------------------
# Strutture di base Huffman
# -------------------
@dataclass(frozen=True, slots=True)
class HuffmanNode:
    freq: int
    symbol: Optional[int] = None  # 0-255 per foglie, None per interni
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


# -------------------
# Invarianti
# -------------------
def is_htree_leaf(node: Optional[HuffmanNode]) -> bool:
    if node is None or node.left is not None or node.right is not None:
        return False
    if node.symbol is None or not (0 <= node.symbol < NUM_SYMBOLS):
        return False
    return node.freq > 0


def is_htree_interior(node: Optional[HuffmanNode]) -> bool:
    if node is None or node.left is None or node.right is None:
        return False
    if node.freq != node.left.freq + node.right.freq:
        return False
    return is_htree(node.left) and is_htree(node.right)


def is_htree(node: Optional[HuffmanNode]) -> bool:
    """True se node è una foglia valida oppure un nodo interno valido (ricorsivo)."""
    return is_htree_leaf(node) or is_htree_interior(node)


def require_htree(node: Optional[HuffmanNode]) -> HuffmanNode:
    if node is None or not is_htree(node):
        raise InvalidTree("Huffman tree fails the invariant check")
    return node


# -------------------
# Costruzione
# -------------------
def build_huffman_tree(freq: List[int]) -> HuffmanNode:
    """
    freq (256 conteggi) -> radice dell'albero di Huffman.

    Le foglie entrano nella coda in ordine di simbolo crescente; a parità di
    frequenza si estrae prima il nodo inserito prima. Il primo estratto
    diventa il figlio sinistro, il secondo il destro.
    """
    if len(freq) > NUM_SYMBOLS:
        raise InvalidTree(f"frequency table has {len(freq)} entries (max {NUM_SYMBOLS})")

    distinct = sum(1 for f in freq if f > 0)
    if distinct < 2:
        raise InsufficientSymbols(distinct)

    queue: PriorityQueue[HuffmanNode] = PriorityQueue()
    for sym, f in enumerate(freq):
        if f > 0:
            queue.insert(HuffmanNode(freq=f, symbol=sym), f)

    while True:
        first = queue.extract_min()
        if queue.is_empty():
            break
        second = queue.extract_min()
        parent = HuffmanNode(freq=first.freq + second.freq, left=first, right=second)
        queue.insert(parent, parent.freq)

    if not is_htree(first):
        raise InvalidTree("construction produced an invalid tree")
    return first


# -------------------
# Visite
# -------------------
def iter_leaves(tree: HuffmanNode) -> Iterator[HuffmanNode]:
    """Foglie da sinistra a destra."""
    stack = [tree]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            yield node
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def tree_depth(tree: HuffmanNode) -> int:
    if tree.is_leaf:
        return 0
    depths = [tree_depth(c) for c in (tree.left, tree.right) if c is not None]
    return 1 + max(depths)
