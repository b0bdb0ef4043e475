import heapq
import itertools
import logging
from typing import List, Optional

import numpy as np

from bitpack import BitReader

logger = logging.getLogger(__name__)

BITS_PER_WORD = 8
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE  # end-of-stream sentinel, never a real byte

class Node:
    def __init__(self, symbol=0, weight=0, left=None, right=None):
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf():
            return f"Node(symbol={self.symbol}, weight={self.weight})"
        return f"Node(weight={self.weight}, left={self.left!r}, right={self.right!r})"

def count_weights(data) -> np.ndarray:
    """
    Weight table with ALPH_SIZE + 1 slots, indexed by symbol.
    data: bytes-like, or a BitReader read 8 bits at a time to the end
    (the caller resets it before encoding).
    The sentinel slot is always exactly 1.
    """
    if isinstance(data, BitReader):
        vals = []
        while True:
            v = data.read_bits(BITS_PER_WORD)
            if v is None:
                break
            vals.append(v)
        buf = np.array(vals, dtype=np.uint8)
    else:
        buf = np.frombuffer(memoryview(data), dtype=np.uint8)
    weights = np.bincount(buf, minlength=ALPH_SIZE + 1).astype(np.int64)
    weights[PSEUDO_EOF] = 1
    logger.debug("counted %d bytes, %d distinct", buf.size, int(np.count_nonzero(weights[:ALPH_SIZE])))
    return weights

def build_tree(weights) -> Node:
    # (weight, seq, node): equal weights pop in insertion order
    seq = itertools.count()
    pq = [(int(w), next(seq), Node(symbol=s, weight=int(w)))
          for s, w in enumerate(weights) if w > 0]
    heapq.heapify(pq)
    while len(pq) > 1:
        wa, _, a = heapq.heappop(pq)
        wb, _, b = heapq.heappop(pq)
        heapq.heappush(pq, (wa + wb, next(seq), Node(weight=wa + wb, left=a, right=b)))
    root = pq[0][2]
    logger.debug("built tree, root weight %d", root.weight)
    return root

def build_codebook(node: Node, prefix: str = "", code: Optional[List] = None) -> List[Optional[str]]:
    """Symbol -> '0'/'1' path string; None for symbols not in the tree."""
    if code is None:
        code = [None] * (ALPH_SIZE + 1)
    if node.is_leaf():
        code[node.symbol] = prefix
    else:
        build_codebook(node.left, prefix + "0", code)
        build_codebook(node.right, prefix + "1", code)
    return code

def leaves(node: Node) -> List[Node]:
    """Leaves in left-to-right order."""
    if node.is_leaf():
        return [node]
    return leaves(node.left) + leaves(node.right)
