"""Permutation trees: the decomposition of a permutation into its intervals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Sequence, Tuple


class NodeType(Enum):
    """Kinds of permutation tree nodes."""

    LEAF = auto()
    INCR = auto()
    DECR = auto()
    FULL = auto()
    PARTIAL = auto()


@dataclass
class PermTreeNode:
    """A node covering positions ``l..r`` whose values are ``lo..hi`` (inclusive).

    ``c`` holds the two children, or ``(-1, -1)`` for a leaf. PARTIAL nodes are
    helper nodes whose value set is not contiguous.
    """

    c: Tuple[int, int]
    type: NodeType
    l: int
    r: int
    lo: int
    hi: int


@dataclass
class _Candidate:
    left: int
    lo: int
    lo_gap: int
    hi: int
    hi_gap: int
    node: int


class PermTree:
    """Binary permutation tree of a permutation of ``0..n-1``.

    Node ``2*i`` is the leaf for position ``i``; the inner node whose right child
    starts at position ``i`` is stored at ``2*i - 1``.
    """

    def __init__(self, a: Sequence[int]) -> None:
        values = list(a)
        n = len(values)
        if sorted(values) != list(range(n)):
            raise ValueError("input must be a permutation of 0..n-1")
        self.nodes: List[PermTreeNode] = []
        self.root = -1
        if n == 0:
            return

        nxt_earlier = list(range(1, n + 1))
        prv_earlier = list(range(-1, n - 1))
        for v in reversed(values):
            p, q = prv_earlier[v], nxt_earlier[v]
            if p != -1:
                nxt_earlier[p] = q
            if q != n:
                prv_earlier[q] = p

        nodes: List[PermTreeNode] = [None] * (2 * n - 1)  # type: ignore[list-item]
        stack: List[_Candidate] = []

        for i, v in enumerate(values):
            while stack and (v < stack[-1].lo_gap or v > stack[-1].hi_gap):
                top, below = stack[-1], stack[-2]
                below.lo = min(below.lo, top.lo)
                below.hi = max(below.hi, top.hi)
                idx = 2 * top.left - 1
                nodes[idx] = PermTreeNode(
                    (below.node, top.node), NodeType.PARTIAL, below.left, i - 1, below.lo, below.hi
                )
                stack.pop()
                stack[-1].node = idx

            stack.append(_Candidate(i, v, prv_earlier[v] + 1, v, nxt_earlier[v] - 1, 2 * i))
            nodes[2 * i] = PermTreeNode((-1, -1), NodeType.LEAF, i, i, v, v)

            while len(stack) >= 2 and (
                max(stack[-1].hi, stack[-2].hi) - min(stack[-1].lo, stack[-2].lo)
                == i - stack[-2].left
            ):
                top, below = stack[-1], stack[-2]
                below.lo = min(below.lo, top.lo)
                below.hi = max(below.hi, top.hi)
                if below.lo == top.lo:
                    kind = NodeType.DECR
                elif below.hi == top.hi:
                    kind = NodeType.INCR
                else:
                    kind = NodeType.FULL
                idx = 2 * top.left - 1
                nodes[idx] = PermTreeNode(
                    (below.node, top.node), kind, below.left, i, below.lo, below.hi
                )
                stack.pop()
                stack[-1].node = idx

        if len(stack) != 1:
            raise RuntimeError("permutation tree construction did not converge")
        self.nodes = nodes
        self.root = stack[0].node

    def __getitem__(self, idx: int) -> PermTreeNode:
        return self.nodes[idx]

    def __len__(self) -> int:
        return len(self.nodes)