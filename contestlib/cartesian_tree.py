"""Cartesian trees whose leaves are the gaps between array cells."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Any, Callable, List, Sequence

from contestlib.comparators import reverse_comparator


@dataclass
class CartesianTreeNode:
    """A tree node covering cells ``l..r`` inclusive, split at cell ``m``.

    Leaves (even indices) are empty ranges with ``r == m == l - 1``.
    """

    l: int
    m: int
    r: int
    c: List[int] = field(default_factory=lambda: [-1, -1])


class CartesianTree:
    """Nodes ``2*i`` are the gap before cell ``i``; nodes ``2*i+1`` hold cell ``i``."""

    def __init__(self, nodes: List[CartesianTreeNode] | None = None, root: int = -1) -> None:
        self.nodes: List[CartesianTreeNode] = nodes if nodes is not None else []
        self.root = root

    def __getitem__(self, idx: int) -> CartesianTreeNode:
        return self.nodes[idx]

    def __len__(self) -> int:
        return len(self.nodes)

    @classmethod
    def build_min_tree(
        cls, v: Sequence[Any], less: Callable[[Any, Any], bool] = operator.lt
    ) -> "CartesianTree":
        """Min-Cartesian tree; among equal cells the earlier one is higher."""
        n = len(v)
        nodes = [CartesianTreeNode(0, 0, 0) for _ in range(2 * n + 1)]
        stack: List[int] = []
        root = -1
        for i in range(n + 1):
            cur = 2 * i
            nodes[cur] = CartesianTreeNode(l=i, m=i - 1, r=i - 1)
            while stack and (i == n or less(v[i], v[nodes[stack[-1]].m])):
                nxt = stack.pop()
                nodes[nxt].c[1] = cur
                nodes[nxt].r = nodes[cur].r
                cur = nxt
            if i == n:
                root = cur
                break
            inner = nodes[2 * i + 1]
            inner.l = nodes[cur].l
            inner.m = i
            inner.c[0] = cur
            stack.append(2 * i + 1)
        return cls(nodes, root)

    @classmethod
    def build_max_tree(
        cls, v: Sequence[Any], less: Callable[[Any, Any], bool] = operator.lt
    ) -> "CartesianTree":
        """Max-Cartesian tree; among equal cells the earlier one is higher."""
        return cls.build_min_tree(v, reverse_comparator(less))