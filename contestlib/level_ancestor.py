"""Level ancestor, LCA and distance queries via heavy-path preorder."""

from __future__ import annotations

from typing import List, Sequence, Tuple


class LevelAncestor:
    """Queries on a rooted forest given by a parent array (``-1`` marks roots)."""

    def __init__(self, par: Sequence[int]) -> None:
        par = list(par)
        n = len(par)
        self.n = n
        children: List[List[int]] = [[] for _ in range(n)]
        for i, p in enumerate(par):
            if p != -1:
                children[p].append(i)

        size = [1] * n
        self._preorder = [0] * n
        self._idx = [0] * n
        self._heavy: List[Tuple[int, int]] = [(-1, 0)] * n
        next_idx = 0

        for root in (i for i, p in enumerate(par) if p == -1):
            order = [root]
            for cur in order:
                order.extend(children[cur])
            for cur in reversed(order):
                ch = children[cur]
                if ch:
                    heavy = max(range(len(ch)), key=lambda k: size[ch[k]])
                    ch[0], ch[heavy] = ch[heavy], ch[0]
                    size[cur] += sum(size[c] for c in ch)

            stack = [(root, True)]
            while stack:
                cur, is_root = stack.pop()
                pos = next_idx
                next_idx += 1
                self._idx[cur] = pos
                self._preorder[pos] = cur
                if is_root:
                    self._heavy[pos] = (-1 if par[cur] == -1 else self._idx[par[cur]], 1)
                else:
                    top, dist = self._heavy[pos - 1]
                    self._heavy[pos] = (top, dist + 1)
                ch = children[cur]
                stack.extend((c, k != 0) for k, c in reversed(list(enumerate(ch))))

    def get_ancestor(self, a: int, k: int) -> int:
        """The ``k``-th ancestor of ``a``, or -1 if it does not exist."""
        if k < 0:
            raise ValueError("k must be non-negative")
        pos = self._idx[a]
        while pos != -1 and k:
            top, dist = self._heavy[pos]
            if k >= dist:
                k -= dist
                pos = top
            else:
                pos -= k
                k = 0
        return -1 if pos == -1 else self._preorder[pos]

    def lca(self, a: int, b: int) -> int:
        """Lowest common ancestor of ``a`` and ``b``, or -1 if in different trees."""
        a, b = self._idx[a], self._idx[b]
        while True:
            if a > b:
                a, b = b, a
            top, dist = self._heavy[b]
            if a > b - dist:
                return self._preorder[a]
            b = top
            if b == -1:
                return -1

    def dist(self, a: int, b: int) -> int:
        """Number of edges between ``a`` and ``b``, or -1 if in different trees."""
        a, b = self._idx[a], self._idx[b]
        res = 0
        while True:
            if a > b:
                a, b = b, a
            top, dist = self._heavy[b]
            if a > b - dist:
                return res + b - a
            res += dist
            b = top
            if b == -1:
                return -1