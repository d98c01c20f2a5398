"""Optimal alphabetic (order-preserving) binary codes via Garsia-Wachs."""

from __future__ import annotations

from typing import Iterable, List, Sequence


def alphabetic_huffman_code(weights: Iterable) -> List[int]:
    """Depth of every leaf in an optimal alphabetic binary code for ``weights``.

    The code keeps the leaves in their original order and minimises
    ``sum(weights[i] * depth[i])``.
    """
    weights = list(weights)
    n = len(weights)
    if n == 0:
        return []

    items = [(w, idx) for idx, w in enumerate(weights)]
    children: List[tuple] = []
    start = 1
    while len(items) > 1:
        # Smallest centre i with items[i-1] <= items[i+1] (a missing right end is infinite).
        i = max(start, 1)
        while i + 1 < len(items) and items[i + 1][0] < items[i - 1][0]:
            i += 1
        (wa, ida), (wb, idb) = items[i - 1], items[i]
        node = n + len(children)
        children.append((ida, idb))
        merged = wa + wb
        del items[i - 1:i + 1]

        # Reinsert right after the last earlier element not smaller than the merged weight.
        j = i - 2
        while j >= 0 and items[j][0] < merged:
            j -= 1
        items.insert(j + 1, (merged, node))
        start = j

    depth = [0] * (2 * n - 1)
    for offset in range(len(children) - 1, -1, -1):
        parent_depth = depth[n + offset]
        left, right = children[offset]
        depth[left] = parent_depth + 1
        depth[right] = parent_depth + 1
    return depth[:n]


def binary_code_depths_to_lca_depths(depths: Sequence[int]) -> List[int]:
    """Depths of the lowest common ancestors of adjacent leaves.

    The result has length ``len(depths) - 1`` and is suitable for building a
    Cartesian tree. Raises ValueError if ``depths`` does not describe a full
    binary tree.
    """
    depths = list(depths)
    if not depths:
        return []
    res: List[int] = []
    stack: List[int] = []
    for v in depths:
        while stack and stack[-1] == v:
            stack.pop()
            v -= 1
        if stack and stack[-1] >= v:
            raise ValueError("depths do not describe a full binary tree")
        if v != 0:
            res.append(v - 1)
        stack.append(v)
    if stack != [0]:
        raise ValueError("depths do not describe a full binary tree")
    return res