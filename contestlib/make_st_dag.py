"""Orienting a graph into a DAG with a single source and a single sink."""

from __future__ import annotations

from typing import List, Optional, Sequence


def make_st_dag(
    adj: Sequence[Sequence[int]], source: Optional[int] = None, sink: Optional[int] = None
) -> List[int]:
    """Topological order in which ``source`` and ``sink`` are the only source and sink.

    Orient every edge from the earlier to the later vertex of the returned order.
    Biconnected components not on the path from source to sink are left out.
    When no endpoints are given, the source is vertex 0 and the sink its first
    neighbour.
    """
    n = len(adj)
    if n == 0:
        return []

    if source is None and sink is None:
        source = 0
    if source is None:
        source = adj[sink][0] if adj[sink] else sink
    if sink is None:
        sink = adj[source][0] if adj[source] else source

    depth = [-1] * n
    lowval = [0] * n
    has_sink = [False] * n
    children: List[List[int]] = [[] for _ in range(n)]

    depth[source] = 0
    has_sink[source] = source == sink
    stack = [(source, -1, iter(adj[source]))]
    while stack:
        cur, prv, it = stack[-1]
        for nxt in it:
            if nxt == prv:
                continue
            if depth[nxt] == -1:
                children[cur].append(nxt)
                depth[nxt] = lowval[nxt] = depth[cur] + 1
                has_sink[nxt] = nxt == sink
                stack.append((nxt, cur, iter(adj[nxt])))
                break
            if depth[nxt] < depth[cur]:
                lowval[cur] = min(lowval[cur], depth[nxt])
        else:
            stack.pop()
            if prv != -1:
                lowval[prv] = min(lowval[prv], lowval[cur])
                if has_sink[cur]:
                    has_sink[prv] = True
            continue
        lowval[cur] = min(lowval[cur], depth[cur])

    # edge_dir[depth] is true when that tree edge's subtree goes after its parent.
    edge_dir = [False] * n
    lst_nxt = [-1] * n
    frames = [[source, (source, source), iter(children[source]), True]]
    head = source
    while frames:
        frame = frames[-1]
        cur = frame[0]
        for nxt in frame[2]:
            if not has_sink[nxt] and lowval[nxt] >= depth[cur]:
                continue
            if has_sink[nxt] or lowval[nxt] >= depth[cur]:
                d = True
            else:
                d = not edge_dir[lowval[nxt]]
            edge_dir[depth[cur]] = d
            frame[3] = d
            frames.append([nxt, (nxt, nxt), iter(children[nxt]), True])
            break
        else:
            frames.pop()
            child_res = frame[1]
            if not frames:
                head = child_res[0]
                break
            parent = frames[-1]
            res, ch_res = parent[1], child_res
            if not parent[3]:
                res, ch_res = ch_res, res
            lst_nxt[res[1]] = ch_res[0]
            parent[1] = (res[0], ch_res[1])

    order: List[int] = []
    cur = head
    while cur != -1:
        order.append(cur)
        cur = lst_nxt[cur]
    return order