"""Graph problems: safe nodes, reachability, cycles and layered colourings."""

from collections import defaultdict, deque
from collections.abc import Sequence


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Nodes from which every path ends at a terminal node, in increasing order."""
    out_degree = [len(targets) for targets in graph]
    predecessors: list[list[int]] = [[] for _ in graph]
    for node, targets in enumerate(graph):
        for target in targets:
            predecessors[target].append(node)

    queue = deque(node for node, degree in enumerate(out_degree) if degree == 0)
    while queue:
        node = queue.popleft()
        for source in predecessors[node]:
            out_degree[source] -= 1
            if out_degree[source] == 0:
                queue.append(source)
    return [node for node, degree in enumerate(out_degree) if degree == 0]


def maximum_invitations(favorite: Sequence[int]) -> int:
    """Most people seated at a round table, each next to their favourite person."""
    n = len(favorite)
    fans: list[list[int]] = [[] for _ in range(n)]
    for person, liked in enumerate(favorite):
        fans[liked].append(person)
    visited = [False] * n

    def longest_chain(start: int) -> int:
        avoid = favorite[start]
        depth = {start: 0}
        longest = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            visited[node] = True
            longest = max(longest, depth[node])
            for fan in fans[node]:
                if fan != avoid:
                    depth[fan] = depth[node] + 1
                    queue.append(fan)
        return longest

    largest_cycle = 0
    paired = 0
    for person in range(n):
        if visited[person]:
            continue
        fast = slow = person
        while True:
            fast = favorite[favorite[fast]]
            slow = favorite[slow]
            visited[fast] = visited[slow] = True
            if fast == slow:
                break

        length = 1
        node = favorite[slow]
        while node != slow:
            node = favorite[node]
            length += 1

        if length == 2:
            paired += longest_chain(slow) + longest_chain(favorite[slow]) + 2
        else:
            largest_cycle = max(largest_cycle, length)
    return max(largest_cycle, paired)


def check_if_prerequisite(
    n: int, prerequisites: Sequence[Sequence[int]], queries: Sequence[Sequence[int]]
) -> list[bool]:
    """For each ``[u, v]`` query, whether course ``u`` is a prerequisite of ``v``."""
    reach = [1 << i for i in range(n)]
    for before, after in prerequisites:
        reach[before] |= 1 << after
    for middle in range(n):
        through = reach[middle]
        for node in range(n):
            if (reach[node] >> middle) & 1:
                reach[node] |= through
    return [bool((reach[u] >> v) & 1) for u, v in queries]


def check_if_prerequisite_topo(
    n: int, prerequisites: Sequence[Sequence[int]], queries: Sequence[Sequence[int]]
) -> list[bool]:
    """Same as :func:`check_if_prerequisite`, propagating ancestor sets in topological order."""
    ancestors = [0] * n
    successors: list[list[int]] = [[] for _ in range(n)]
    in_degree = [0] * n
    for before, after in prerequisites:
        ancestors[after] |= 1 << before
        successors[before].append(after)
        in_degree[after] += 1

    queue = deque(node for node in range(n) if in_degree[node] == 0)
    while queue:
        node = queue.popleft()
        for nxt in successors[node]:
            ancestors[nxt] |= ancestors[node]
            in_degree[nxt] -= 1
            if in_degree[nxt] == 0:
                queue.append(nxt)
    return [bool((ancestors[v] >> u) & 1) for u, v in queries]


def find_redundant_connection(edges: Sequence[Sequence[int]]) -> list[int]:
    """The last edge whose removal leaves a tree, found by union-find; empty if none."""
    parent: dict[int, int] = {}
    size: dict[int, int] = {}

    def root(node: int) -> int:
        parent.setdefault(node, node)
        size.setdefault(node, 1)
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    redundant: list[int] = []
    for u, v in edges:
        ru, rv = root(u), root(v)
        if ru == rv:
            redundant = [u, v]
            continue
        if size[rv] > size[ru]:
            ru, rv = rv, ru
        parent[rv] = ru
        size[ru] += size[rv]
    return redundant


def find_redundant_connection_dfs(edges: Sequence[Sequence[int]]) -> list[int]:
    """Same as :func:`find_redundant_connection`, locating the cycle by depth-first search."""
    if not edges:
        return []
    adjacency: dict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    start = edges[0][0]
    parent: dict[int, int | None] = {start: None}
    on_path = {start}
    stack = [(start, iter(adjacency[start]))]
    cycle: set[int] = set()
    while stack and not cycle:
        node, neighbours = stack[-1]
        for nxt in neighbours:
            if nxt == parent[node]:
                continue
            if nxt in on_path:
                cycle.add(nxt)
                walk = node
                while walk != nxt:
                    cycle.add(walk)
                    walk = parent[walk]
                break
            if nxt not in parent:
                parent[nxt] = node
                on_path.add(nxt)
                stack.append((nxt, iter(adjacency[nxt])))
                break
        else:
            stack.pop()
            on_path.discard(node)

    for u, v in reversed(edges):
        if u in cycle and v in cycle:
            return [u, v]
    return []


def magnificent_sets(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Most groups nodes 1..n can be split into with every edge joining adjacent groups.

    Returns -1 when no such split exists.
    """
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u - 1].append(v - 1)
        adjacency[v - 1].append(u - 1)

    colour = [0] * n
    components: list[list[int]] = []
    for start in range(n):
        if colour[start]:
            continue
        colour[start] = 1
        component = [start]
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in adjacency[u]:
                if not colour[v]:
                    colour[v] = 3 - colour[u]
                    queue.append(v)
                    component.append(v)
                elif colour[v] == colour[u]:
                    return -1
        components.append(component)

    def eccentricity(start: int) -> int:
        dist = {start: 0}
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v in adjacency[u]:
                if v not in dist:
                    dist[v] = dist[u] + 1
                    queue.append(v)
        return max(dist.values())

    return sum(max(eccentricity(node) for node in comp) + 1 for comp in components)