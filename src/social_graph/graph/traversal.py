"""Traversal engine for the friendship graph.

Stateless breadth-first and depth-first walks over a GraphStore. Every call
allocates its own visited set and queue/stack, so walks over the same store
never share state. Shortest paths are delegated to the store (RustworkX).
"""

from collections import deque

from social_graph.graph.models import DepthMap
from social_graph.graph.store import GraphStore
from social_graph.utils.logging import get_logger

logger = get_logger(__name__)


def bounded_scan(
    store: GraphStore,
    start: str,
    max_depth: int,
) -> tuple[DepthMap, dict[str, int]]:
    """Breadth-first walk from a user, limited to a number of hops.

    Users at ``max_depth`` are discovered but not expanded. Each newly
    discovered user that is neither ``start`` nor one of its direct friends
    gets a point for the edge that introduced it. Visited users are never
    rescored, so every score counts first discoveries only.

    Args:
        store: The graph to walk.
        start: User to start from.
        max_depth: Maximum hop count to expand to.

    Returns:
        Tuple of (hop count per discovered user, score per candidate). Both
        dicts are in discovery order.
    """
    direct = set(store.neighbors(start))
    direct.add(start)

    depths: DepthMap = {start: 0}
    scores: dict[str, int] = {}
    queue: deque[tuple[str, int]] = deque([(start, 0)])

    while queue:
        current, depth = queue.popleft()
        if depth >= max_depth:
            continue

        for neighbor in store.neighbors(current):
            if neighbor in depths:
                continue
            depths[neighbor] = depth + 1
            if neighbor not in direct:
                scores[neighbor] = scores.get(neighbor, 0) + 1
            queue.append((neighbor, depth + 1))

    logger.debug(
        "Bounded scan complete",
        start=start,
        max_depth=max_depth,
        discovered=len(depths) - 1,
        candidates=len(scores),
    )
    return depths, scores


def shortest_hops(store: GraphStore, source: str, target: str) -> int | None:
    """Find the hop count of the shortest path between two users.

    Follows outgoing edges only, with every edge costing one hop.

    Args:
        store: The graph to walk.
        source: Starting user.
        target: Destination user.

    Returns:
        Number of hops, 0 when source and target are the same known user,
        or None when no path exists (including unknown users).
    """
    hops = store.shortest_path_length(source, target)
    logger.debug("Shortest path computed", source=source, target=target, hops=hops)
    return hops


def reachable(
    store: GraphStore,
    start: str,
    visited: set[str] | None = None,
) -> list[str]:
    """Collect every user reachable from ``start`` through outgoing edges.

    Uses an explicit stack; the order matches a recursive pre-order walk that
    visits friends in declaration order. Users already in ``visited`` are
    skipped, and every user collected here is added to it.

    Args:
        store: The graph to walk.
        start: User to start from.
        visited: Users claimed by earlier walks. Updated in place.

    Returns:
        Reached users in visitation order, starting with ``start``.
    """
    if visited is None:
        visited = set()

    reached: list[str] = []
    stack: list[str] = [start]

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        reached.append(current)
        for neighbor in reversed(store.neighbors(current)):
            if neighbor not in visited:
                stack.append(neighbor)

    return reached
