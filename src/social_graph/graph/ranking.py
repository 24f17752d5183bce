"""Ranking and aggregation of traversal output.

Turns raw scores, degrees and components into ordered, size-limited lists.
Sorts are stable, so equal scores keep the order in which users were
discovered (suggestions) or first added to the store (everything else).
"""

from social_graph.graph.models import Component, DegreeRank, NetworkStats, Suggestion
from social_graph.graph.store import GraphStore
from social_graph.graph.traversal import reachable


def rank_suggestions(scores: dict[str, int], limit: int) -> list[Suggestion]:
    """Order suggestion candidates by descending score.

    Args:
        scores: Candidate -> score, in discovery order.
        limit: Maximum number of suggestions to return.

    Returns:
        Top suggestions, highest score first.
    """
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return [Suggestion(user=user, score=score) for user, score in ranked[:limit]]


def find_components(store: GraphStore) -> list[Component]:
    """Partition the store into components by outgoing-edge reachability.

    Users are claimed in store order; each unclaimed user starts a new
    component containing everything it reaches that is still unclaimed.

    Args:
        store: The graph to partition.

    Returns:
        All components, in the order they were discovered.
    """
    visited: set[str] = set()
    components: list[Component] = []

    for user in store.users():
        if user in visited:
            continue
        components.append(Component(members=reachable(store, user, visited)))

    return components


def rank_components(components: list[Component], limit: int) -> list[Component]:
    """Order components by descending size.

    Args:
        components: Components to rank.
        limit: Maximum number of components to return.

    Returns:
        Largest components first.
    """
    ranked = sorted(components, key=lambda c: c.size, reverse=True)
    return ranked[:limit]


def degree_ranking(store: GraphStore) -> list[DegreeRank]:
    """Score every user by out-degree, highest first."""
    ranked = [DegreeRank(user=user, degree=store.out_degree(user)) for user in store.users()]
    ranked.sort(key=lambda r: r.degree, reverse=True)
    return ranked


def summarize(store: GraphStore, top_limit: int) -> NetworkStats:
    """Compute aggregate network statistics.

    An empty store has no average degree; it is reported as ``None``
    instead of dividing by zero.

    Args:
        store: The graph to summarize.
        top_limit: Number of top users by out-degree to include.

    Returns:
        NetworkStats for the store.
    """
    ranked = degree_ranking(store)
    total_users = len(ranked)
    total_connections = sum(r.degree for r in ranked)
    average = total_connections / total_users if total_users else None

    return NetworkStats(
        total_users=total_users,
        total_connections=total_connections,
        average_degree=average,
        top_by_degree=ranked[:top_limit],
    )
