"""Query façade for social network analysis.

Composes the traversal engine and the ranking helpers into the public
queries: friend suggestions, degree of separation, components, influence
and network statistics.
"""

from dataclasses import dataclass

from social_graph.config import GraphSettings
from social_graph.graph.models import (
    Component,
    DegreeRank,
    NetworkStats,
    SeparationResult,
    Suggestion,
)
from social_graph.graph.ranking import (
    degree_ranking,
    find_components,
    rank_components,
    rank_suggestions,
    summarize,
)
from social_graph.graph.store import GraphStore
from social_graph.graph.traversal import bounded_scan, shortest_hops
from social_graph.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class QueryLimits:
    """Caps applied to ranked results.

    Attributes:
        suggestion_depth: Hop limit for the suggestion scan.
        suggestion_limit: Maximum friend suggestions.
        component_limit: Maximum components listed.
        influence_limit: Maximum influential users listed.
        stats_top_limit: Maximum users in the stats top list.
    """

    suggestion_depth: int = 3
    suggestion_limit: int = 5
    component_limit: int = 5
    influence_limit: int = 5
    stats_top_limit: int = 10

    @classmethod
    def from_settings(cls, settings: GraphSettings) -> "QueryLimits":
        """Create limits from graph settings."""
        return cls(
            suggestion_depth=settings.suggestion_depth,
            suggestion_limit=settings.suggestion_limit,
            component_limit=settings.component_limit,
            influence_limit=settings.influence_limit,
            stats_top_limit=settings.stats_top_limit,
        )


class NetworkAnalyzer:
    """Read-only queries over a friendship graph.

    Unknown users are never an error: they behave like users with no
    friends, so they get no suggestions and are disconnected from everyone.
    """

    def __init__(self, store: GraphStore, limits: QueryLimits | None = None) -> None:
        """Initialize with a graph store.

        Args:
            store: The GraphStore to analyze.
            limits: Result caps. Defaults to QueryLimits().
        """
        self.store = store
        self.limits = limits or QueryLimits()

    def suggest_friends(self, user: str) -> list[Suggestion]:
        """Suggest friends from multi-hop mutual connections.

        Never includes the user or any of the user's direct friends.

        Args:
            user: The user to suggest friends for.

        Returns:
            Suggestions sorted by descending score.
        """
        _, scores = bounded_scan(self.store, user, self.limits.suggestion_depth)
        suggestions = rank_suggestions(scores, self.limits.suggestion_limit)
        logger.debug(
            "Friend suggestions computed",
            user=user,
            candidates=len(scores),
            returned=len(suggestions),
        )
        return suggestions

    def degree_of_separation(self, source: str, target: str) -> int | None:
        """Get the number of hops from one user to another.

        Args:
            source: Starting user.
            target: Destination user.

        Returns:
            Hop count, or None when the users are not connected.
        """
        return shortest_hops(self.store, source, target)

    def separation(self, source: str, target: str) -> SeparationResult:
        """Get the degree of separation wrapped in a result object."""
        return SeparationResult(
            source=source,
            target=target,
            hops=self.degree_of_separation(source, target),
        )

    def list_components(self) -> list[Component]:
        """List the largest components.

        Returns:
            Components sorted by descending size.
        """
        components = find_components(self.store)
        logger.debug("Components discovered", count=len(components))
        return rank_components(components, self.limits.component_limit)

    def rank_influence(self) -> list[DegreeRank]:
        """Rank users by out-degree.

        Returns:
            Most connected users, highest degree first.
        """
        return degree_ranking(self.store)[: self.limits.influence_limit]

    def compute_stats(self) -> NetworkStats:
        """Compute aggregate network statistics.

        Returns:
            NetworkStats; ``empty_network`` is set when the store has no users.
        """
        stats = summarize(self.store, self.limits.stats_top_limit)
        if stats.empty_network:
            logger.info("Statistics requested for an empty network")
        return stats
