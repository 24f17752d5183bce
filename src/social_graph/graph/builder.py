"""Graph builder for constructing friendship graphs.

Builds a GraphStore from edge pairs or from per-user friend records, then
freezes it for querying.
"""

from collections.abc import Iterable

from social_graph.graph.store import GraphStore
from social_graph.utils.logging import get_logger

logger = get_logger(__name__)

Edge = tuple[str, str]


class GraphBuilder:
    """Builds a GraphStore from friendship declarations.

    Edges are added exactly as declared. With ``symmetrize`` enabled, every
    declared edge ``A -> B`` also gets a ``B -> A`` edge unless B already
    declares A.
    """

    def __init__(self, store: GraphStore | None = None, symmetrize: bool = False) -> None:
        """Initialize the builder.

        Args:
            store: Existing store to build on, or None for a new store.
            symmetrize: Whether to add missing reverse edges on build.
        """
        self.store = store if store is not None else GraphStore()
        self.symmetrize = symmetrize
        self._declared: list[Edge] = []

    def add_user(self, user: str) -> None:
        """Register a user, even one with no friends."""
        self.store.add_user(user)

    def add_edge(self, source: str, target: str) -> None:
        """Declare that ``source`` lists ``target`` as a friend."""
        self.store.add_edge(source, target)
        self._declared.append((source, target))

    def add_record(self, user: str, friends: Iterable[str]) -> None:
        """Add one user's record.

        Args:
            user: The user the record belongs to.
            friends: Friends in declaration order.
        """
        self.add_user(user)
        for friend in friends:
            self.add_edge(user, friend)

    def build_from_edges(self, edges: Iterable[Edge]) -> GraphStore:
        """Build a store from edge pairs.

        Args:
            edges: (source, target) pairs.

        Returns:
            The frozen GraphStore.
        """
        for source, target in edges:
            self.add_edge(source, target)
        return self.build()

    def build_from_records(
        self,
        records: Iterable[tuple[str, list[str]]],
    ) -> GraphStore:
        """Build a store from (user, friends) records.

        Args:
            records: One entry per user record.

        Returns:
            The frozen GraphStore.
        """
        for user, friends in records:
            self.add_record(user, friends)
        return self.build()

    def build(self) -> GraphStore:
        """Finish loading and freeze the store.

        Returns:
            The frozen GraphStore.
        """
        if self.symmetrize:
            self._add_reverse_edges()

        self.store.freeze()
        logger.info(
            "Built friendship graph",
            user_count=self.store.user_count,
            edge_count=self.store.edge_count,
            symmetrized=self.symmetrize,
        )
        return self.store

    def _add_reverse_edges(self) -> None:
        """Add ``B -> A`` for every declared ``A -> B`` that lacks one."""
        pairs = set(self._declared)
        added = 0
        for source, target in self._declared:
            if (target, source) in pairs:
                continue
            self.store.add_edge(target, source)
            pairs.add((target, source))
            added += 1

        logger.debug("Added reverse edges", count=added)


def build(edges: Iterable[Edge], symmetrize: bool = False) -> GraphStore:
    """Build a frozen GraphStore from edge pairs.

    Args:
        edges: (source, target) pairs.
        symmetrize: Whether to add missing reverse edges.

    Returns:
        The frozen GraphStore.
    """
    return GraphBuilder(symmetrize=symmetrize).build_from_edges(edges)
