"""Friendship graph store using RustworkX.

Holds the adjacency of the social network: every user maps to the ordered
list of users it declares as friends.
"""

from collections.abc import Iterator

import rustworkx as rx

from social_graph.core.exceptions import GraphFrozenError
from social_graph.utils.logging import get_logger

logger = get_logger(__name__)


class GraphStore:
    """A directed multigraph of users and their declared friends.

    Edges are kept as declared: ``A -> B`` does not imply ``B -> A``.
    Duplicate edges and self loops are stored as-is. Each edge carries its
    insertion sequence number so friends are returned in declaration order.

    Lookups are lenient: an unknown user behaves like a user with no friends.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._graph: rx.PyDiGraph[str, int] = rx.PyDiGraph(multigraph=True)
        self._user_to_index: dict[str, int] = {}
        self._edge_seq = 0
        self._frozen = False

    @property
    def user_count(self) -> int:
        """Get the number of users in the store."""
        return len(self._graph)

    @property
    def edge_count(self) -> int:
        """Get the number of stored edges, duplicates included."""
        return self._graph.num_edges()

    @property
    def frozen(self) -> bool:
        """Whether loading has finished."""
        return self._frozen

    def freeze(self) -> "GraphStore":
        """Mark the store read-only.

        Returns:
            The store itself, for chaining.
        """
        self._frozen = True
        logger.debug(
            "Graph store frozen",
            user_count=self.user_count,
            edge_count=self.edge_count,
        )
        return self

    def add_user(self, user: str) -> int:
        """Ensure a user has an entry.

        Args:
            user: The user identifier.

        Returns:
            The user's node index (new or existing).

        Raises:
            GraphFrozenError: If the store is read-only.
        """
        index = self._user_to_index.get(user)
        if index is not None:
            return index
        if self._frozen:
            raise GraphFrozenError("add user")

        index = self._graph.add_node(user)
        self._user_to_index[user] = index
        return index

    def add_edge(self, source: str, target: str) -> None:
        """Append target to source's friends.

        Both endpoints get an entry if they had none.

        Args:
            source: User declaring the friendship.
            target: User being declared as a friend.

        Raises:
            GraphFrozenError: If the store is read-only.
        """
        if self._frozen:
            raise GraphFrozenError("add edge")

        source_index = self.add_user(source)
        target_index = self.add_user(target)
        self._graph.add_edge(source_index, target_index, self._edge_seq)
        self._edge_seq += 1

    def has_user(self, user: str) -> bool:
        """Check if a user has an entry."""
        return user in self._user_to_index

    def neighbors(self, user: str) -> list[str]:
        """Get a user's friends in declaration order.

        Args:
            user: The user identifier.

        Returns:
            Friend identifiers, duplicates included. Empty for unknown users.
        """
        index = self._user_to_index.get(user)
        if index is None:
            return []

        edges = sorted(self._graph.out_edges(index), key=lambda edge: edge[2])
        return [self._graph[target] for _, target, _ in edges]

    def out_degree(self, user: str) -> int:
        """Get the number of friend entries a user declares.

        Args:
            user: The user identifier.

        Returns:
            Out-degree with duplicates counted, 0 for unknown users.
        """
        index = self._user_to_index.get(user)
        if index is None:
            return 0
        return self._graph.out_degree(index)

    def shortest_path_length(self, source: str, target: str) -> int | None:
        """Get the hop count of the shortest outgoing path between two users.

        Args:
            source: Starting user.
            target: Destination user.

        Returns:
            Number of hops, 0 when source and target are the same known user,
            or None when no path exists (including unknown users).
        """
        source_index = self._user_to_index.get(source)
        target_index = self._user_to_index.get(target)

        if source_index is None or target_index is None:
            return None
        if source_index == target_index:
            return 0

        # Unit edge cost makes Dijkstra a hop count
        lengths = rx.digraph_dijkstra_shortest_path_lengths(
            self._graph,
            source_index,
            lambda _: 1.0,
            goal=target_index,
        )
        if target_index not in lengths:
            return None
        return int(lengths[target_index])

    def users(self) -> list[str]:
        """Get all users in first-reference order."""
        return [self._graph[index] for index in self._graph.node_indices()]

    def __iter__(self) -> Iterator[str]:
        return iter(self.users())

    def __len__(self) -> int:
        return self.user_count

    def __contains__(self, user: object) -> bool:
        return user in self._user_to_index

    def to_dict(self) -> dict[str, list[str]]:
        """Get the adjacency as a plain mapping.

        Returns:
            User -> friends, in store order.
        """
        return {user: self.neighbors(user) for user in self.users()}
