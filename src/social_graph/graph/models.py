"""Graph models for social network analysis.

Defines the result types produced by the query engine: ranked suggestions,
degree rankings, components, separation results and network statistics.
"""

from dataclasses import dataclass, field
from typing import Any

# User identifier -> hop count from the traversal source.
DepthMap = dict[str, int]


@dataclass(frozen=True)
class Suggestion:
    """A suggested friend.

    Attributes:
        user: The suggested user.
        score: Number of distant mutual connections that introduced the user.
    """

    user: str
    score: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {"user": self.user, "score": self.score}


@dataclass(frozen=True)
class DegreeRank:
    """A user ranked by out-degree.

    Attributes:
        user: The ranked user.
        degree: Count of the user's outgoing friend entries, duplicates included.
    """

    user: str
    degree: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {"user": self.user, "degree": self.degree}


@dataclass
class Component:
    """A group of users reachable from one another.

    Attributes:
        members: Users in discovery order.
    """

    members: list[str] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of users in the component."""
        return len(self.members)

    def __contains__(self, user: object) -> bool:
        return user in self.members

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {"size": self.size, "members": list(self.members)}


@dataclass(frozen=True)
class SeparationResult:
    """Result of a degree-of-separation query.

    Attributes:
        source: Starting user.
        target: Destination user.
        hops: Hop count, or None when the users are not connected.
    """

    source: str
    target: str
    hops: int | None = None

    @property
    def connected(self) -> bool:
        """Whether a path exists from source to target."""
        return self.hops is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "source": self.source,
            "target": self.target,
            "hops": self.hops,
            "connected": self.connected,
        }


@dataclass
class NetworkStats:
    """Aggregate statistics about the network.

    Attributes:
        total_users: Number of users in the store.
        total_connections: Sum of all out-degrees.
        average_degree: Mean out-degree, or None for an empty network.
        top_by_degree: Highest out-degree users, descending.
    """

    total_users: int
    total_connections: int
    average_degree: float | None
    top_by_degree: list[DegreeRank] = field(default_factory=list)

    @property
    def empty_network(self) -> bool:
        """True when there are no users and so no average degree."""
        return self.average_degree is None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "total_users": self.total_users,
            "total_connections": self.total_connections,
            "average_degree": self.average_degree,
            "empty_network": self.empty_network,
            "top_by_degree": [r.to_dict() for r in self.top_by_degree],
        }
