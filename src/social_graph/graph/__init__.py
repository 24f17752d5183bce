"""Graph module for friendship network analysis.

Provides the RustworkX-backed graph store, traversal engine, ranking
helpers and the NetworkAnalyzer query façade.
"""

from social_graph.graph.analyzer import NetworkAnalyzer, QueryLimits
from social_graph.graph.builder import GraphBuilder, build
from social_graph.graph.models import (
    Component,
    DegreeRank,
    DepthMap,
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
from social_graph.graph.traversal import bounded_scan, reachable, shortest_hops

__all__ = [
    # Store
    "GraphStore",
    # Builder
    "GraphBuilder",
    "build",
    # Query façade
    "NetworkAnalyzer",
    "QueryLimits",
    # Models
    "Component",
    "DegreeRank",
    "DepthMap",
    "NetworkStats",
    "SeparationResult",
    "Suggestion",
    # Traversal
    "bounded_scan",
    "shortest_hops",
    "reachable",
    # Ranking
    "rank_suggestions",
    "find_components",
    "rank_components",
    "degree_ranking",
    "summarize",
]
