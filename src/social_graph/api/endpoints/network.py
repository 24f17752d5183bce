"""Network analysis API endpoints.

Exposes the NetworkAnalyzer queries over HTTP, plus a reload of the
configured dataset.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, Query
from pydantic import BaseModel

from social_graph.config import Settings, get_settings
from social_graph.dataset import load_dataset
from social_graph.graph.analyzer import NetworkAnalyzer, QueryLimits
from social_graph.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


# Response models
class SuggestionInfo(BaseModel):
    """A suggested friend."""

    user: str
    score: int


class SeparationInfo(BaseModel):
    """Degree of separation between two users."""

    source: str
    target: str
    hops: int | None
    connected: bool


class ComponentInfo(BaseModel):
    """A connected component."""

    size: int
    members: list[str]


class DegreeInfo(BaseModel):
    """A user ranked by out-degree."""

    user: str
    degree: int


class NetworkStatsInfo(BaseModel):
    """Aggregate network statistics."""

    total_users: int
    total_connections: int
    average_degree: float | None
    empty_network: bool
    top_by_degree: list[DegreeInfo]


class ReloadInfo(BaseModel):
    """Result of a dataset reload."""

    dataset: str
    user_count: int
    edge_count: int


# Dependency placeholder
_analyzer: NetworkAnalyzer | None = None


def current_analyzer() -> NetworkAnalyzer | None:
    """Get the loaded analyzer, or None before a dataset is loaded."""
    return _analyzer


def get_analyzer() -> NetworkAnalyzer:
    """Get analyzer instance for request handlers."""
    analyzer = current_analyzer()
    if analyzer is None:
        raise HTTPException(status_code=503, detail="Network not loaded")
    return analyzer


def set_analyzer(analyzer: NetworkAnalyzer | None) -> None:
    """Set analyzer instance."""
    global _analyzer
    _analyzer = analyzer


def load_analyzer(settings: Settings) -> NetworkAnalyzer:
    """Load the configured dataset into a new analyzer.

    Raises:
        DatasetError: If the dataset cannot be loaded.
    """
    store = load_dataset(settings.dataset.path, settings.dataset)
    return NetworkAnalyzer(store, QueryLimits.from_settings(settings.graph))


# Endpoints
@router.get("/suggestions/{user}", response_model=list[SuggestionInfo])
async def suggest_friends(
    user: str = Path(..., description="User to suggest friends for"),
    analyzer: NetworkAnalyzer = Depends(get_analyzer),
) -> list[SuggestionInfo]:
    """Get friend suggestions based on distant mutual connections.

    Unknown users get an empty list.
    """
    return [
        SuggestionInfo(user=s.user, score=s.score)
        for s in analyzer.suggest_friends(user)
    ]


@router.get("/separation", response_model=SeparationInfo)
async def degree_of_separation(
    source: str = Query(..., description="Starting user"),
    target: str = Query(..., description="Destination user"),
    analyzer: NetworkAnalyzer = Depends(get_analyzer),
) -> SeparationInfo:
    """Get the number of hops between two users.

    ``hops`` is null when the users are not connected.
    """
    result = analyzer.separation(source, target)
    return SeparationInfo(**result.to_dict())


@router.get("/components", response_model=list[ComponentInfo])
async def list_components(
    analyzer: NetworkAnalyzer = Depends(get_analyzer),
) -> list[ComponentInfo]:
    """List the largest connected components."""
    return [
        ComponentInfo(size=c.size, members=c.members)
        for c in analyzer.list_components()
    ]


@router.get("/influence", response_model=list[DegreeInfo])
async def rank_influence(
    analyzer: NetworkAnalyzer = Depends(get_analyzer),
) -> list[DegreeInfo]:
    """List the most connected users."""
    return [DegreeInfo(user=r.user, degree=r.degree) for r in analyzer.rank_influence()]


@router.get("/stats", response_model=NetworkStatsInfo)
async def network_stats(
    analyzer: NetworkAnalyzer = Depends(get_analyzer),
) -> NetworkStatsInfo:
    """Get aggregate network statistics."""
    return NetworkStatsInfo(**analyzer.compute_stats().to_dict())


@router.post("/reload", response_model=ReloadInfo)
async def reload_network() -> ReloadInfo:
    """Reload the dataset from the configured path.

    The current network keeps serving if the new load fails.
    """
    settings = get_settings()
    analyzer = load_analyzer(settings)
    set_analyzer(analyzer)

    logger.info(
        "Network reloaded",
        dataset=str(settings.dataset.path),
        user_count=analyzer.store.user_count,
    )
    return ReloadInfo(
        dataset=str(settings.dataset.path),
        user_count=analyzer.store.user_count,
        edge_count=analyzer.store.edge_count,
    )
