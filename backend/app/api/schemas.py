from typing import List, Dict, Any, Optional
from pydantic import BaseModel, Field


class GraphStatsResponse(BaseModel):
    nodes: int
    edges: int


class GraphNode(BaseModel):
    id: str
    attributes: Dict[str, Any] = Field(default_factory=dict)


class NodeListResponse(BaseModel):
    nodes: List[GraphNode]


class NeighbourResponse(BaseModel):
    id: str
    neighbours: List[GraphNode]


class EdgeRequest(BaseModel):
    source: str
    target: str
    weight: float = Field(allow_inf_nan=False)


class EdgeWeightResponse(BaseModel):
    source: str
    target: str
    weight: float


class MutationResponse(BaseModel):
    ok: bool
    detail: Optional[str] = None


class GraphExportResponse(BaseModel):
    adjacency: Dict[str, Dict[str, float]]
