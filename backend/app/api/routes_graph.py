from fastapi import APIRouter, Depends, HTTPException, status

from kraph.graph.graph_errors import GraphError
from kraph.graph.graph_schema import Node
from kraph.graph.graph_serializer import GraphSerializer
from kraph.graph.graph_store import GraphStore

from backend.app.api.schemas import (
    EdgeRequest,
    EdgeWeightResponse,
    GraphExportResponse,
    GraphNode,
    GraphStatsResponse,
    MutationResponse,
    NeighbourResponse,
    NodeListResponse,
)
from backend.app.dependencies import get_graph_store, get_serializer

router = APIRouter()


def _to_graph_node(node: Node) -> GraphNode:
    return GraphNode(**node.to_dict())


def _not_found(exc: GraphError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


# -------------------- Graph --------------------


@router.get("/stats", response_model=GraphStatsResponse)
def graph_stats(store: GraphStore = Depends(get_graph_store)):
    return GraphStatsResponse(
        nodes=store.node_count(),
        edges=store.edge_count(),
    )


@router.get("/export", response_model=GraphExportResponse)
def graph_export(
    store: GraphStore = Depends(get_graph_store),
    serializer: GraphSerializer = Depends(get_serializer),
):
    return GraphExportResponse(adjacency=serializer.to_dict(store))


@router.post("/reset", response_model=MutationResponse)
def graph_reset(store: GraphStore = Depends(get_graph_store)):
    store.reset()
    return MutationResponse(ok=True)


# -------------------- Nodes --------------------


@router.get("/nodes", response_model=NodeListResponse)
def list_nodes(store: GraphStore = Depends(get_graph_store)):
    nodes = sorted(store.get_nodes().values(), key=lambda n: n.id)
    return NodeListResponse(nodes=[_to_graph_node(n) for n in nodes])


@router.post(
    "/nodes",
    response_model=GraphNode,
    status_code=status.HTTP_201_CREATED,
)
def create_node(request: GraphNode, store: GraphStore = Depends(get_graph_store)):
    node = Node.create(request.id, request.attributes)
    if not store.add_node(node):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"{node.id} already exists in graph",
        )
    return _to_graph_node(node)


@router.get("/nodes/{node_id}", response_model=GraphNode)
def read_node(node_id: str, store: GraphStore = Depends(get_graph_store)):
    node = store.get_node(node_id)
    if node is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{node_id} does not exist in graph",
        )
    return _to_graph_node(node)


@router.delete("/nodes/{node_id}", response_model=MutationResponse)
def remove_node(node_id: str, store: GraphStore = Depends(get_graph_store)):
    if not store.delete_node(node_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{node_id} does not exist in graph",
        )
    return MutationResponse(ok=True)


@router.get("/nodes/{node_id}/sources", response_model=NeighbourResponse)
def node_sources(node_id: str, store: GraphStore = Depends(get_graph_store)):
    try:
        neighbours = store.get_sources(node_id)
    except GraphError as exc:
        raise _not_found(exc) from exc
    return NeighbourResponse(
        id=node_id,
        neighbours=[
            _to_graph_node(n) if n is not None else GraphNode(id=str(nid))
            for nid, n in sorted(neighbours.items())
        ],
    )


@router.get("/nodes/{node_id}/targets", response_model=NeighbourResponse)
def node_targets(node_id: str, store: GraphStore = Depends(get_graph_store)):
    try:
        neighbours = store.get_targets(node_id)
    except GraphError as exc:
        raise _not_found(exc) from exc
    return NeighbourResponse(
        id=node_id,
        neighbours=[
            _to_graph_node(n) if n is not None else GraphNode(id=str(nid))
            for nid, n in sorted(neighbours.items())
        ],
    )


# -------------------- Edges --------------------


@router.post("/edges", response_model=EdgeWeightResponse)
def add_edge(request: EdgeRequest, store: GraphStore = Depends(get_graph_store)):
    try:
        weight = store.add_edge(request.source, request.target, request.weight)
    except GraphError as exc:
        raise _not_found(exc) from exc
    return EdgeWeightResponse(
        source=request.source,
        target=request.target,
        weight=weight,
    )


@router.put("/edges", response_model=EdgeWeightResponse)
def replace_edge(request: EdgeRequest, store: GraphStore = Depends(get_graph_store)):
    try:
        store.replace_edge(request.source, request.target, request.weight)
    except GraphError as exc:
        raise _not_found(exc) from exc
    return EdgeWeightResponse(
        source=request.source,
        target=request.target,
        weight=request.weight,
    )


@router.get("/edges/{source}/{target}", response_model=EdgeWeightResponse)
def read_edge(source: str, target: str, store: GraphStore = Depends(get_graph_store)):
    try:
        weight = store.get_weight(source, target)
    except GraphError as exc:
        raise _not_found(exc) from exc
    return EdgeWeightResponse(source=source, target=target, weight=weight)


@router.delete("/edges/{source}/{target}", response_model=MutationResponse)
def remove_edge(source: str, target: str, store: GraphStore = Depends(get_graph_store)):
    try:
        store.delete_edge(source, target)
    except GraphError as exc:
        raise _not_found(exc) from exc
    return MutationResponse(ok=True)
