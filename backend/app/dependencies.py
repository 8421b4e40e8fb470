from functools import lru_cache
import logging
from pathlib import Path
import time

from kraph.graph.graph_builder import GraphBuilder
from kraph.graph.graph_serializer import GraphSerializer
from kraph.graph.graph_store import GraphStore

from backend.app.config import AppConfig


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_graph_store() -> GraphStore:
    logger = logging.getLogger("kraph.startup")
    t0 = time.perf_counter()
    config = get_config()
    store = GraphStore(config.kraph.store)

    if config.seed_edges_path:
        seed_path = Path(config.seed_edges_path)
        if seed_path.exists():
            count = GraphBuilder(store).load_edge_list(seed_path)
            logger.info("[startup] seeded %d edges from %s", count, seed_path)
        else:
            logger.warning("[startup] seed edge list %s not found", seed_path)

    logger.info("[startup] get_graph_store total %.3fs", time.perf_counter() - t0)
    return store


@lru_cache
def get_serializer() -> GraphSerializer:
    return GraphSerializer(get_config().kraph.serialization)
