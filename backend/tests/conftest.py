from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from contextlib import asynccontextmanager

from backend.app.main import create_app
from backend.app.config import AppConfig
from backend.app.dependencies import get_graph_store

from kraph.graph.graph_schema import Node
from kraph.graph.graph_store import GraphStore


def _assert_indices_mirrored(store: GraphStore) -> None:
    for src, tmap in store._targets.items():
        for dst, weight in tmap.items():
            assert store._sources[dst][src] == weight
    for dst, smap in store._sources.items():
        for src, weight in smap.items():
            assert store._targets[src][dst] == weight


@pytest.fixture()
def assert_mirrored():
    """
    Checker asserting every edge appears with the same weight in both indices.
    """
    return _assert_indices_mirrored


@pytest.fixture()
def store() -> GraphStore:
    return GraphStore()


@pytest.fixture()
def abc_store(store: GraphStore) -> GraphStore:
    for label in ("A", "B", "C"):
        store.add_node(Node.create(label))
    return store


@pytest.fixture()
def client(store: GraphStore):
    @asynccontextmanager
    async def _no_lifespan(_: FastAPI):
        yield

    app = create_app(AppConfig())
    app.router.lifespan_context = _no_lifespan

    app.dependency_overrides[get_graph_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
