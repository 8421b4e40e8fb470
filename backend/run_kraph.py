import argparse
import logging
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
for entry in (ROOT, ROOT / "src"):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

from backend.app.config import AppConfig  # noqa: E402
from kraph.graph.graph_builder import GraphBuilder  # noqa: E402
from kraph.graph.graph_errors import GraphError  # noqa: E402
from kraph.graph.graph_serializer import GraphSerializer  # noqa: E402
from kraph.graph.graph_store import GraphStore  # noqa: E402


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Load a CSV edge list into a graph store and print its adjacency.",
    )
    parser.add_argument("edges", nargs="?", help="CSV with source,target[,weight] columns")
    args = parser.parse_args(argv)

    config = AppConfig()
    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    logger = logging.getLogger("kraph.run")
    start = time.perf_counter()

    store = GraphStore(config.kraph.store)
    builder = GraphBuilder(store)
    edges_path = args.edges or config.seed_edges_path

    if edges_path:
        try:
            builder.load_edge_list(edges_path)
        except (FileNotFoundError, ValueError, GraphError) as exc:
            logger.error("could not load %s: %s", edges_path, exc)
            return 1
    else:
        # Demo graph: repeated observations accumulate on A -> B.
        builder.ensure_edges(
            [
                ("A", "B", 5.0),
                ("A", "B", 3.0),
                ("A", "C", 2.0),
                ("B", "C", 1.0),
            ]
        )

    logger.info(
        "graph ready: nodes=%d edges=%d in %.3fs",
        store.node_count(),
        store.edge_count(),
        time.perf_counter() - start,
    )
    print(GraphSerializer(config.kraph.serialization).to_json(store))
    return 0


if __name__ == "__main__":
    sys.exit(main())
