"""Command-line entry point: load every CSV export into Neo4j."""

import argparse
import logging
import sys

from bank_graph.config import DATA_DIR, LOG_LEVEL
from bank_graph.db.neo4j_client import Neo4jClient
from bank_graph.loaders.graph_loader import GraphLoader
from bank_graph.loaders.pipeline import LoadPipeline
from bank_graph.utils.data_parser import DataParser

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Load bank graph CSV files into Neo4j")
    parser.add_argument("--data-dir", default=str(DATA_DIR), help=f"Directory holding the CSV files (default: {DATA_DIR})")
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="DEBUG also logs every statement sent to Neo4j",
    )
    return parser.parse_args(argv)


def run(data_dir: str) -> int:
    """Connect, run the load pipeline on one session and report each step."""
    client = Neo4jClient()
    pipeline = None
    try:
        with client.session() as session:
            loader = GraphLoader(session, DataParser(data_dir))
            pipeline = LoadPipeline(loader)
            pipeline.run()
    finally:
        if pipeline is not None:
            for result in pipeline.results:
                logger.info(f"  {result.name}: {result.status} ({result.count} rows)")
        client.close()
    logger.info("Graph data loading complete!")
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    # The driver logs every Bolt message at DEBUG
    logging.getLogger("neo4j").setLevel(logging.WARNING)

    try:
        return run(args.data_dir)
    except Exception:
        logger.exception("Load failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
