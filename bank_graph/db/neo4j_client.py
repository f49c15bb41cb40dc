"""Neo4j connection and utilities."""

import logging

from neo4j import GraphDatabase

from bank_graph.config import NEO4J_CONFIG

logger = logging.getLogger(__name__)


class Neo4jClient:
    def __init__(
        self,
        host: str = NEO4J_CONFIG["host"],
        port: int = NEO4J_CONFIG["port"],
        database: str = NEO4J_CONFIG["database"],
        user: str = NEO4J_CONFIG["user"],
        password: str = NEO4J_CONFIG["password"],
    ):
        self.uri = f"bolt://{host}:{port}"
        self.database = database
        auth = (user, password) if user else None
        self.driver = GraphDatabase.driver(self.uri, auth=auth)
        # Fail before any loader runs when the server is unreachable
        try:
            self.driver.verify_connectivity()
        except Exception:
            self.driver.close()
            raise
        logger.info(f"Connected to Neo4j at {self.uri} using database {self.database}")

    def session(self):
        """Open a session on the configured database."""
        return self.driver.session(database=self.database)

    def close(self):
        logger.info("Closing Neo4j driver...")
        self.driver.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
