"""Load bank, person, account and card CSV exports into a Neo4j graph."""

__version__ = "1.0.0"
