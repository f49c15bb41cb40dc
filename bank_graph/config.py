"""Runtime configuration loaded from the environment (and an optional .env file)."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

NEO4J_CONFIG = {
    "host": os.getenv("NEO4J_HOST", "localhost"),
    "port": int(os.getenv("NEO4J_PORT", "7687")),
    "database": os.getenv("NEO4J_DATABASE", "neo4j"),
    "user": os.getenv("NEO4J_USER", ""),
    "password": os.getenv("NEO4J_PASSWORD", ""),
}

DATA_DIR = Path(os.getenv("DATA_DIR", "data"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
