"""Read the CSV exports into plain row mappings."""

import logging
from pathlib import Path

import pandas as pd

from bank_graph.config import DATA_DIR

logger = logging.getLogger(__name__)


class DataParser:
    def __init__(self, data_dir: Path | str = DATA_DIR):
        self.data_dir = Path(data_dir)

    def parse_rows(self, filename: str) -> list[dict[str, str]]:
        """Read a whole CSV file into memory, one column-to-string mapping per row.

        Every column is kept as text and empty cells stay empty strings; the
        loaders decide how each value is typed.
        """
        path = self.data_dir / filename
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        df.columns = [column.strip() for column in df.columns]
        logger.debug(f"Read {len(df)} rows from {path}")
        return df.to_dict(orient="records")
