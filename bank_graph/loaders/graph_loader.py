"""Load entity and relationship CSV files into Neo4j."""

import logging

from bank_graph.errors import MissingReferenceError
from bank_graph.loaders.statement_builder import build_statement
from bank_graph.models import (
    ACCOUNT,
    BANK,
    CARD,
    CONTRACT,
    PERSON,
    REPRESENTED_BY,
    TRANSACTION,
    EntitySchema,
    RelationshipSchema,
)
from bank_graph.utils.data_parser import DataParser

logger = logging.getLogger(__name__)


def natural_keys(schema: EntitySchema | RelationshipSchema, record: dict[str, str]) -> dict[str, str]:
    """Key columns identifying a record: the natural key, or every role's referenced key."""
    if isinstance(schema, RelationshipSchema):
        return {role.column: record.get(role.column, "") for role in schema.roles}
    return {schema.key: record.get(schema.key, "")}


class GraphLoader:
    def __init__(self, session, parser: DataParser | None = None):
        self.session = session
        self.parser = parser or DataParser()

    def load(self, schema: EntitySchema | RelationshipSchema, rows: list[dict[str, str]]) -> int:
        """
        Insert every row in one write transaction and commit once.

        Args:
            schema: Entity or relationship schema the rows belong to
            rows: Parsed CSV rows, already fully read

        Returns:
            Number of rows inserted

        A failing row stops the load: the transaction is closed without a
        commit, so none of this file's rows are kept, and the error is raised.
        """
        is_relationship = isinstance(schema, RelationshipSchema)
        tx = self.session.begin_transaction()
        try:
            for row_number, record in enumerate(rows, start=1):
                try:
                    statement = build_statement(schema, record)
                    logger.debug(f"Executing {schema.name} row {row_number}:\n{statement}")
                    result = tx.run(statement)
                    # Execution errors arrive with the results; read them while this row is current
                    if is_relationship:
                        if result.single()["created"] == 0:
                            raise MissingReferenceError(schema.name, row_number, natural_keys(schema, record))
                    else:
                        result.consume()
                except Exception as e:
                    logger.error(
                        f"Failed to insert {schema.name} row {row_number} "
                        f"({natural_keys(schema, record)}): {e}"
                    )
                    raise
            tx.commit()
        finally:
            tx.close()
        return len(rows)

    def load_file(self, schema: EntitySchema | RelationshipSchema, filename: str | None = None) -> int:
        """Read a CSV file (the schema's own file by default) and load all of its rows."""
        filename = filename or schema.filename
        rows = self.parser.parse_rows(filename)
        logger.info(f"Loading {len(rows)} {schema.name} rows from {filename}")
        count = self.load(schema, rows)
        logger.info(f"Loaded {count} {schema.name} rows into Neo4j")
        return count

    def load_persons(self) -> int:
        return self.load_file(PERSON)

    def load_accounts(self) -> int:
        return self.load_file(ACCOUNT)

    def load_banks(self) -> int:
        return self.load_file(BANK)

    def load_cards(self) -> int:
        return self.load_file(CARD)

    def load_represented_by(self) -> int:
        return self.load_file(REPRESENTED_BY)

    def load_transactions(self) -> int:
        return self.load_file(TRANSACTION)

    def load_contracts(self) -> int:
        return self.load_file(CONTRACT)
