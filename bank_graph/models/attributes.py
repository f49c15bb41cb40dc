"""
Pydantic model for a typed attribute column.
"""

from typing import Literal

from pydantic import BaseModel

from bank_graph.utils.coercion import DATETIME, NUMBER, STRING


class Attribute(BaseModel):
    column: str  # CSV header name, e.g. "first-name"
    kind: Literal["string", "number", "datetime"] = STRING

    @property
    def property_name(self) -> str:
        """Neo4j property name for this column."""
        return self.column.replace("-", "_")


def string(column: str) -> Attribute:
    return Attribute(column=column, kind=STRING)


def number(column: str) -> Attribute:
    return Attribute(column=column, kind=NUMBER)


def date_time(column: str) -> Attribute:
    return Attribute(column=column, kind=DATETIME)
