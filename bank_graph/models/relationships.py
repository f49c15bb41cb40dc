"""
Relationship schemas. Each relationship is stored as a labelled node linked to
its role players by one typed edge per role.
"""

from pydantic import BaseModel

from bank_graph.models.attributes import Attribute, date_time, number, string
from bank_graph.models.entities import ACCOUNT, BANK, CARD, PERSON, EntitySchema


class Role(BaseModel):
    column: str  # CSV column holding the referenced entity's natural key
    entity: EntitySchema

    @property
    def variable(self) -> str:
        return self.column.replace("-", "_")

    @property
    def edge_type(self) -> str:
        return self.variable.upper()


class RelationshipSchema(BaseModel):
    name: str
    label: str
    filename: str  # source CSV file
    roles: list[Role]
    attributes: list[Attribute]

    @property
    def variable(self) -> str:
        return self.name.replace("-", "_")

    @property
    def requires(self) -> list[str]:
        """Entity types that must be loaded before this relationship."""
        names: list[str] = []
        for role in self.roles:
            if role.entity.name not in names:
                names.append(role.entity.name)
        return names


TRANSACTION = RelationshipSchema(
    name="transaction",
    label="Transaction",
    filename="transaction.csv",
    roles=[
        Role(column="account-of-receiver", entity=ACCOUNT),
        Role(column="account-of-creator", entity=ACCOUNT),
    ],
    attributes=[
        number("identifier"),
        number("amount"),
        string("reference"),
        string("category"),
        date_time("execution-date"),
    ],
)

CONTRACT = RelationshipSchema(
    name="contract",
    label="Contract",
    filename="contract.csv",
    roles=[
        Role(column="provider", entity=BANK),
        Role(column="customer", entity=PERSON),
        Role(column="offer", entity=ACCOUNT),
    ],
    attributes=[
        number("identifier"),
        date_time("sign-date"),
    ],
)

REPRESENTED_BY = RelationshipSchema(
    name="represented-by",
    label="RepresentedBy",
    filename="represented-by.csv",
    roles=[
        Role(column="bank-card", entity=CARD),
        Role(column="bank-account", entity=ACCOUNT),
    ],
    attributes=[
        number("identifier"),
    ],
)
