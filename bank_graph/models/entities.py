"""
Entity schemas: one per node label loaded from its own CSV file.
"""

from pydantic import BaseModel, model_validator

from bank_graph.models.attributes import Attribute, date_time, number, string


class EntitySchema(BaseModel):
    name: str
    label: str
    key: str  # natural key column
    filename: str  # source CSV file
    attributes: list[Attribute]

    @model_validator(mode="after")
    def _key_is_declared(self):
        if self.key not in {attribute.column for attribute in self.attributes}:
            raise ValueError(f"Natural key '{self.key}' is not an attribute of {self.name}")
        return self

    @property
    def variable(self) -> str:
        return self.name.replace("-", "_")

    @property
    def key_attribute(self) -> Attribute:
        return next(attribute for attribute in self.attributes if attribute.column == self.key)


PERSON = EntitySchema(
    name="person",
    label="Person",
    key="email",
    filename="person.csv",
    attributes=[
        string("first-name"),
        string("last-name"),
        string("gender"),
        string("phone-number"),
        string("city"),
        string("email"),
    ],
)

BANK = EntitySchema(
    name="bank",
    label="Bank",
    key="name",
    filename="bank.csv",
    attributes=[
        string("name"),
        string("country"),
        string("headquarters"),
        string("free-accounts"),
        string("english-customer-service"),
        string("english-website"),
        string("english-mobile-app"),
        string("free-worldwide-withdrawals"),
        string("allowed-residents"),
    ],
)

ACCOUNT = EntitySchema(
    name="account",
    label="Account",
    key="account-number",
    filename="account.csv",
    attributes=[
        number("balance"),
        string("account-number"),
        date_time("opening-date"),
        string("account-type"),
    ],
)

CARD = EntitySchema(
    name="card",
    label="Card",
    key="card-number",
    filename="card.csv",
    attributes=[
        number("card-number"),
        string("name-on-card"),
        date_time("created-date"),
        date_time("expiry-date"),
    ],
)
