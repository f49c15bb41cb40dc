"""
Init file for the graph schema models.
"""

from .attributes import Attribute
from .entities import ACCOUNT, BANK, CARD, PERSON, EntitySchema
from .relationships import CONTRACT, REPRESENTED_BY, TRANSACTION, RelationshipSchema, Role

__all__ = [
    "ACCOUNT",
    "BANK",
    "CARD",
    "CONTRACT",
    "PERSON",
    "REPRESENTED_BY",
    "TRANSACTION",
    "Attribute",
    "EntitySchema",
    "RelationshipSchema",
    "Role",
]
