"""Build one Cypher statement per CSV record."""

from bank_graph.models import Attribute, EntitySchema, RelationshipSchema, Role
from bank_graph.utils.coercion import coerce


def _set_clause(variable: str, attribute: Attribute, record: dict[str, str]) -> str:
    return f"SET {variable}.{attribute.property_name} = {coerce(record[attribute.column], attribute.kind)}"


def _match_clause(role: Role, record: dict[str, str]) -> str:
    key = role.entity.key_attribute
    value = coerce(record[role.column], key.kind)
    return f"MATCH ({role.variable}:{role.entity.label} {{{key.property_name}: {value}}})"


def build_entity_statement(schema: EntitySchema, record: dict[str, str]) -> str:
    """
    Build a CREATE statement for a single entity.

    Args:
        schema: Entity schema describing the label and attribute columns
        record: One CSV row, column name to raw string

    Returns:
        A CREATE clause followed by one SET clause per attribute
    """
    variable = schema.variable
    lines = [f"CREATE ({variable}:{schema.label})"]
    lines.extend(_set_clause(variable, attribute, record) for attribute in schema.attributes)
    return "\n".join(lines)


def build_relationship_statement(schema: RelationshipSchema, record: dict[str, str]) -> str:
    """
    Build a MATCH + CREATE statement for a single relationship.

    Every role player is matched by its natural key and bound to its own
    variable. The relationship node is created, linked to each role player
    and given its attributes. The statement returns how many relationship
    nodes were created, which is zero when any MATCH found nothing.
    """
    variable = schema.variable
    lines = [_match_clause(role, record) for role in schema.roles]
    lines.append(f"CREATE ({variable}:{schema.label})")
    lines.extend(f"CREATE ({variable})-[:{role.edge_type}]->({role.variable})" for role in schema.roles)
    lines.extend(_set_clause(variable, attribute, record) for attribute in schema.attributes)
    lines.append(f"RETURN count({variable}) AS created")
    return "\n".join(lines)


def build_statement(schema: EntitySchema | RelationshipSchema, record: dict[str, str]) -> str:
    if isinstance(schema, RelationshipSchema):
        return build_relationship_statement(schema, record)
    return build_entity_statement(schema, record)
