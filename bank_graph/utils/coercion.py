"""Convert raw CSV fields into Cypher literals."""

import json
import math

import pandas as pd

STRING = "string"
NUMBER = "number"
DATETIME = "datetime"


def to_string_literal(value: str) -> str:
    """Quote a string for Cypher, escaping quotes, backslashes and control characters."""
    return json.dumps(value, ensure_ascii=False)


def to_number_literal(value: str) -> str:
    """Parse an integer or decimal number. Raises ValueError on anything else."""
    text = value.strip()
    try:
        return str(int(text))
    except ValueError:
        number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"Non-finite number is not a valid literal: {value!r}")
    # Cypher exponents take no explicit plus sign
    return repr(number).replace("e+", "e")


def to_datetime_literal(value: str) -> str:
    """Parse an ISO-8601-like timestamp into a Cypher localdatetime literal.

    The wall-clock fields are kept as written; a timezone offset, if present,
    is dropped rather than converted.
    """
    # ISO 8601 only; keywords such as "now" are rejected
    timestamp = pd.to_datetime(value.strip(), format="ISO8601")
    if pd.isna(timestamp):
        raise ValueError(f"Missing date-time value: {value!r}")
    formatted = timestamp.strftime("%Y-%m-%dT%H:%M:%S") + f".{timestamp.microsecond // 1000:03d}"
    return f'localdatetime("{formatted}")'


_COERCERS = {
    STRING: to_string_literal,
    NUMBER: to_number_literal,
    DATETIME: to_datetime_literal,
}


def coerce(value: str, kind: str) -> str:
    """Coerce a raw field into the literal for its declared attribute kind."""
    try:
        coercer = _COERCERS[kind]
    except KeyError:
        raise ValueError(f"Unknown attribute kind: {kind}") from None
    return coercer(value)
