"""Error types raised while planning and running a load.

Every error carries a context (what was being attempted), a cause (why it
failed) and a fix (how to resolve it).
"""


class BankGraphError(Exception):
    """Base error with structured messaging."""

    def __init__(self, context: str, cause: str, fix: str) -> None:
        self.context = context
        self.cause = cause
        self.fix = fix
        super().__init__(f"{context}\n\nCause: {cause}\n\nFix: {fix}")


class PlanError(BankGraphError):
    """The load plan cannot be ordered (unknown dependency, duplicate step or cycle)."""

    pass


class MissingReferenceError(BankGraphError):
    """A relationship row references an entity that is not in the store."""

    def __init__(self, relationship: str, row_number: int, keys: dict[str, str]) -> None:
        self.relationship = relationship
        self.row_number = row_number
        self.keys = keys
        described = ", ".join(f"{role}={value!r}" for role, value in keys.items())
        super().__init__(
            context=f"Inserting {relationship} from row {row_number}",
            cause=f"No matching entities found for {described}",
            fix="Load the referenced entities first or correct the key values in the source file.",
        )
