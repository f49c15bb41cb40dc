"""Dependency-ordered load plan.

Relationship files match entities by natural key, so each relationship step
requires the entity types of its role players. The plan is a DAG of load
steps; a topological sort gives the execution order and the pipeline runs
the steps one after another, recording a result per step.
"""

import heapq
import logging
from dataclasses import dataclass, field

from bank_graph.errors import PlanError
from bank_graph.loaders.graph_loader import GraphLoader
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

logger = logging.getLogger(__name__)

PENDING = "pending"
SUCCEEDED = "succeeded"
FAILED = "failed"


@dataclass
class LoadStep:
    """One CSV file loaded by one transaction."""

    name: str
    schema: EntitySchema | RelationshipSchema
    filename: str
    requires: list[str] = field(default_factory=list)

    @classmethod
    def for_schema(
        cls, name: str, schema: EntitySchema | RelationshipSchema, filename: str | None = None
    ) -> "LoadStep":
        requires = schema.requires if isinstance(schema, RelationshipSchema) else []
        return cls(name=name, schema=schema, filename=filename or schema.filename, requires=list(requires))

    @property
    def provides(self) -> str | None:
        """Entity type inserted by this step, if any."""
        return self.schema.name if isinstance(self.schema, EntitySchema) else None


@dataclass
class StepResult:
    name: str
    status: str = PENDING
    count: int = 0


class LoadPlan:
    """Load steps plus their "requires entities of type X" edges.

    Example:
        plan = LoadPlan([persons, accounts, contracts])
        plan.execution_order()  # persons and accounts before contracts
    """

    def __init__(self, steps: list[LoadStep]):
        self.steps: dict[str, LoadStep] = {}
        for step in steps:
            if step.name in self.steps:
                raise PlanError(
                    context="Building the load plan",
                    cause=f"Step '{step.name}' is declared more than once",
                    fix="Give every load step a unique name.",
                )
            self.steps[step.name] = step

    def upstream(self, name: str) -> list[str]:
        """Names of the steps that must finish before step `name` starts."""
        providers = {step.provides: step.name for step in self.steps.values() if step.provides}
        result: list[str] = []
        for entity in self.steps[name].requires:
            if entity not in providers:
                raise PlanError(
                    context=f"Resolving dependencies of step '{name}'",
                    cause=f"No step loads entities of type '{entity}'",
                    fix=f"Add a load step for '{entity}' to the plan.",
                )
            if providers[entity] != name and providers[entity] not in result:
                result.append(providers[entity])
        return result

    def execution_order(self) -> list[LoadStep]:
        """Return steps in dependency order.

        Uses Kahn's algorithm; among steps that are ready at the same time the
        one declared first runs first, so the order is deterministic.

        Raises:
            PlanError: If a dependency is unknown or the steps form a cycle.
        """
        position = {name: index for index, name in enumerate(self.steps)}
        in_degree: dict[str, int] = {}
        downstream: dict[str, list[str]] = {name: [] for name in self.steps}
        for name in self.steps:
            upstream = self.upstream(name)
            in_degree[name] = len(upstream)
            for dependency in upstream:
                downstream[dependency].append(name)

        ready = [(position[name], name) for name, degree in in_degree.items() if degree == 0]
        heapq.heapify(ready)
        order: list[LoadStep] = []

        while ready:
            _, name = heapq.heappop(ready)
            order.append(self.steps[name])
            for dependent in downstream[name]:
                in_degree[dependent] -= 1
                if in_degree[dependent] == 0:
                    heapq.heappush(ready, (position[dependent], dependent))

        if len(order) != len(self.steps):
            remaining = sorted(set(self.steps) - {step.name for step in order})
            raise PlanError(
                context="Building the load order",
                cause=f"Cycle detected involving steps: {', '.join(remaining)}",
                fix="Remove circular dependencies between load steps.",
            )
        return order


def default_plan() -> LoadPlan:
    return LoadPlan(
        [
            LoadStep.for_schema("persons", PERSON),
            LoadStep.for_schema("accounts", ACCOUNT),
            LoadStep.for_schema("banks", BANK),
            LoadStep.for_schema("cards", CARD),
            LoadStep.for_schema("represented-by", REPRESENTED_BY),
            LoadStep.for_schema("transactions", TRANSACTION),
            LoadStep.for_schema("contracts", CONTRACT),
        ]
    )


class LoadPipeline:
    def __init__(self, loader: GraphLoader, plan: LoadPlan | None = None):
        self.loader = loader
        self.plan = plan or default_plan()
        self.results: list[StepResult] = []

    def run(self) -> list[StepResult]:
        """Run every step in order, stopping at the first failure.

        The failing step is marked failed, later steps stay pending and the
        error is raised. Steps that already finished keep their committed data.
        """
        order = self.plan.execution_order()
        self.results = [StepResult(name=step.name) for step in order]
        logger.info(f"Load order: {', '.join(step.name for step in order)}")

        for step, result in zip(order, self.results):
            try:
                result.count = self.loader.load_file(step.schema, step.filename)
            except Exception:
                result.status = FAILED
                logger.error(f"Step '{step.name}' failed; stopping the run")
                raise
            result.status = SUCCEEDED

        return self.results
