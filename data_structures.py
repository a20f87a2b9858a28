"""Problem instance and solution containers passed between pipeline stages."""
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Tuple

from exceptions import InvalidProblemError

# Variable kinds, in model order
PURCHASE = "purchase"
SLACK = "slack"
PENALTY = "penalty"
DEVIATION = "deviation"


def _as_matrix(table, name):
    try:
        return tuple(tuple(float(v) for v in row) for row in table)
    except (TypeError, ValueError) as e:
        raise InvalidProblemError(f"{name} must be a numeric table: {e}") from e


@dataclass(frozen=True)
class ProblemDefinition:
    """
    One advertising-budget instance: M outlets (stations) by K time slots.

    capacity[i][j]      max purchasable quantity (minutes) for outlet i, slot j
    unit_cost[i][j]     cost per unit
    unit_coverage[i][j] audience reached per unit
    max_budget[i]       spending ceiling of outlet i
    min_coverage        floor on total coverage
    min_slot_spend_fraction  share of the total budget every slot must receive
    """
    capacity: Tuple[Tuple[float, ...], ...]
    unit_cost: Tuple[Tuple[float, ...], ...]
    unit_coverage: Tuple[Tuple[float, ...], ...]
    max_budget: Tuple[float, ...]
    min_coverage: float
    min_slot_spend_fraction: float
    name: str = "instance"

    def __post_init__(self):
        set_ = object.__setattr__
        set_(self, "capacity", _as_matrix(self.capacity, "capacity"))
        set_(self, "unit_cost", _as_matrix(self.unit_cost, "unit_cost"))
        set_(self, "unit_coverage", _as_matrix(self.unit_coverage, "unit_coverage"))
        try:
            set_(self, "max_budget", tuple(float(b) for b in self.max_budget))
            set_(self, "min_coverage", float(self.min_coverage))
            set_(self, "min_slot_spend_fraction", float(self.min_slot_spend_fraction))
        except (TypeError, ValueError) as e:
            raise InvalidProblemError(f"budget and floors must be numeric: {e}") from e
        self._validate()

    def _validate(self):
        m = len(self.capacity)
        if m == 0:
            raise InvalidProblemError("at least one outlet is required")
        k = len(self.capacity[0])
        if k == 0:
            raise InvalidProblemError("at least one time slot is required")

        for name in ("capacity", "unit_cost", "unit_coverage"):
            table = getattr(self, name)
            if len(table) != m or any(len(row) != k for row in table):
                raise InvalidProblemError(f"{name} must be {m}x{k}", size=(m, k))
            if any(v < 0 for row in table for v in row):
                raise InvalidProblemError(f"{name} has negative entries", size=(m, k))

        if len(self.max_budget) != m:
            raise InvalidProblemError(
                f"max_budget has length {len(self.max_budget)}, expected {m}", size=(m, k)
            )
        if any(b < 0 for b in self.max_budget):
            raise InvalidProblemError("max_budget has negative entries", size=(m, k))
        if self.min_coverage < 0 or self.min_slot_spend_fraction < 0:
            raise InvalidProblemError("coverage floor and slot fraction must be non-negative", size=(m, k))

    @property
    def num_outlets(self) -> int:
        return len(self.capacity)

    @property
    def num_slots(self) -> int:
        return len(self.capacity[0])

    @property
    def size(self) -> Tuple[int, int]:
        return self.num_outlets, self.num_slots

    @property
    def num_rows(self) -> int:
        # budget rows + slot-minimum rows + coverage row
        return self.num_outlets + self.num_slots + 1

    @property
    def total_budget(self) -> float:
        return sum(self.max_budget)

    @property
    def slot_spend_floor(self) -> float:
        return self.min_slot_spend_fraction * self.total_budget

    def slot_sign(self, j: int) -> int:
        return 1 if j < self.num_slots // 2 else -1


@dataclass(frozen=True)
class VariableRecord:
    """Read-only snapshot of one variable after a solve."""
    name: str
    kind: str
    value: float
    is_basic: bool = False
    reduced_cost: float = 0.0
    row: Optional[str] = None  # constraint a slack/penalty belongs to


@dataclass(frozen=True)
class SolveSnapshot:
    status: int
    objective_value: float
    iterations: int
    records: Tuple[VariableRecord, ...]

    def values(self) -> Tuple[float, ...]:
        return tuple(r.value for r in self.records)

    def names(self) -> Tuple[str, ...]:
        return tuple(r.name for r in self.records)


@dataclass(frozen=True)
class SolutionVector:
    """Plain values keyed by variable identity (ordered names)."""
    label: str
    names: Tuple[str, ...]
    values: Tuple[float, ...]

    def __post_init__(self):
        object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))

    def __len__(self):
        return len(self.values)

    def as_dict(self) -> Dict[str, float]:
        return dict(zip(self.names, self.values))

    def value(self, name: str) -> float:
        return self.values[self.names.index(name)]


@dataclass(frozen=True)
class SolutionClassification:
    is_degenerate: bool
    is_multiple_optima: bool
    binding_constraints: Tuple[str, ...]
    basis: Tuple[int, ...]
    reduced_costs: Tuple[float, ...]


@dataclass(frozen=True)
class PrimalResult:
    problem_name: str
    size: Tuple[int, int]
    status: int
    objective_value: float
    iterations: int
    total_quantity: float
    total_cost: float
    total_coverage: float
    unused_budget: float
    records: Tuple[VariableRecord, ...]
    classification: SolutionClassification
    optimal: SolutionVector
    point_a: Optional[SolutionVector] = None
    point_b: Optional[SolutionVector] = None
    interpolated: Optional[SolutionVector] = None
    violations: Dict[str, float] = field(default_factory=dict)
    notes: Dict[str, str] = field(default_factory=dict)

    def alternate_points(self) -> Sequence[SolutionVector]:
        return [p for p in (self.point_a, self.point_b, self.interpolated) if p is not None]
