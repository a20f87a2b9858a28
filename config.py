# config.py
"""
Centralized solver and analysis configuration.
main.py applies update_from_row(...) to the first row of a settings sheet.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from exceptions import ConfigError


@dataclass
class SolverConfig:
    # Gurobi environment parameters
    Method: int = 0         # primal simplex
    Presolve: int = 0       # keep basis info tied to the model as written
    OutputFlag: int = 0
    LogFile: str = ""

    # Alternate-point controls
    IterationDivisor: int = 2
    InterpolationWeight: float = 0.5

    # Noise policy for zero tests and display
    RoundingDigits: int = 4

    def update(self, **kwargs) -> None:
        """
        Programmatic override of fields, with safety for unknown keys.
        Example:
            SETTINGS.update(IterationDivisor=3)
        """
        for k, v in kwargs.items():
            if hasattr(self, k):
                setattr(self, k, v)
            else:
                raise AttributeError(f"Unknown config field: {k}")

    def validate(self) -> None:
        if int(self.IterationDivisor) < 1:
            raise ConfigError(f"IterationDivisor must be >= 1, got {self.IterationDivisor}")
        if int(self.RoundingDigits) < 0:
            raise ConfigError(f"RoundingDigits must be >= 0, got {self.RoundingDigits}")

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Singleton instance
SETTINGS = SolverConfig()


def update_from_row(row, config: Optional[SolverConfig] = None) -> None:
    """
    Accepts a pandas Series or dict with any of these keys:
      ITERATION_DIVISOR
      INTERPOLATION_WEIGHT
      ROUNDING_DIGITS
      SOLVER_OUTPUT
    Missing keys leave the current value untouched. Without an explicit
    config the current module-level SETTINGS is updated.
    """
    config = config or SETTINGS
    get = row.get if hasattr(row, "get") else (lambda k, default=None: row[k] if k in row else default)

    fields = {
        "ITERATION_DIVISOR": ("IterationDivisor", int),
        "INTERPOLATION_WEIGHT": ("InterpolationWeight", float),
        "ROUNDING_DIGITS": ("RoundingDigits", int),
        "SOLVER_OUTPUT": ("OutputFlag", int),
    }
    changes = {}
    for key, (attr, cast) in fields.items():
        value = get(key, None)
        # NaN cells from a spreadsheet row count as missing
        if value is not None and value == value:
            changes[attr] = cast(value)
    config.update(**changes)
    config.validate()


__all__ = [
    "SolverConfig",
    "SETTINGS",
    "update_from_row",
]
