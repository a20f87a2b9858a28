"""
Custom exception hierarchy for clearer error handling.
Every error carries the pipeline stage and the instance size (M, K) so a
failure can be traced without a partial report.
"""


class AllocationError(Exception):
    """Base class for allocation pipeline errors."""

    def __init__(self, message="", stage=None, size=None):
        super().__init__(message)
        self.message = message
        self.stage = stage
        self.size = size

    def __str__(self):
        text = self.message
        if self.stage:
            text = f"{self.stage}: {text}"
        if self.size:
            m, k = self.size
            text = f"{text} (M={m}, K={k})"
        return text


class ConfigError(AllocationError):
    pass


class InvalidProblemError(ConfigError):
    pass


class DataLoadError(AllocationError):
    pass


class ModelBuildError(AllocationError):
    pass


class SolveError(AllocationError):
    pass


class InfeasibleError(SolveError):
    pass


class UnboundedError(SolveError):
    pass


class AlternatePointError(AllocationError):
    """Recoverable: the pipeline continues without the alternate point."""


class AuxiliaryInfeasibleError(AlternatePointError):
    pass


class BoundedSolveError(AlternatePointError):
    pass


class DimensionMismatchError(AllocationError):
    pass


class ReportWriteError(AllocationError):
    pass
