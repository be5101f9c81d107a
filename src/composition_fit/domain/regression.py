"""Domain models for the fat/resistance regression."""

from dataclasses import dataclass


class RegressionError(ValueError):
    """Base class for data-driven regression failures."""

    code = "regression_error"


class InsufficientDataError(RegressionError):
    """Raised when a fit is requested with fewer than two points."""

    code = "insufficient_data"


class DegenerateFitError(RegressionError):
    """Raised when the fitted line cannot be computed or inverted."""

    code = "degenerate_fit"


@dataclass(frozen=True)
class Point:
    """Single measurement: fat percentage and resistance in ohms."""

    fat: float
    resistance: float


@dataclass(frozen=True)
class Fit:
    """Least-squares line `resistance = slope * fat + intercept`."""

    slope: float
    intercept: float
    r_squared: float


@dataclass(frozen=True)
class Composition:
    """Predicted fat and protein percentages, each clamped to [0, 100]."""

    fat: float
    protein: float


@dataclass(frozen=True)
class ChartSeries:
    """Chart-ready values in point insertion order."""

    labels: tuple[float, ...]
    measured: tuple[float, ...]
    trendline: tuple[float, ...] | None
