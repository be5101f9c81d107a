"""Linear regression of resistance against fat percentage."""

import math
from dataclasses import dataclass, field

from composition_fit.domain.regression import (
    ChartSeries,
    Composition,
    DegenerateFitError,
    Fit,
    InsufficientDataError,
    Point,
)

MIN_POINTS = 2
PERCENT_MIN = 0.0
PERCENT_MAX = 100.0


@dataclass
class RegressionEngine:
    """Owns the observed points and fits a line through them on demand."""

    _points: list[Point] = field(default_factory=list)

    @property
    def points(self) -> tuple[Point, ...]:
        """Return the stored points in entry order."""
        return tuple(self._points)

    def add_point(self, fat: float, resistance: float) -> None:
        """Append a measurement; values must already be finite numbers."""
        self._points.append(Point(fat=float(fat), resistance=float(resistance)))

    def fit(self) -> Fit:
        """Compute the ordinary least-squares fit over the current points."""
        if len(self._points) < MIN_POINTS:
            raise InsufficientDataError(
                f"At least {MIN_POINTS} points are required, "
                f"got {len(self._points)}."
            )
        if len({point.fat for point in self._points}) < MIN_POINTS:
            raise DegenerateFitError("All fat values are identical.")

        count = len(self._points)
        mean_x = sum(point.fat for point in self._points) / count
        mean_y = sum(point.resistance for point in self._points) / count
        sxx = sum(_square(point.fat - mean_x) for point in self._points)
        sxy = sum(
            (point.fat - mean_x) * (point.resistance - mean_y)
            for point in self._points
        )
        if sxx == 0:
            raise DegenerateFitError("Fat values have zero variance.")

        slope = sxy / sxx
        intercept = mean_y - slope * mean_x
        if not all(map(math.isfinite, (sxx, sxy, slope, intercept))):
            raise DegenerateFitError("Fit is out of floating-point range.")
        return Fit(
            slope=slope,
            intercept=intercept,
            r_squared=_r_squared(self._points, slope, intercept, mean_y),
        )

    def predict_resistance(self, fit: Fit, fat: float) -> float:
        """Evaluate the fitted line at a fat percentage."""
        return fit.slope * fat + fit.intercept

    def predict_composition(self, fit: Fit, resistance: float) -> Composition:
        """Invert the fitted line to estimate fat and protein percentages."""
        if fit.slope == 0:
            raise DegenerateFitError("Slope is zero; the line cannot be inverted.")
        fat = (resistance - fit.intercept) / fit.slope
        protein = PERCENT_MAX - fat
        return Composition(fat=_clamp_percent(fat), protein=_clamp_percent(protein))

    def chart_series(self, fit: Fit | None = None) -> ChartSeries:
        """Return measured values and, when a fit is given, the trendline."""
        labels = tuple(point.fat for point in self._points)
        trendline = None
        if fit is not None:
            trendline = tuple(self.predict_resistance(fit, fat) for fat in labels)
        return ChartSeries(
            labels=labels,
            measured=tuple(point.resistance for point in self._points),
            trendline=trendline,
        )


def format_equation(fit: Fit, decimals: int = 2) -> str:
    """Format a fit as `y = ax + b` for display."""
    sign = "-" if fit.intercept < 0 else "+"
    return (
        f"y = {fit.slope:.{decimals}f}x {sign} {abs(fit.intercept):.{decimals}f}"
    )


def format_percent(value: float) -> str:
    """Format a percentage with two decimals."""
    return f"{value:.2f}"


def _clamp_percent(value: float) -> float:
    return max(PERCENT_MIN, min(value, PERCENT_MAX))


def _r_squared(
    points: list[Point], slope: float, intercept: float, mean_y: float
) -> float:
    ss_tot = sum(_square(point.resistance - mean_y) for point in points)
    ss_res = sum(
        _square(point.resistance - (slope * point.fat + intercept)) for point in points
    )
    if not (math.isfinite(ss_tot) and math.isfinite(ss_res)):
        raise DegenerateFitError("Fit residuals are out of floating-point range.")
    if ss_tot == 0:
        return 1.0
    return 1 - ss_res / ss_tot


def _square(value: float) -> float:
    # float ** 2 raises OverflowError; multiplication saturates to inf.
    return value * value
