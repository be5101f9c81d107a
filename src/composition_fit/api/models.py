"""Pydantic models for the experiment API."""

from uuid import UUID

from pydantic import BaseModel, Field


class PointIn(BaseModel):
    """A measurement submitted from the form."""

    fat: float = Field(allow_inf_nan=False)
    resistance: float = Field(allow_inf_nan=False)


class PredictionIn(BaseModel):
    """Resistance value to predict a composition for."""

    resistance: float = Field(allow_inf_nan=False)


class PointOut(BaseModel):
    fat: float
    resistance: float


class ChartOut(BaseModel):
    """Chart series; `trendline` is null when no fit is available."""

    labels: list[float]
    measured: list[float]
    trendline: list[float] | None = None


class SessionOut(BaseModel):
    session_id: UUID


class SessionDetailOut(BaseModel):
    session_id: UUID
    point_count: int
    points: list[PointOut]
    chart: ChartOut


class PointsOut(BaseModel):
    point_count: int
    points: list[PointOut]


class TrendlineOut(BaseModel):
    """Fitted line with its display form."""

    slope: float
    intercept: float
    r_squared: float
    equation: str
    chart: ChartOut


class CompositionOut(BaseModel):
    """Predicted composition, raw and formatted for display."""

    fat: float
    protein: float
    fat_display: str
    protein_display: str


class ErrorOut(BaseModel):
    detail: str
    code: str
