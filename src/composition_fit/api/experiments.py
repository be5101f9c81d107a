"""Experiment session endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, Response, status

from composition_fit.api.models import (
    ChartOut,
    CompositionOut,
    ErrorOut,
    PointIn,
    PointOut,
    PointsOut,
    PredictionIn,
    SessionDetailOut,
    SessionOut,
    TrendlineOut,
)
from composition_fit.services.regression import format_equation, format_percent

if TYPE_CHECKING:
    from composition_fit.containers import AppContainer
    from composition_fit.domain.regression import ChartSeries, Point

router = APIRouter(
    prefix="/sessions",
    tags=["sessions"],
    responses={
        404: {"model": ErrorOut, "description": "Unknown or expired session"}
    },
)
_REGRESSION_ERROR = {422: {"model": ErrorOut, "description": "No usable fit"}}


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_session(request: Request) -> SessionOut:
    """Start a new experiment with no points."""
    session = _container(request).experiment_service.start_session()
    return SessionOut(session_id=session.id)


@router.get("/{session_id}")
async def session_detail(session_id: UUID, request: Request) -> SessionDetailOut:
    """Return the session's points and chart."""
    service = _container(request).experiment_service
    points = service.get_session(session_id).engine.points
    return SessionDetailOut(
        session_id=session_id,
        point_count=len(points),
        points=_serialize_points(points),
        chart=_serialize_chart(service.chart(session_id)),
    )


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_session(session_id: UUID, request: Request) -> Response:
    """Discard a session."""
    _container(request).experiment_service.end_session(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{session_id}/points",
    responses={409: {"model": ErrorOut, "description": "Point limit reached"}},
)
async def add_point(session_id: UUID, payload: PointIn, request: Request) -> PointsOut:
    """Add a (fat, resistance) measurement."""
    points = _container(request).experiment_service.add_point(
        session_id, payload.fat, payload.resistance
    )
    return PointsOut(point_count=len(points), points=_serialize_points(points))


@router.post("/{session_id}/trendline", responses=_REGRESSION_ERROR)
async def generate_trendline(session_id: UUID, request: Request) -> TrendlineOut:
    """Fit a line through the session's points."""
    container = _container(request)
    trendline = container.experiment_service.generate_trendline(session_id)
    fit = trendline.fit
    return TrendlineOut(
        slope=fit.slope,
        intercept=fit.intercept,
        r_squared=fit.r_squared,
        equation=format_equation(fit, container.settings.display_decimals),
        chart=_serialize_chart(trendline.chart),
    )


@router.get("/{session_id}/chart")
async def chart(session_id: UUID, request: Request) -> ChartOut:
    """Return chart series for the session."""
    return _serialize_chart(_container(request).experiment_service.chart(session_id))


@router.post("/{session_id}/predictions", responses=_REGRESSION_ERROR)
async def predict(
    session_id: UUID, payload: PredictionIn, request: Request
) -> CompositionOut:
    """Predict fat and protein percentages from a resistance reading."""
    composition = _container(request).experiment_service.predict(
        session_id, payload.resistance
    )
    return CompositionOut(
        fat=composition.fat,
        protein=composition.protein,
        fat_display=format_percent(composition.fat),
        protein_display=format_percent(composition.protein),
    )


def _serialize_points(points: tuple[Point, ...]) -> list[PointOut]:
    return [PointOut(fat=point.fat, resistance=point.resistance) for point in points]


def _serialize_chart(series: ChartSeries) -> ChartOut:
    return ChartOut(
        labels=list(series.labels),
        measured=list(series.measured),
        trendline=list(series.trendline) if series.trendline is not None else None,
    )
