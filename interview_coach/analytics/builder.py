from __future__ import annotations

from datetime import datetime
from typing import Any, Iterable

from interview_coach.analytics.models import AnalyticsData, PerformanceMetrics, RadarPoint, TrendPoint
from interview_coach.analytics.performance_engine import (
    PerformanceAnalyticsEngine,
    as_history,
    as_metrics,
)
from interview_coach.constants import ANALYSIS_THRESHOLDS


def _format_date(epoch_ms: int) -> str:
    day = datetime.fromtimestamp(epoch_ms / 1000.0)
    return f"{day.month}/{day.day}/{day.year}"


def generate_skill_radar_data(metrics: PerformanceMetrics) -> list[RadarPoint]:
    return [
        RadarPoint(skill="Technical", score=metrics.technical_score),
        RadarPoint(skill="Communication", score=metrics.communication_score),
        RadarPoint(skill="Behavioral", score=metrics.behavioral_score),
        RadarPoint(skill="Problem Solving", score=(metrics.technical_score + metrics.behavioral_score) / 2),
        RadarPoint(skill="Confidence", score=metrics.communication_score),
    ]


def prediction_outlook(prediction_score: float) -> str:
    bands = ANALYSIS_THRESHOLDS["confidence_level"]
    if prediction_score >= bands["high"]:
        return "high"
    if prediction_score >= bands["medium"]:
        return "moderate"
    return "developing"


def benchmark_standing(score: float, benchmark: float) -> str:
    return "above" if score >= benchmark else "below"


class AnalyticsReportBuilder:
    def __init__(self, engine: PerformanceAnalyticsEngine | None = None):
        self.engine = engine or PerformanceAnalyticsEngine()

    def build(self, history: Iterable[Any], current_metrics: Any, role: str) -> AnalyticsData:
        sessions = as_history(history)
        current = as_metrics(current_metrics)

        return AnalyticsData(
            performance_history=tuple(sessions),
            skill_radar=generate_skill_radar_data(current),
            weakness_areas=self.engine.weakness.identify(sessions),
            industry_benchmark=self.engine.benchmark.compare(current.overall_score, role).benchmark,
            # skill assessments are not collected on this path yet
            prediction_score=self.engine.predictor.predict(sessions, []),
            trend_data=[TrendPoint(date=_format_date(item.date), score=item.overall_score) for item in sessions],
        )


_default_builder = AnalyticsReportBuilder()


def generate_analytics_data(history: Iterable[Any], current_metrics: Any, role: str) -> AnalyticsData:
    return _default_builder.build(history, current_metrics, role)
