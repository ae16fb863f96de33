from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Sequence

from interview_coach.analytics.models import BenchmarkComparison, PerformanceMetrics, TrendAnalysis
from interview_coach.constants import (
    DECLINE_THRESHOLD,
    DEFAULT_BENCHMARK,
    ROLE_BENCHMARKS,
    TREND_SCORES,
    WEAKNESS_THRESHOLD,
)
from interview_coach.core.numbers import clamp, mean, population_stddev, round_half_up
from interview_coach.schemas import SkillAssessment


def as_metrics(value: Any) -> PerformanceMetrics:
    if isinstance(value, PerformanceMetrics):
        return value
    return PerformanceMetrics.from_dict(dict(value))


def as_history(history: Iterable[Any] | None) -> list[PerformanceMetrics]:
    return [as_metrics(item) for item in (history or [])]


@dataclass
class TrendAnalyzer:
    change_threshold: float = 5.0

    def analyze(self, history: Sequence[PerformanceMetrics]) -> TrendAnalysis:
        if not history:
            return TrendAnalysis(trend="stable", change_percentage=0, average_score=0)

        scores = [item.overall_score for item in history]
        if len(scores) < 2:
            return TrendAnalysis(trend="stable", change_percentage=0, average_score=scores[0])

        average = round_half_up(mean(scores))

        # odd lengths give the extra entry to the second half
        mid = len(scores) // 2
        first_avg = mean(scores[:mid])
        second_avg = mean(scores[mid:])

        if first_avg == 0:
            return TrendAnalysis(trend="stable", change_percentage=0, average_score=average)

        change = (second_avg - first_avg) / first_avg * 100.0
        if change > self.change_threshold:
            trend = "improving"
        elif change < -self.change_threshold:
            trend = "declining"
        else:
            trend = "stable"

        return TrendAnalysis(trend=trend, change_percentage=round_half_up(change), average_score=average)


_CATEGORY_MESSAGES = (
    (
        "technical_score",
        "Technical Skills - Consider practicing coding problems and system design",
        "Technical scores showing decline - review fundamentals",
    ),
    (
        "communication_score",
        "Communication Skills - Work on articulating thoughts clearly and concisely",
        "Communication effectiveness decreasing - focus on clarity",
    ),
    (
        "behavioral_score",
        "Behavioral Responses - Practice STAR method for behavioral questions",
        "Behavioral responses need attention - prepare more examples",
    ),
)


@dataclass
class WeaknessIdentifier:
    threshold: float = WEAKNESS_THRESHOLD
    decline_threshold: float = DECLINE_THRESHOLD
    window: int = 3

    def identify(self, history: Sequence[PerformanceMetrics]) -> list[str]:
        if not history:
            return []

        weaknesses: list[str] = []
        for attr, low_message, _ in _CATEGORY_MESSAGES:
            if mean(getattr(item, attr) for item in history) < self.threshold:
                weaknesses.append(low_message)

        if len(history) >= self.window:
            recent = history[-self.window:]
            for attr, _, decline_message in _CATEGORY_MESSAGES:
                delta = getattr(recent[-1], attr) - getattr(recent[0], attr)
                if delta < self.decline_threshold:
                    weaknesses.append(decline_message)

        return weaknesses


@dataclass
class BenchmarkComparator:
    role_benchmarks: Sequence[tuple[Sequence[str], int]] = ROLE_BENCHMARKS
    default_benchmark: int = DEFAULT_BENCHMARK
    band: float = 5.0

    def benchmark_for(self, role: str) -> int:
        lowered = str(role or "").lower()
        for keywords, benchmark in self.role_benchmarks:
            if any(keyword in lowered for keyword in keywords):
                return benchmark
        return self.default_benchmark

    def compare(self, score: float, role: str) -> BenchmarkComparison:
        benchmark = self.benchmark_for(role)
        percentile = int(clamp(round_half_up(score), 0, 99))

        if score > benchmark + self.band:
            comparison = "above"
        elif score < benchmark - self.band:
            comparison = "below"
        else:
            comparison = "at"

        return BenchmarkComparison(benchmark=benchmark, percentile=percentile, comparison=comparison)


@dataclass
class SuccessPredictor:
    trend_analyzer: TrendAnalyzer = field(default_factory=TrendAnalyzer)
    trend_scores: Mapping[str, float] = field(default_factory=lambda: TREND_SCORES)
    recent_window: int = 3
    points_per_assessment: int = 20

    def predict(self, history: Sequence[PerformanceMetrics], skill_assessments: Sequence[SkillAssessment] = ()) -> int:
        if not history:
            return 50

        recent = [item.overall_score for item in history[-self.recent_window:]]
        recent_avg = mean(recent)
        trend_score = self.trend_scores[self.trend_analyzer.analyze(history).trend]
        consistency = max(0.0, 100.0 - population_stddev(recent))
        coverage = min(100, len(skill_assessments or ()) * self.points_per_assessment)

        prediction = (
            0.4 * recent_avg
            + 0.3 * trend_score
            + 0.2 * consistency
            + 0.1 * coverage
        )
        return round_half_up(clamp(prediction))


class PerformanceAnalyticsEngine:
    def __init__(self):
        self.trend = TrendAnalyzer()
        self.weakness = WeaknessIdentifier()
        self.benchmark = BenchmarkComparator()
        self.predictor = SuccessPredictor(trend_analyzer=self.trend)


_default_engine = PerformanceAnalyticsEngine()


def analyze_trends(history: Iterable[Any]) -> TrendAnalysis:
    return _default_engine.trend.analyze(as_history(history))


def identify_weaknesses(history: Iterable[Any]) -> list[str]:
    return _default_engine.weakness.identify(as_history(history))


def compare_with_benchmark(score: float, role: str) -> BenchmarkComparison:
    return _default_engine.benchmark.compare(score, role)


def calculate_success_prediction(history: Iterable[Any], skill_assessments: Iterable[Any] | None = None) -> int:
    assessments = [
        item if isinstance(item, SkillAssessment) else SkillAssessment.model_validate(item)
        for item in (skill_assessments or [])
    ]
    return _default_engine.predictor.predict(as_history(history), assessments)


def predict_performance(scores: Sequence[float]) -> float:
    """Next-session estimate from raw overall scores, weighted toward the long-run mean."""
    if not scores:
        return 50
    average = mean(scores)
    if len(scores) < 2:
        return average
    recent_avg = mean(scores[-3:])
    return round_half_up(clamp(average * 0.6 + recent_avg * 0.4))
