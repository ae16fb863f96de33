from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from interview_coach.constants import BEHAVIORAL_KEYWORDS, COMMUNICATION_KEYWORDS, TECHNICAL_KEYWORDS
from interview_coach.core.numbers import clamp, now_ms as _now_ms, round_half_up
from interview_coach.analytics.models import CategoryScores, PerformanceMetrics
from interview_coach.schemas import EvaluationCriterion


def _criterion(value: Any) -> EvaluationCriterion:
    if isinstance(value, EvaluationCriterion):
        return value
    return EvaluationCriterion.model_validate(value)


def _normalized(criterion: EvaluationCriterion) -> float:
    if criterion.max_score <= 0:
        return 0.0
    return clamp(criterion.score / criterion.max_score * 100.0)


@dataclass
class ScoreCategorizer:
    technical_keywords: Sequence[str] = TECHNICAL_KEYWORDS
    communication_keywords: Sequence[str] = COMMUNICATION_KEYWORDS
    behavioral_keywords: Sequence[str] = BEHAVIORAL_KEYWORDS
    default_bucket: str = "behavioral"

    def bucket(self, name: str) -> str:
        lowered = str(name or "").lower()
        if any(keyword in lowered for keyword in self.technical_keywords):
            return "technical"
        if any(keyword in lowered for keyword in self.communication_keywords):
            return "communication"
        if any(keyword in lowered for keyword in self.behavioral_keywords):
            return "behavioral"
        return self.default_bucket

    def categorize(self, criteria: Iterable[Any]) -> CategoryScores:
        sums = {"technical": 0.0, "communication": 0.0, "behavioral": 0.0}
        counts = {"technical": 0, "communication": 0, "behavioral": 0}

        for raw in criteria or []:
            criterion = _criterion(raw)
            bucket = self.bucket(criterion.name)
            sums[bucket] += _normalized(criterion)
            counts[bucket] += 1

        def average(bucket: str) -> int:
            if counts[bucket] == 0:
                return 0
            return round_half_up(clamp(sums[bucket] / counts[bucket]))

        return CategoryScores(
            technical_score=average("technical"),
            communication_score=average("communication"),
            behavioral_score=average("behavioral"),
        )


_default_categorizer = ScoreCategorizer()


def categorize(criteria: Iterable[Any]) -> CategoryScores:
    return _default_categorizer.categorize(criteria)


def calculate_performance_metrics(
    score: float,
    criteria: Iterable[Any],
    duration: float = 0.0,
    now_ms: int | None = None,
) -> PerformanceMetrics:
    """Snapshot a finished session; the result is appended to the caller's history."""
    stamp = _now_ms() if now_ms is None else int(now_ms)
    categories = categorize(criteria)
    return PerformanceMetrics(
        session_id=f"session_{stamp}",
        date=stamp,
        overall_score=clamp(score),
        technical_score=categories.technical_score,
        communication_score=categories.communication_score,
        behavioral_score=categories.behavioral_score,
        duration=max(0.0, float(duration)),
    )
