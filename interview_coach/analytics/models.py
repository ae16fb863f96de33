from dataclasses import dataclass, field
from typing import List, Literal, Tuple


Trend = Literal["improving", "declining", "stable"]
Comparison = Literal["above", "at", "below"]


@dataclass(frozen=True)
class CategoryScores:
    technical_score: int
    communication_score: int
    behavioral_score: int

    def to_dict(self) -> dict:
        return {
            "technicalScore": self.technical_score,
            "communicationScore": self.communication_score,
            "behavioralScore": self.behavioral_score,
        }


@dataclass(frozen=True)
class PerformanceMetrics:
    """One completed session. Histories are append-only, oldest first."""
    session_id: str
    date: int
    overall_score: float
    technical_score: float
    communication_score: float
    behavioral_score: float
    duration: float = 0.0

    @classmethod
    def from_dict(cls, payload: dict) -> "PerformanceMetrics":
        def pick(camel: str, snake: str, default=0):
            if camel in payload:
                return payload[camel]
            return payload.get(snake, default)

        return cls(
            session_id=str(pick("sessionId", "session_id", "")),
            date=int(pick("date", "date", 0)),
            overall_score=float(pick("overallScore", "overall_score")),
            technical_score=float(pick("technicalScore", "technical_score")),
            communication_score=float(pick("communicationScore", "communication_score")),
            behavioral_score=float(pick("behavioralScore", "behavioral_score")),
            duration=float(pick("duration", "duration")),
        )

    def to_dict(self) -> dict:
        return {
            "sessionId": self.session_id,
            "date": self.date,
            "overallScore": self.overall_score,
            "technicalScore": self.technical_score,
            "communicationScore": self.communication_score,
            "behavioralScore": self.behavioral_score,
            "duration": self.duration,
        }


@dataclass(frozen=True)
class TrendAnalysis:
    trend: Trend
    change_percentage: int
    average_score: float

    def to_dict(self) -> dict:
        return {
            "trend": self.trend,
            "changePercentage": self.change_percentage,
            "averageScore": self.average_score,
        }


@dataclass(frozen=True)
class BenchmarkComparison:
    benchmark: int
    percentile: int
    comparison: Comparison

    def to_dict(self) -> dict:
        return {"benchmark": self.benchmark, "percentile": self.percentile, "comparison": self.comparison}


@dataclass(frozen=True)
class RadarPoint:
    skill: str
    score: float


@dataclass(frozen=True)
class TrendPoint:
    date: str
    score: float


@dataclass(frozen=True)
class AnalyticsData:
    performance_history: Tuple[PerformanceMetrics, ...]
    skill_radar: List[RadarPoint] = field(default_factory=list)
    weakness_areas: List[str] = field(default_factory=list)
    industry_benchmark: int = 0
    prediction_score: int = 50
    trend_data: List[TrendPoint] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "performanceHistory": [item.to_dict() for item in self.performance_history],
            "skillRadar": [{"skill": p.skill, "score": p.score} for p in self.skill_radar],
            "weaknessAreas": list(self.weakness_areas),
            "industryBenchmark": self.industry_benchmark,
            "predictionScore": self.prediction_score,
            "trendData": [{"date": p.date, "score": p.score} for p in self.trend_data],
        }
