from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class FillerWordCount:
    word: str
    count: int

    def to_dict(self) -> dict:
        return {"word": self.word, "count": self.count}


@dataclass(frozen=True)
class FillerWordReport:
    total: int
    details: Tuple[FillerWordCount, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {"total": self.total, "details": [item.to_dict() for item in self.details]}


@dataclass(frozen=True)
class VoiceMetrics:
    speech_rate: int
    clarity: int
    volume: int
    tone: str
    filler_word_count: int
    filler_words: Tuple[FillerWordCount, ...]
    pause_duration: float
    overall_score: int

    def to_dict(self) -> dict:
        return {
            "speechRate": self.speech_rate,
            "clarity": self.clarity,
            "volume": self.volume,
            "tone": self.tone,
            "fillerWordCount": self.filler_word_count,
            "fillerWords": [item.to_dict() for item in self.filler_words],
            "pauseDuration": self.pause_duration,
            "overallScore": self.overall_score,
        }
