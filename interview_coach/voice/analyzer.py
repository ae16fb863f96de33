"""
Voice metrics from a finished recording.

Only the transcript is analysed for real. The recording itself contributes
its byte size, used as a rough duration estimate, and volume / pause values
are simulated until a signal-processing backend is wired in. All random
sampling goes through the analyzer's `rng` so it can be pinned in tests.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from typing import Any, Sequence

from interview_coach.constants import (
    ANALYSIS_THRESHOLDS,
    ENTHUSIASM_WORDS,
    FILLER_WORDS,
    PROFESSIONAL_WORDS,
    UNCERTAIN_WORDS,
)
from interview_coach.core import config
from interview_coach.core.logger import log_event
from interview_coach.core.numbers import clamp, mean, round_half_up
from interview_coach.voice.models import FillerWordCount, FillerWordReport, VoiceMetrics


def _word_count(transcript: str) -> int:
    return len(str(transcript or "").split())


def _audio_size(audio: Any) -> int:
    if audio is None:
        return 0
    if isinstance(audio, int):
        return max(0, audio)
    if isinstance(audio, (bytes, bytearray, memoryview)):
        return len(audio)
    size = getattr(audio, "size", None)
    if size is None:
        raise TypeError(f"cannot determine recording size from {type(audio).__name__}")
    return max(0, int(size))


def _filler_pattern(word: str) -> re.Pattern:
    return re.compile(r"\b" + re.escape(word.lower()) + r"\b", re.IGNORECASE)


def detect_filler_words(transcript: str, filler_words: Sequence[str] = FILLER_WORDS) -> FillerWordReport:
    lowered = str(transcript or "").lower()
    details: list[FillerWordCount] = []

    for word in filler_words:
        count = len(_filler_pattern(word).findall(lowered))
        if count > 0:
            details.append(FillerWordCount(word=word, count=count))

    # stable sort keeps filler-list order among equal counts
    details.sort(key=lambda item: item.count, reverse=True)
    return FillerWordReport(total=sum(item.count for item in details), details=tuple(details))


def calculate_clarity_score(transcript: str, filler_word_count: int) -> int:
    word_count = _word_count(transcript)
    if word_count == 0:
        return 0

    score = 100.0
    score -= min(30.0, (filler_word_count / word_count) * 200.0)
    if re.search(r"[.!?]", transcript):
        score += 5
    if word_count < 20:
        score -= 10

    return round_half_up(clamp(score))


def determine_tone(transcript: str) -> str:
    lowered = str(transcript or "").lower()

    if any(word in lowered for word in ENTHUSIASM_WORDS):
        return "Enthusiastic"
    if any(word in lowered for word in PROFESSIONAL_WORDS):
        return "Professional"
    if any(word in lowered for word in UNCERTAIN_WORDS):
        return "Uncertain"
    return "Neutral"


def calculate_voice_score(speech_rate: float, clarity: float, volume: float, filler_word_count: int) -> int:
    optimal_low, optimal_high = ANALYSIS_THRESHOLDS["speech_rate"]["optimal"]
    acceptable_low, acceptable_high = ANALYSIS_THRESHOLDS["speech_rate"]["acceptable"]

    score = 100.0
    if speech_rate < acceptable_low or speech_rate > acceptable_high:
        score -= 15
    elif speech_rate < optimal_low or speech_rate > optimal_high:
        score -= 5

    score = score * 0.7 + clarity * 0.3

    if volume < 40:
        score -= 10
    if volume > 90:
        score -= 5

    score -= min(20, filler_word_count * 2)
    return round_half_up(clamp(score))


def clarity_level(clarity: float) -> str:
    bands = ANALYSIS_THRESHOLDS["voice_clarity"]
    if clarity >= bands["excellent"]:
        return "Excellent"
    if clarity >= bands["good"]:
        return "Good"
    if clarity >= bands["fair"]:
        return "Fair"
    return "Needs Improvement"


def speech_rate_band(speech_rate: float, tolerance: int = 20) -> str:
    low, high = ANALYSIS_THRESHOLDS["speech_rate"]["optimal"]
    if low <= speech_rate <= high:
        return "optimal"
    if low - tolerance <= speech_rate <= high + tolerance:
        return "acceptable"
    return "poor"


def calculate_speaking_ratio(samples: Sequence[float], threshold: float = 0.01) -> float:
    if not samples:
        return 0.0
    speaking = sum(1 for sample in samples if abs(sample) > threshold)
    return speaking / len(samples)


def analyze_waveform(samples: Sequence[float], points: int = 100) -> list[float]:
    points = max(1, int(points))
    block_size = len(samples) // points
    if block_size == 0:
        return []
    return [
        mean(abs(sample) for sample in samples[block_size * i: block_size * (i + 1)])
        for i in range(points)
    ]


def _default_rng() -> random.Random:
    if config.QA_MODE:
        return random.Random(config.VOICE_RANDOM_SEED)
    return random.Random()


@dataclass
class VoiceMetricsAnalyzer:
    rng: random.Random = field(default_factory=_default_rng)
    bytes_per_minute: int = config.AUDIO_BYTES_PER_MINUTE
    default_speech_rate: int = config.DEFAULT_SPEECH_RATE
    filler_words: Sequence[str] = FILLER_WORDS

    def estimate_minutes(self, audio: Any) -> float:
        return _audio_size(audio) / self.bytes_per_minute

    def analyze(self, audio: Any, transcript: str, session_id: str = "") -> VoiceMetrics:
        transcript = str(transcript or "")
        word_count = _word_count(transcript)

        minutes = self.estimate_minutes(audio)
        speech_rate = round_half_up(word_count / minutes) if minutes > 0 else self.default_speech_rate

        fillers = detect_filler_words(transcript, self.filler_words)
        clarity = calculate_clarity_score(transcript, fillers.total)

        # Simulated signal values.
        volume = self.rng.uniform(60.0, 90.0)
        pause_duration = round_half_up(self.rng.uniform(0.5, 2.0) * 100) / 100

        metrics = VoiceMetrics(
            speech_rate=speech_rate,
            clarity=clarity,
            volume=round_half_up(volume),
            tone=determine_tone(transcript),
            filler_word_count=fillers.total,
            filler_words=fillers.details,
            pause_duration=pause_duration,
            overall_score=calculate_voice_score(speech_rate, clarity, volume, fillers.total),
        )

        log_event(
            "voice",
            "voice_analyzed",
            session_id,
            transcript=transcript,
            word_count=word_count,
            speech_rate=metrics.speech_rate,
            filler_word_count=metrics.filler_word_count,
            overall_score=metrics.overall_score,
        )
        return metrics


def analyze_voice(audio: Any, transcript: str, analyzer: VoiceMetricsAnalyzer | None = None) -> VoiceMetrics:
    return (analyzer or VoiceMetricsAnalyzer()).analyze(audio, transcript)
