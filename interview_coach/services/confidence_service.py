from interview_coach.constants import ANALYSIS_THRESHOLDS
from interview_coach.core.numbers import clamp, round_half_up


def calculate_confidence_level(voice_metrics: dict, video_metrics: dict) -> int:
    voice_score = (float(voice_metrics.get("clarity", 0)) + float(voice_metrics.get("volume", 0))) / 2
    video_score = (float(video_metrics.get("eyeContact", 0)) + float(video_metrics.get("posture", 0))) / 2

    confidence = voice_score * 0.4 + video_score * 0.6
    return round_half_up(clamp(confidence))


def calculate_video_score(eye_contact: float, posture: float, expressions: float) -> int:
    score = eye_contact * 0.4 + posture * 0.35 + expressions * 0.25
    return round_half_up(clamp(score))


def eye_contact_quality(percentage: float) -> str:
    bands = ANALYSIS_THRESHOLDS["eye_contact"]
    if percentage > bands["excellent"]:
        return "Excellent"
    if percentage > bands["good"]:
        return "Good"
    return "Needs Improvement"
