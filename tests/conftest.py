import random
import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DAY_MS = 24 * 60 * 60 * 1000
NOW_MS = 1_760_000_000_000


@pytest.fixture(autouse=True)
def _test_env(monkeypatch: pytest.MonkeyPatch):
    # config reads the environment once at import, so patch the module values
    from interview_coach.core import config

    monkeypatch.setattr(config, "QA_MODE", True)
    monkeypatch.setattr(config, "EVENT_LOGGING_ENABLED", True)


@pytest.fixture
def now_ms() -> int:
    return NOW_MS


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def make_metrics():
    from interview_coach.analytics.models import PerformanceMetrics

    def _make(overall, technical=70, communication=70, behavioral=70, index=0):
        return PerformanceMetrics(
            session_id=f"session_{index}",
            date=NOW_MS + index * DAY_MS,
            overall_score=overall,
            technical_score=technical,
            communication_score=communication,
            behavioral_score=behavioral,
            duration=25,
        )

    return _make
