import random

import pytest
from pydantic import ValidationError

from interview_coach.analytics.categorizer import ScoreCategorizer, calculate_performance_metrics, categorize
from interview_coach.schemas import EvaluationCriterion


CRITERIA = [
    {"name": "Technical Depth", "score": 8, "maxScore": 10, "reasoning": "solid"},
    {"name": "Communication", "score": 7, "maxScore": 10, "reasoning": ""},
    {"name": "Leadership", "score": 9, "maxScore": 10, "reasoning": ""},
    {"name": "Enthusiasm", "score": 6, "maxScore": 10, "reasoning": ""},
]


def test_categorize_buckets_and_averages():
    result = categorize(CRITERIA)
    assert result.technical_score == 80
    assert result.communication_score == 70
    # "Enthusiasm" matches nothing and falls back to behavioral
    assert result.behavioral_score == 75
    assert result.to_dict() == {"technicalScore": 80, "communicationScore": 70, "behavioralScore": 75}


def test_categorize_is_order_independent():
    shuffled = list(CRITERIA)
    random.Random(3).shuffle(shuffled)
    assert categorize(shuffled) == categorize(CRITERIA) == categorize(list(reversed(CRITERIA)))


def test_technical_keywords_take_priority():
    result = categorize([{"name": "System Communication", "score": 5, "maxScore": 10}])
    assert result.technical_score == 50
    assert result.communication_score == 0
    assert result.behavioral_score == 0


def test_empty_criteria_yield_zeroes():
    result = categorize([])
    assert (result.technical_score, result.communication_score, result.behavioral_score) == (0, 0, 0)


def test_out_of_range_and_zero_max_scores_are_clamped():
    result = categorize(
        [
            {"name": "code quality", "score": -5, "maxScore": 10},
            {"name": "clarity", "score": 15, "maxScore": 10},
            {"name": "teamwork", "score": 4, "maxScore": 0},
        ]
    )
    assert result.technical_score == 0
    assert result.communication_score == 100
    assert result.behavioral_score == 0


def test_half_values_round_up():
    result = categorize([{"name": "code", "score": 1, "maxScore": 8}])
    assert result.technical_score == 13


def test_random_criteria_stay_within_bounds():
    rng = random.Random(42)
    names = ["algorithm", "articulation", "leadership", "curiosity"]
    for _ in range(200):
        criteria = [
            EvaluationCriterion(
                name=rng.choice(names),
                score=rng.uniform(-50, 150),
                max_score=rng.choice([0, 1, 5, 10]),
            )
            for _ in range(rng.randint(0, 6))
        ]
        result = categorize(criteria)
        for value in (result.technical_score, result.communication_score, result.behavioral_score):
            assert 0 <= value <= 100


def test_custom_keyword_tables():
    categorizer = ScoreCategorizer(technical_keywords=("sql",), default_bucket="communication")
    result = categorizer.categorize([{"name": "SQL tuning", "score": 9, "maxScore": 10}, {"name": "Other", "score": 4, "maxScore": 10}])
    assert result.technical_score == 90
    assert result.communication_score == 40


def test_calculate_performance_metrics_snapshot():
    metrics = calculate_performance_metrics(85, CRITERIA, duration=32, now_ms=1_700_000_000_000)
    assert metrics.session_id == "session_1700000000000"
    assert metrics.date == 1_700_000_000_000
    assert metrics.overall_score == 85
    assert metrics.technical_score == 80
    assert metrics.duration == 32


def test_criterion_accepts_snake_and_camel_case():
    camel = EvaluationCriterion.model_validate({"name": "x", "score": 1, "maxScore": 2})
    snake = EvaluationCriterion.model_validate({"name": "x", "score": 1, "max_score": 2})
    assert camel == snake

    with pytest.raises(ValidationError):
        EvaluationCriterion.model_validate({"name": "x", "score": "lots", "maxScore": 2})
