import pytest
from pydantic import ValidationError

from interview_coach.analytics.performance_engine import (
    BenchmarkComparator,
    analyze_trends,
    calculate_success_prediction,
    compare_with_benchmark,
    identify_weaknesses,
    predict_performance,
)


def _history(make_metrics, scores):
    return [make_metrics(score, index=i) for i, score in enumerate(scores)]


def test_analyze_trends_empty_and_single():
    empty = analyze_trends([])
    assert (empty.trend, empty.change_percentage, empty.average_score) == ("stable", 0, 0)

    single = analyze_trends([{"overallScore": 70}])
    assert (single.trend, single.change_percentage, single.average_score) == ("stable", 0, 70)


def test_analyze_trends_improving(make_metrics):
    result = analyze_trends(_history(make_metrics, [50, 50, 80, 80]))
    assert result.trend == "improving"
    assert result.change_percentage == 60
    assert result.average_score == 65


def test_analyze_trends_declining_and_stable(make_metrics):
    declining = analyze_trends(_history(make_metrics, [80, 80, 60, 60]))
    assert declining.trend == "declining"
    assert declining.change_percentage == -25

    stable = analyze_trends(_history(make_metrics, [70, 72]))
    assert stable.trend == "stable"
    assert stable.change_percentage == 3


def test_analyze_trends_odd_length_gives_first_half_the_smaller_share(make_metrics):
    result = analyze_trends(_history(make_metrics, [60, 70, 80]))
    # first half [60], second half [70, 80]
    assert result.change_percentage == 25
    assert result.trend == "improving"
    assert result.average_score == 70


def test_analyze_trends_zero_baseline_is_stable(make_metrics):
    result = analyze_trends(_history(make_metrics, [0, 0, 50, 50]))
    assert result.trend == "stable"
    assert result.change_percentage == 0
    assert result.average_score == 25


def test_identify_weaknesses_no_history():
    assert identify_weaknesses([]) == []


def test_identify_weaknesses_low_averages(make_metrics):
    history = [make_metrics(60, technical=50, communication=70, behavioral=60, index=i) for i in range(2)]
    assert identify_weaknesses(history) == [
        "Technical Skills - Consider practicing coding problems and system design",
        "Behavioral Responses - Practice STAR method for behavioral questions",
    ]


def test_identify_weaknesses_recent_decline_follows_low_averages(make_metrics):
    history = [
        make_metrics(70, technical=80, communication=60, behavioral=70, index=0),
        make_metrics(70, technical=75, communication=60, behavioral=70, index=1),
        make_metrics(70, technical=65, communication=60, behavioral=60, index=2),
    ]
    # behavioral dropped exactly 10, which is not a decline
    assert identify_weaknesses(history) == [
        "Communication Skills - Work on articulating thoughts clearly and concisely",
        "Technical scores showing decline - review fundamentals",
    ]


def test_decline_uses_only_last_three_entries(make_metrics):
    history = [
        make_metrics(70, technical=100, index=0),
        make_metrics(70, technical=75, index=1),
        make_metrics(70, technical=75, index=2),
        make_metrics(70, technical=70, index=3),
    ]
    assert identify_weaknesses(history) == []


@pytest.mark.parametrize(
    "score,role,benchmark,comparison",
    [
        (90, "Senior Software Engineer", 85, "at"),
        (91, "Senior Software Engineer", 85, "above"),
        (60, "Junior Developer", 65, "at"),
        (59, "Intern", 65, "below"),
        (75, "Software Engineer", 75, "at"),
        (70, "Product Manager", 70, "at"),
        (95, "Team Lead Developer", 85, "above"),
    ],
)
def test_compare_with_benchmark(score, role, benchmark, comparison):
    result = compare_with_benchmark(score, role)
    assert result.benchmark == benchmark
    assert result.comparison == comparison


def test_benchmark_percentile_is_clamped():
    assert compare_with_benchmark(100, "developer").percentile == 99
    assert compare_with_benchmark(-4, "developer").percentile == 0
    assert compare_with_benchmark(72.5, "developer").percentile == 73


def test_benchmark_band_is_configurable():
    comparator = BenchmarkComparator(band=0)
    assert comparator.compare(76, "engineer").comparison == "above"


def test_success_prediction_defaults_to_fifty():
    assert calculate_success_prediction([], []) == 50


def test_success_prediction_single_session(make_metrics):
    # 0.4*80 + 0.3*65 + 0.2*100 + 0.1*0 = 71.5
    assert calculate_success_prediction([make_metrics(80)], []) == 72


def test_success_prediction_blends_all_factors(make_metrics):
    history = _history(make_metrics, [50, 50, 80, 80])
    assessments = [
        {"skillName": "Algorithms", "level": 70, "category": "technical"},
        {"skillName": "Storytelling", "level": 55, "category": "communication"},
    ]
    # recent [50, 80, 80]: mean 70, population sd ~14.14; trend improving
    assert calculate_success_prediction(history, assessments) == 73


def test_success_prediction_coverage_is_capped(make_metrics):
    history = [make_metrics(100, index=i) for i in range(3)]
    assessments = [{"skillName": f"s{i}", "level": 50} for i in range(10)]
    # 40 + 19.5 + 20 + 10
    assert calculate_success_prediction(history, assessments) == 90


def test_success_prediction_rejects_bad_assessment(make_metrics):
    with pytest.raises(ValidationError):
        calculate_success_prediction([make_metrics(70)], [{"skillName": "x", "level": 140}])


def test_predict_performance():
    assert predict_performance([]) == 50
    assert predict_performance([80]) == 80
    assert predict_performance([60, 70, 80, 90]) == 77


def test_single_session_average_is_not_rounded():
    result = analyze_trends([{"overallScore": 72.6}])
    assert result.average_score == 72.6
    assert result.trend == "stable"
