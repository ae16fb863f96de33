from interview_coach.coaching.adaptive_coach import AdaptiveCoach


def test_plan_for_strong_candidate_with_technical_gap():
    plan = AdaptiveCoach().build_plan(
        85, ["Technical Skills - Consider practicing coding problems and system design"]
    )
    assert plan.message.startswith("Excellent work!")
    assert plan.learning_path[0] == "Advanced System Design Patterns"
    assert [tip.title for tip in plan.tips] == ["Technical Skills", "Consistency", "Feedback Loop"]


def test_plan_tiers():
    coach = AdaptiveCoach()
    assert coach.build_plan(60).learning_path[1] == "STAR Method Mastery"
    assert coach.build_plan(59.9).learning_path[0] == "Fundamental Programming Concepts"


def test_general_tips_always_present():
    plan = AdaptiveCoach().build_plan(40, [])
    assert [tip.title for tip in plan.tips] == ["Consistency", "Feedback Loop"]
    assert plan.to_dict()["tips"][0]["icon"] == "⏰"


def test_tips_follow_weakness_categories():
    weaknesses = [
        "Communication effectiveness decreasing - focus on clarity",
        "Behavioral responses need attention - prepare more examples",
    ]
    titles = [tip.title for tip in AdaptiveCoach().build_plan(70, weaknesses).tips]
    assert titles[:2] == ["Communication", "Behavioral Responses"]
