from types import MappingProxyType

from interview_coach.gamification.models import Achievement, DailyChallenge, LevelThreshold


DIFFICULTY_MULTIPLIERS = MappingProxyType({
    "Easy": 1.0,
    "Medium": 1.5,
    "Hard": 2.0,
    "Expert": 2.5,
})

XP_LEVELS = (
    LevelThreshold(level=1, xp_required=0),
    LevelThreshold(level=2, xp_required=100),
    LevelThreshold(level=3, xp_required=250),
    LevelThreshold(level=4, xp_required=500),
    LevelThreshold(level=5, xp_required=1000),
    LevelThreshold(level=6, xp_required=2000),
    LevelThreshold(level=7, xp_required=3500),
    LevelThreshold(level=8, xp_required=5500),
    LevelThreshold(level=9, xp_required=8000),
    LevelThreshold(level=10, xp_required=12000),
)

ACHIEVEMENTS = (
    Achievement(
        id="first_interview",
        name="First Steps",
        description="Complete your first mock interview",
        icon="🎯",
        rarity="common",
    ),
    Achievement(
        id="perfect_score",
        name="Perfectionist",
        description="Score 100/100 in an interview",
        icon="⭐",
        rarity="legendary",
    ),
    Achievement(
        id="week_streak",
        name="Consistent Learner",
        description="Practice for 7 days in a row",
        icon="🔥",
        rarity="rare",
    ),
    Achievement(
        id="ten_interviews",
        name="Interview Veteran",
        description="Complete 10 mock interviews",
        icon="🏆",
        rarity="epic",
    ),
    Achievement(
        id="all_difficulties",
        name="Challenge Master",
        description="Complete interviews at all difficulty levels",
        icon="💎",
        rarity="epic",
    ),
)

DAILY_CHALLENGES = (
    DailyChallenge(title="Perfect Score Hunter", description="Achieve a score of 100 in any interview", xp_reward=100),
    DailyChallenge(title="Technical Master", description="Complete a Hard difficulty technical interview", xp_reward=150),
    DailyChallenge(title="Communication Pro", description="Score 90+ on communication metrics", xp_reward=80),
    DailyChallenge(title="Speed Demon", description="Complete a speed interview challenge", xp_reward=75),
    DailyChallenge(title="Consistent Performer", description="Complete 3 interviews in one day", xp_reward=120),
)

# Criterion-name keywords, checked in this order; unmatched names count as behavioral.
TECHNICAL_KEYWORDS = ("technical", "algorithm", "code", "system", "design")
COMMUNICATION_KEYWORDS = ("communication", "clarity", "articulation", "expression")
BEHAVIORAL_KEYWORDS = ("behavioral", "leadership", "teamwork", "problem-solving")

# (role keywords, benchmark) checked top-down; first hit wins.
ROLE_BENCHMARKS = (
    (("senior", "lead"), 85),
    (("junior", "intern", "entry"), 65),
    (("mid", "engineer", "developer"), 75),
)
DEFAULT_BENCHMARK = 70

WEAKNESS_THRESHOLD = 65
DECLINE_THRESHOLD = -10

TREND_SCORES = MappingProxyType({
    "improving": 80,
    "declining": 50,
    "stable": 65,
})

FILLER_WORDS = (
    "um", "uh", "like", "you know", "actually", "basically",
    "literally", "sort of", "kind of", "I mean", "right", "so",
)

ENTHUSIASM_WORDS = ("excited", "love", "amazing", "wonderful", "fantastic")
PROFESSIONAL_WORDS = ("experience", "skills", "expertise", "professional", "accomplished")
UNCERTAIN_WORDS = ("maybe", "perhaps", "might", "possibly", "not sure")

ANALYSIS_THRESHOLDS = MappingProxyType({
    "voice_clarity": MappingProxyType({"excellent": 90, "good": 75, "fair": 60, "poor": 0}),
    "speech_rate": MappingProxyType({
        "optimal": (130, 170),
        "acceptable": (110, 190),
    }),
    "eye_contact": MappingProxyType({"excellent": 80, "good": 60, "fair": 40, "poor": 0}),
    "confidence_level": MappingProxyType({"high": 75, "medium": 50, "low": 0}),
})
