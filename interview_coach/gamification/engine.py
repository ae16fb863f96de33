from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Callable, Mapping, Sequence

from interview_coach.constants import ACHIEVEMENTS, DAILY_CHALLENGES, DIFFICULTY_MULTIPLIERS, XP_LEVELS
from interview_coach.core.logger import log_event
from interview_coach.core.numbers import clamp, now_ms as _now_ms, round_half_up
from interview_coach.gamification.models import (
    Achievement,
    AchievementCheckResult,
    DailyChallenge,
    GamificationState,
    GamificationUpdate,
    LeaderboardPosition,
    LevelInfo,
    LevelThreshold,
)
from interview_coach.schemas import AchievementSessionData, SessionOutcome

DAY_MS = 24 * 60 * 60 * 1000

AchievementPredicate = Callable[[GamificationState, AchievementSessionData], bool]


def _session_data(value: Any) -> AchievementSessionData:
    if isinstance(value, AchievementSessionData):
        return value
    return AchievementSessionData.model_validate(value)


def _session_outcome(value: Any) -> SessionOutcome:
    if isinstance(value, SessionOutcome):
        return value
    return SessionOutcome.model_validate(value)


@dataclass
class XPCalculator:
    multipliers: Mapping[str, float] = field(default_factory=lambda: DIFFICULTY_MULTIPLIERS)
    default_multiplier: float = 1.0

    def calculate(self, score: float, difficulty: str, duration: float) -> int:
        xp = float(score) * self.multipliers.get(str(difficulty), self.default_multiplier)

        if duration > 30:
            xp += 20
        elif duration > 20:
            xp += 10

        if score == 100:
            xp += 50
        elif score >= 90:
            xp += 25

        return round_half_up(xp)


@dataclass
class LevelResolver:
    levels: Sequence[LevelThreshold] = XP_LEVELS

    def __post_init__(self):
        if not self.levels:
            raise ValueError("level table must not be empty")
        thresholds = [item.xp_required for item in self.levels]
        if any(b <= a for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError("level thresholds must be strictly ascending")
        self._thresholds = thresholds

    def resolve(self, total_xp: float) -> LevelInfo:
        # Table is sorted, so the highest reached threshold is a bisect away.
        index = max(0, bisect_right(self._thresholds, total_xp) - 1)
        current = self.levels[index]

        if index + 1 >= len(self.levels):
            return LevelInfo(level=current.level, xp_to_next_level=0, progress_percentage=100)

        nxt = self.levels[index + 1]
        span = nxt.xp_required - current.xp_required
        progress = clamp((total_xp - current.xp_required) / span * 100.0)
        return LevelInfo(
            level=current.level,
            xp_to_next_level=math.ceil(nxt.xp_required - total_xp),
            progress_percentage=round_half_up(progress),
        )


def _default_predicates() -> dict[str, AchievementPredicate]:
    return {
        "first_interview": lambda state, session: bool(session.is_first_interview),
        "perfect_score": lambda state, session: session.score == 100,
        "week_streak": lambda state, session: state.streak >= 7,
        "ten_interviews": lambda state, session: state.total_interviews >= 10,
        # Counts sessions only; distinct difficulties are not tracked yet.
        "all_difficulties": lambda state, session: state.total_interviews >= 4,
    }


@dataclass
class AchievementEngine:
    predicates: Mapping[str, AchievementPredicate] = field(default_factory=_default_predicates)

    def check(self, state: GamificationState, session: AchievementSessionData, now_ms: int) -> AchievementCheckResult:
        updated: list[Achievement] = []
        newly_unlocked: list[Achievement] = []

        for achievement in state.achievements:
            if achievement.unlocked:
                updated.append(achievement)
                continue

            predicate = self.predicates.get(achievement.id)
            if predicate is not None and predicate(state, session):
                achievement = replace(achievement, unlocked=True, unlocked_at=now_ms)
                newly_unlocked.append(achievement)
            updated.append(achievement)

        return AchievementCheckResult(updated=tuple(updated), newly_unlocked=tuple(newly_unlocked))


class GamificationEngine:
    def __init__(
        self,
        xp_calculator: XPCalculator | None = None,
        level_resolver: LevelResolver | None = None,
        achievement_engine: AchievementEngine | None = None,
        achievements: Sequence[Achievement] = ACHIEVEMENTS,
    ):
        self.xp = xp_calculator or XPCalculator()
        self.levels = level_resolver or LevelResolver()
        self.achievements = achievement_engine or AchievementEngine()
        self.achievement_defs = tuple(achievements)

    def initial_state(self) -> GamificationState:
        first = self.levels.resolve(0)
        return GamificationState(
            level=first.level,
            xp=0,
            xp_to_next_level=first.xp_to_next_level,
            streak=0,
            total_interviews=0,
            achievements=tuple(replace(item, unlocked=False, unlocked_at=None) for item in self.achievement_defs),
            badges=(),
        )

    def update_streak(self, last_interview_date: int | None, current_streak: int, now_ms: int | None = None) -> int:
        if last_interview_date is None:
            return 1
        now = _now_ms() if now_ms is None else int(now_ms)
        days_since = (now - int(last_interview_date)) // DAY_MS

        if days_since == 0:
            return current_streak
        if days_since == 1:
            return current_streak + 1
        return 1

    def check_achievements(self, state: GamificationState, session_data: Any, now_ms: int | None = None) -> AchievementCheckResult:
        now = _now_ms() if now_ms is None else int(now_ms)
        return self.achievements.check(state, _session_data(session_data), now)

    def update(
        self,
        state: GamificationState,
        session_data: Any,
        now_ms: int | None = None,
        session_id: str = "",
    ) -> GamificationUpdate:
        session = _session_outcome(session_data)
        now = _now_ms() if now_ms is None else int(now_ms)

        earned_xp = self.xp.calculate(session.score, session.difficulty, session.duration)
        total_xp = state.xp + earned_xp
        level_info = self.levels.resolve(total_xp)
        leveled_up = level_info.level > state.level

        last_date = session.last_interview_date
        if last_date is None:
            last_date = state.last_interview_date
        streak = self.update_streak(last_date, state.streak, now_ms=now)
        total_interviews = state.total_interviews + 1

        # Achievement predicates see the state as it was before this session.
        check = self.achievements.check(
            state,
            AchievementSessionData(
                score=session.score,
                difficulty=session.difficulty,
                is_first_interview=total_interviews == 1,
            ),
            now,
        )

        badges = tuple(state.badges)
        if leveled_up:
            badges = badges + (f"Level {level_info.level}",)

        new_state = GamificationState(
            level=level_info.level,
            xp=total_xp,
            xp_to_next_level=level_info.xp_to_next_level,
            streak=streak,
            total_interviews=total_interviews,
            achievements=check.updated,
            badges=badges,
            last_interview_date=now,
        )

        if leveled_up:
            log_event("gamification", "level_up", session_id, old_level=state.level, new_level=level_info.level, xp=total_xp)
        for achievement in check.newly_unlocked:
            log_event("gamification", "achievement_unlocked", session_id, achievement_id=achievement.id, rarity=achievement.rarity)

        return GamificationUpdate(
            state=new_state,
            earned_xp=earned_xp,
            leveled_up=leveled_up,
            new_achievements=check.newly_unlocked,
        )


_default_engine = GamificationEngine()


def calculate_xp(score: float, difficulty: str, duration: float) -> int:
    return _default_engine.xp.calculate(score, difficulty, duration)


def calculate_level(total_xp: float) -> LevelInfo:
    return _default_engine.levels.resolve(total_xp)


def check_achievements(state: GamificationState, session_data: Any, now_ms: int | None = None) -> AchievementCheckResult:
    return _default_engine.check_achievements(state, session_data, now_ms=now_ms)


def update_streak(last_interview_date: int | None, current_streak: int, now_ms: int | None = None) -> int:
    return _default_engine.update_streak(last_interview_date, current_streak, now_ms=now_ms)


def initialize_gamification_state() -> GamificationState:
    return _default_engine.initial_state()


def update_gamification_state(
    state: GamificationState,
    session_data: Any,
    now_ms: int | None = None,
    session_id: str = "",
) -> GamificationUpdate:
    return _default_engine.update(state, session_data, now_ms=now_ms, session_id=session_id)


def get_daily_challenge(day: date, challenges: Sequence[DailyChallenge] = DAILY_CHALLENGES) -> DailyChallenge:
    """Same challenge for everyone on a given calendar day."""
    day_of_year = day.timetuple().tm_yday
    return challenges[day_of_year % len(challenges)]


def calculate_leaderboard_position(
    total_xp: float,
    average_xp: float = 2000.0,
    standard_deviation: float = 1000.0,
    total_users: int = 10000,
) -> LeaderboardPosition:
    # Simulated: assumes a normal XP distribution until real rankings exist.
    z_score = (float(total_xp) - average_xp) / standard_deviation
    percentile = round_half_up(clamp(50 + z_score * 20))
    position = round_half_up(total_users * (100 - percentile) / 100)
    return LeaderboardPosition(position=max(1, position), percentile=percentile)
