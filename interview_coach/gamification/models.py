from dataclasses import asdict, dataclass, field
from typing import Literal, Optional, Tuple


Rarity = Literal["common", "rare", "epic", "legendary"]


@dataclass(frozen=True)
class LevelThreshold:
    level: int
    xp_required: int


@dataclass(frozen=True)
class LevelInfo:
    level: int
    xp_to_next_level: int
    progress_percentage: int

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "xpToNextLevel": self.xp_to_next_level,
            "progressPercentage": self.progress_percentage,
        }


@dataclass(frozen=True)
class Achievement:
    """
    One entry of the fixed achievement set. Only `unlocked` and
    `unlocked_at` ever change, and only from locked to unlocked.
    """
    id: str
    name: str
    description: str
    icon: str
    rarity: Rarity
    unlocked: bool = False
    unlocked_at: Optional[int] = None

    def to_dict(self) -> dict:
        payload = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "unlocked": self.unlocked,
            "rarity": self.rarity,
        }
        if self.unlocked_at is not None:
            payload["unlockedAt"] = self.unlocked_at
        return payload


@dataclass(frozen=True)
class GamificationState:
    level: int = 1
    xp: int = 0
    xp_to_next_level: int = 0
    streak: int = 0
    total_interviews: int = 0
    achievements: Tuple[Achievement, ...] = field(default_factory=tuple)
    badges: Tuple[str, ...] = field(default_factory=tuple)
    last_interview_date: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "xp": self.xp,
            "xpToNextLevel": self.xp_to_next_level,
            "streak": self.streak,
            "totalInterviews": self.total_interviews,
            "achievements": [item.to_dict() for item in self.achievements],
            "badges": list(self.badges),
            "lastInterviewDate": self.last_interview_date,
        }


@dataclass(frozen=True)
class AchievementCheckResult:
    updated: Tuple[Achievement, ...]
    newly_unlocked: Tuple[Achievement, ...]


@dataclass(frozen=True)
class GamificationUpdate:
    state: GamificationState
    earned_xp: int
    leveled_up: bool
    new_achievements: Tuple[Achievement, ...]

    def to_dict(self) -> dict:
        return {
            "state": self.state.to_dict(),
            "earnedXP": self.earned_xp,
            "leveledUp": self.leveled_up,
            "newAchievements": [item.to_dict() for item in self.new_achievements],
        }


@dataclass(frozen=True)
class DailyChallenge:
    title: str
    description: str
    xp_reward: int

    def to_dict(self) -> dict:
        return {"title": self.title, "description": self.description, "xpReward": self.xp_reward}


@dataclass(frozen=True)
class LeaderboardPosition:
    position: int
    percentile: int

    def to_dict(self) -> dict:
        return asdict(self)
