from dataclasses import dataclass, field
from typing import List


LEARNING_PATHS = {
    "advanced": [
        "Advanced System Design Patterns",
        "Leadership & Team Management Skills",
        "Complex Behavioral Scenarios",
        "Executive-level Communication",
    ],
    "intermediate": [
        "Intermediate Data Structures & Algorithms",
        "STAR Method Mastery",
        "Effective Communication Techniques",
        "Mock Interview Practice (3x/week)",
    ],
    "foundation": [
        "Fundamental Programming Concepts",
        "Basic Interview Etiquette",
        "Resume Building & Optimization",
        "Daily Interview Question Practice",
    ],
}

MOTIVATION = {
    "advanced": "Excellent work! You're performing at a high level. Keep refining your skills!",
    "intermediate": "Good progress! You're on the right track. Focus on consistency and improvement.",
    "foundation": "Every expert was once a beginner. Keep practicing and you'll see improvement!",
}

WEAKNESS_TIPS = [
    ("technical", "💻", "Technical Skills", "Dedicate 30 minutes daily to solving coding problems on platforms like LeetCode"),
    ("communication", "💬", "Communication", "Practice explaining complex concepts in simple terms. Record yourself and review."),
    ("behavioral", "🎯", "Behavioral Responses", "Prepare 5-7 STAR stories covering different situations (conflict, leadership, failure, success)"),
]

GENERAL_TIPS = [
    ("⏰", "Consistency", "Set a regular practice schedule. Consistency beats intensity in skill development."),
    ("📝", "Feedback Loop", "After each practice session, write down 3 things you did well and 2 to improve."),
]


@dataclass(frozen=True)
class CoachingTip:
    icon: str
    title: str
    tip: str


@dataclass
class CoachingPlan:
    performance_score: float
    message: str
    learning_path: List[str] = field(default_factory=list)
    tips: List[CoachingTip] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "performanceScore": self.performance_score,
            "message": self.message,
            "learningPath": list(self.learning_path),
            "tips": [{"icon": t.icon, "title": t.title, "tip": t.tip} for t in self.tips],
        }


class AdaptiveCoach:
    def _tier(self, score: float) -> str:
        if score >= 80:
            return "advanced"
        if score >= 60:
            return "intermediate"
        return "foundation"

    def _tips(self, weaknesses: List[str]) -> List[CoachingTip]:
        lowered = [str(w or "").lower() for w in weaknesses]
        tips: List[CoachingTip] = []

        for keyword, icon, title, tip in WEAKNESS_TIPS:
            if any(keyword in w for w in lowered):
                tips.append(CoachingTip(icon=icon, title=title, tip=tip))

        tips.extend(CoachingTip(icon=icon, title=title, tip=tip) for icon, title, tip in GENERAL_TIPS)
        return tips

    def build_plan(self, performance_score: float, weaknesses: List[str] | None = None) -> CoachingPlan:
        tier = self._tier(performance_score)
        return CoachingPlan(
            performance_score=performance_score,
            message=MOTIVATION[tier],
            learning_path=list(LEARNING_PATHS[tier]),
            tips=self._tips(list(weaknesses or [])),
        )
