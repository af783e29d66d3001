"""Additive-threshold risk heuristics over a user's engagement and clinical history.

All four scores start from a base, add fixed increments when thresholds are
crossed and are clamped to [0, 1]. Factors are checked separately from the
arithmetic, so they are not derived from the score values.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

NEUTRAL_MOOD = 5


@dataclass
class MoodEntry:
    mood_score: Optional[float]


@dataclass
class Phq9Result:
    total_score: int
    q9: int

    @classmethod
    def from_items(cls, items: Sequence[int]) -> "Phq9Result":
        items = list(items)
        return cls(total_score=sum(items), q9=items[8] if len(items) >= 9 else 0)


@dataclass
class UserSignal:
    days_since_last_active: int = 0
    streak: int = 0
    latest_phq9: Optional[Phq9Result] = None
    mood_trend: List[MoodEntry] = field(default_factory=list)  # oldest first
    total_messages: int = 0
    assessment_count: int = 0


@dataclass
class RiskScores:
    attrition_risk: float
    relapse_risk: float
    crisis_risk: float
    engagement_score: float
    factors: List[str]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "attritionRisk": self.attrition_risk,
            "relapseRisk": self.relapse_risk,
            "crisisRisk": self.crisis_risk,
            "engagementScore": self.engagement_score,
            "factors": list(self.factors),
        }


def _bounded(x: float) -> float:
    return round(min(1.0, max(0.0, x)), 2)

def _recent_average(trend: Sequence[MoodEntry]) -> Optional[float]:
    if len(trend) < 3:
        return None
    recent = [e.mood_score for e in trend[-3:]]
    # a gap in the window leaves the trend unknown
    if any(m is None for m in recent):
        return None
    return sum(recent) / 3

def attrition_risk(s: UserSignal) -> float:
    r = 0.0
    if s.days_since_last_active > 7:
        r += 0.4
    elif s.days_since_last_active > 3:
        r += 0.2
    if s.streak < 3:
        r += 0.2
    if s.total_messages < 5:
        r += 0.2
    if s.assessment_count == 0:
        r += 0.2
    return _bounded(r)

def relapse_risk(s: UserSignal) -> float:
    r = 0.1
    if s.latest_phq9 is not None:
        total = s.latest_phq9.total_score
        if total >= 20:
            r += 0.5
        elif total >= 15:
            r += 0.35
        elif total >= 10:
            r += 0.2
    avg = _recent_average(s.mood_trend)
    if avg is not None:
        if avg < 4:
            r += 0.3
        elif avg < 6:
            r += 0.1
    return _bounded(r)

def crisis_risk(s: UserSignal) -> float:
    r = 0.0
    if s.latest_phq9 is not None:
        if s.latest_phq9.q9 >= 2:
            r += 0.6
        elif s.latest_phq9.q9 == 1:
            r += 0.3
    if s.mood_trend:
        last = s.mood_trend[-1].mood_score or NEUTRAL_MOOD
        if last <= 2:
            r += 0.3
    return _bounded(r)

def engagement_score(s: UserSignal) -> float:
    r = 0.5
    if s.streak >= 7:
        r += 0.3
    elif s.streak >= 3:
        r += 0.2
    if s.total_messages >= 20:
        r += 0.1
    if s.assessment_count >= 2:
        r += 0.1
    if s.days_since_last_active == 0:
        r += 0.1
    return _bounded(r)

def risk_factors(s: UserSignal) -> List[str]:
    factors = []
    if s.days_since_last_active > 3:
        factors.append(f"{s.days_since_last_active} days since last login")
    if s.streak < 3:
        factors.append("Low engagement streak")
    if s.latest_phq9 is not None and s.latest_phq9.total_score >= 15:
        factors.append("High severity (PHQ-9)")
    avg = _recent_average(s.mood_trend)
    if avg is not None and avg < 5:
        factors.append("Declining clinical trend")
    return factors

def compute_risk_scores(signal: Optional[UserSignal] = None) -> RiskScores:
    s = signal or UserSignal()
    return RiskScores(
        attrition_risk=attrition_risk(s),
        relapse_risk=relapse_risk(s),
        crisis_risk=crisis_risk(s),
        engagement_score=engagement_score(s),
        factors=risk_factors(s),
    )
