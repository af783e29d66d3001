"""Gathers the scorer's input bundle for a user from storage."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from ..engine.risk import MoodEntry, Phq9Result, UserSignal
from ..models import User, MoodLog, Phq9Assessment, ChatMessage
from ..utils.dates import whole_days_between

MOOD_WINDOW = 7


def collect_user_signal(db: Session, user: User, now: datetime | None = None) -> UserSignal:
    now = now or datetime.utcnow()
    recent = (
        db.query(MoodLog.mood_score)
        .filter(MoodLog.user_id == user.id)
        .order_by(MoodLog.logged_at.desc())
        .limit(MOOD_WINDOW)
        .all()
    )
    # newest-first from the query; the scorer expects oldest first
    trend = [MoodEntry(mood_score=score) for (score,) in reversed(recent)]

    latest = (
        db.query(Phq9Assessment)
        .filter(Phq9Assessment.user_id == user.id)
        .order_by(Phq9Assessment.taken_at.desc())
        .first()
    )
    phq9 = Phq9Result.from_items(latest.item_scores()) if latest else None

    total_messages = (
        db.query(ChatMessage)
        .filter(ChatMessage.user_id == user.id, ChatMessage.role == "user")
        .count()
    )
    assessment_count = db.query(Phq9Assessment).filter(Phq9Assessment.user_id == user.id).count()

    return UserSignal(
        days_since_last_active=max(0, whole_days_between(user.last_active, now)),
        streak=user.streak or 0,
        latest_phq9=phq9,
        mood_trend=trend,
        total_messages=total_messages,
        assessment_count=assessment_count,
    )
