"""Engagement bookkeeping for a user: last-activity timestamp and daily streak."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from ..models import User
from ..utils.dates import whole_days_between

logger = logging.getLogger(__name__)


def next_streak(current: int, days_since_last: int) -> int:
    """Consecutive-day streak after activity ``days_since_last`` whole days after the previous one."""
    if days_since_last == 1:
        return current + 1
    if days_since_last > 1:
        return 1
    return current


def touch_activity(db: Session, user: User, now: datetime | None = None) -> None:
    """Record activity for ``user`` and update the streak. Caller commits."""
    now = now or datetime.utcnow()
    gap = whole_days_between(user.last_active, now)
    streak = next_streak(user.streak or 0, gap)
    if streak != user.streak:
        logger.debug("streak for user %s: %s -> %s", user.id, user.streak, streak)
    user.streak = streak
    user.last_active = now
