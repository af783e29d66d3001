from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...models import User, MoodLog, Phq9Assessment, ChatMessage
from ...utils.dates import iso
from ..deps import get_current_user
from ..schemas import AnalyticsSummary, TrendPoint, Phq9TrendPoint

router = APIRouter(prefix="/analytics", tags=["analytics"])

def _avg(v):
    return round(float(v), 2) if v is not None else None

@router.get("/summary", response_model=AnalyticsSummary)
def summary(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    mood = db.query(MoodLog).filter(MoodLog.user_id == user.id).order_by(MoodLog.logged_at.desc()).first()
    phq9 = db.query(Phq9Assessment).filter(Phq9Assessment.user_id == user.id).order_by(Phq9Assessment.taken_at.desc()).first()
    user_msgs = db.query(ChatMessage).filter(ChatMessage.user_id == user.id, ChatMessage.role == "user")
    return AnalyticsSummary(
        name=user.name,
        streak=user.streak or 0,
        totalSessions=user.total_sessions or 0,
        latestMood={"moodScore": mood.mood_score, "loggedAt": iso(mood.logged_at)} if mood else None,
        latestPhq9={"totalScore": phq9.total_score, "severity": phq9.severity, "takenAt": iso(phq9.taken_at)} if phq9 else None,
        chatMessageCount=user_msgs.count(),
        crisisAlerts=user_msgs.filter(ChatMessage.crisis_flag.is_(True)).count(),
    )

@router.get("/mood-trend", response_model=list[TrendPoint])
def mood_trend(days: int = Query(14, ge=1, le=365), db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    since = datetime.utcnow() - timedelta(days=days)
    day = func.date(MoodLog.logged_at)
    rows = (
        db.query(day, func.avg(MoodLog.mood_score), func.avg(MoodLog.energy_level), func.avg(MoodLog.anxiety_level))
        .filter(MoodLog.user_id == user.id, MoodLog.logged_at >= since)
        .group_by(day)
        .order_by(day.asc())
        .all()
    )
    return [TrendPoint(date=str(d), avgMood=_avg(m), avgEnergy=_avg(e), avgAnxiety=_avg(a)) for d, m, e, a in rows]

@router.get("/phq9-trend", response_model=list[Phq9TrendPoint])
def phq9_trend(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    rows = (
        db.query(Phq9Assessment)
        .filter(Phq9Assessment.user_id == user.id)
        .order_by(Phq9Assessment.taken_at.asc())
        .limit(10)
        .all()
    )
    return [Phq9TrendPoint(date=a.taken_at.date().isoformat(), totalScore=a.total_score, severity=a.severity) for a in rows]
