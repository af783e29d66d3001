import json
from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...models import User, MoodLog
from ...services.activity import touch_activity
from ...utils.dates import iso
from ..deps import get_current_user
from ..schemas import MoodLogIn, MoodLogOut, MoodStats

router = APIRouter(prefix="/mood", tags=["mood"])

def _out(m: MoodLog) -> MoodLogOut:
    return MoodLogOut(
        id=m.id, moodScore=m.mood_score, energyLevel=m.energy_level, anxietyLevel=m.anxiety_level,
        sleepHours=m.sleep_hours, notes=m.notes, activities=json.loads(m.activities_json or "[]"),
        loggedAt=iso(m.logged_at),
    )

def _round(v):
    return round(float(v), 2) if v is not None else None

@router.post("/log", response_model=MoodLogOut, status_code=201)
def log_mood(payload: MoodLogIn, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    m = MoodLog(
        user_id=user.id,
        mood_score=payload.moodScore,
        energy_level=payload.energyLevel,
        anxiety_level=payload.anxietyLevel,
        sleep_hours=payload.sleepHours,
        notes=payload.notes,
        activities_json=json.dumps(payload.activities),
    )
    db.add(m)
    touch_activity(db, user)
    db.commit()
    db.refresh(m)
    return _out(m)

@router.get("/history", response_model=list[MoodLogOut])
def mood_history(days: int = Query(30, ge=1, le=365), db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    since = datetime.utcnow() - timedelta(days=days)
    logs = (
        db.query(MoodLog)
        .filter(MoodLog.user_id == user.id, MoodLog.logged_at >= since)
        .order_by(MoodLog.logged_at.asc())
        .all()
    )
    return [_out(m) for m in logs]

@router.get("/stats", response_model=MoodStats)
def mood_stats(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    since = datetime.utcnow() - timedelta(days=30)
    row = (
        db.query(
            func.avg(MoodLog.mood_score), func.avg(MoodLog.energy_level), func.avg(MoodLog.anxiety_level),
            func.avg(MoodLog.sleep_hours), func.min(MoodLog.mood_score), func.max(MoodLog.mood_score),
            func.count(MoodLog.id),
        )
        .filter(MoodLog.user_id == user.id, MoodLog.logged_at >= since)
        .one()
    )
    avg_mood, avg_energy, avg_anxiety, avg_sleep, min_mood, max_mood, total = row
    return MoodStats(
        avgMood=_round(avg_mood), avgEnergy=_round(avg_energy), avgAnxiety=_round(avg_anxiety),
        avgSleep=_round(avg_sleep), minMood=min_mood, maxMood=max_mood, totalLogs=total or 0,
    )
