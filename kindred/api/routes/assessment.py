import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...engine.phq9 import score_phq9
from ...models import User, Phq9Assessment
from ...services.activity import touch_activity
from ...utils.dates import iso
from ..deps import get_current_user
from ..schemas import Phq9In, Phq9Out

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assessment", tags=["assessment"])

def _out(a: Phq9Assessment) -> Phq9Out:
    return Phq9Out(id=a.id, totalScore=a.total_score, severity=a.severity, items=a.item_scores(), takenAt=iso(a.taken_at))

@router.post("/phq9", response_model=Phq9Out, status_code=201)
def submit_phq9(payload: Phq9In, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    items = payload.scores()
    total, severity = score_phq9(items)
    a = Phq9Assessment(
        user_id=user.id,
        **{f"q{i + 1}": v for i, v in enumerate(items)},
        total_score=total,
        severity=severity,
    )
    db.add(a)
    touch_activity(db, user)
    db.commit()
    db.refresh(a)
    if payload.q9 > 0:
        logger.warning("PHQ-9 item 9 endorsed (%s) by user %s", payload.q9, user.id)
    return _out(a)

@router.get("/history", response_model=list[Phq9Out])
def assessment_history(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    rows = (
        db.query(Phq9Assessment)
        .filter(Phq9Assessment.user_id == user.id)
        .order_by(Phq9Assessment.taken_at.desc())
        .limit(20)
        .all()
    )
    return [_out(a) for a in rows]
