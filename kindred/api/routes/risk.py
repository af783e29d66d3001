import json
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...engine.risk import compute_risk_scores
from ...models import User, RiskSnapshot
from ...services.signals import collect_user_signal
from ..deps import get_current_user
from ..schemas import RiskScoresOut, UserStats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/risk", tags=["risk"])

@router.get("/scores", response_model=RiskScoresOut)
def risk_scores(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    signal = collect_user_signal(db, user)
    scores = compute_risk_scores(signal)

    db.add(RiskSnapshot(
        user_id=user.id,
        attrition_risk=scores.attrition_risk,
        relapse_risk=scores.relapse_risk,
        crisis_risk=scores.crisis_risk,
        engagement_score=scores.engagement_score,
        factors_json=json.dumps(scores.factors),
    ))
    db.commit()
    logger.info(
        "risk snapshot for user %s: attrition=%s relapse=%s crisis=%s engagement=%s",
        user.id, scores.attrition_risk, scores.relapse_risk, scores.crisis_risk, scores.engagement_score,
    )

    return RiskScoresOut(
        **scores.as_dict(),
        userStats=UserStats(
            streak=signal.streak,
            totalSessions=user.total_sessions or 0,
            daysSinceActive=signal.days_since_last_active,
        ),
    )
