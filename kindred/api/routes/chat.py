import logging
import uuid
from datetime import datetime, timedelta

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from ...core.config import settings
from ...core.db import get_db
from ...engine.responder import Responder
from ...models import User, ChatMessage
from ...services.activity import touch_activity
from ...services.translate import translate_text
from ...utils.dates import iso
from ..deps import get_current_user
from ..schemas import ChatMessageIn, ChatReply, ChatHistoryItem, ChatSessionSummary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])

responder = Responder(hotlines=settings.CRISIS_HOTLINES, emergency_number=settings.EMERGENCY_NUMBER)

@router.post("/message", response_model=ChatReply)
async def message(payload: ChatMessageIn, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    text = payload.message.strip()
    if not text:
        raise HTTPException(status_code=422, detail="Message cannot be empty.")
    session_id = payload.sessionId or str(uuid.uuid4())
    lang = (payload.lang or settings.BASE_LANGUAGE).strip().lower()
    translating = lang != settings.BASE_LANGUAGE

    # the engine only reads the base language
    processed = text
    if translating:
        processed = await translate_text(text, settings.BASE_LANGUAGE, source_lang=lang)

    reply, result = responder.respond_classified(processed, {"name": user.name})

    final = reply.response
    if translating:
        final = await translate_text(reply.response, lang, source_lang=settings.BASE_LANGUAGE)

    if reply.crisis_flag:
        logger.warning(
            "crisis flag raised for user %s (intent=%s, medical=%s)",
            user.id, result.intent, result.medical_category,
        )

    now = datetime.utcnow()
    db.add(ChatMessage(
        user_id=user.id, session_id=session_id, role="user", content=text,
        sentiment=reply.sentiment, crisis_flag=reply.crisis_flag, created_at=now,
    ))
    # reply always sorts after the message it answers
    db.add(ChatMessage(
        user_id=user.id, session_id=session_id, role="assistant", content=final,
        sentiment="bot", crisis_flag=reply.crisis_flag, created_at=now + timedelta(microseconds=1),
    ))
    user.total_sessions = (user.total_sessions or 0) + 1
    touch_activity(db, user)
    db.commit()

    meta = None
    if settings.ALLOW_DEV_DEBUG_META:
        meta = {
            "intent": result.intent,
            "medicalCategory": result.medical_category,
            "isCrisis": result.is_crisis,
            "lang": lang,
        }
    return ChatReply(
        response=final, sentiment=reply.sentiment, crisisFlag=reply.crisis_flag,
        sessionId=session_id, meta=meta,
    )

@router.get("/history", response_model=list[ChatHistoryItem])
def history(limit: int = Query(50, ge=1, le=500), db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    msgs = (
        db.query(ChatMessage)
        .filter(ChatMessage.user_id == user.id)
        .order_by(ChatMessage.created_at.asc())
        .limit(limit)
        .all()
    )
    return [
        ChatHistoryItem(
            id=m.id, role=m.role, content=m.content, sentiment=m.sentiment,
            crisisFlag=bool(m.crisis_flag), sessionId=m.session_id, createdAt=iso(m.created_at),
        )
        for m in msgs
    ]

@router.get("/sessions", response_model=list[ChatSessionSummary])
def sessions(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    started = func.min(ChatMessage.created_at)
    rows = (
        db.query(ChatMessage.session_id, started, func.count(ChatMessage.id))
        .filter(ChatMessage.user_id == user.id)
        .group_by(ChatMessage.session_id)
        .order_by(started.desc())
        .limit(20)
        .all()
    )
    return [ChatSessionSummary(sessionId=sid, startedAt=iso(ts), messageCount=n) for sid, ts, n in rows]
