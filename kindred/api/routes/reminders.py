from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...models import User, Reminder
from ..deps import get_current_user
from ..schemas import ReminderIn, ReminderOut

router = APIRouter(prefix="/reminders", tags=["reminders"])

def _out(r: Reminder) -> ReminderOut:
    return ReminderOut(id=r.id, medicineName=r.medicine_name, dosage=r.dosage, reminderTime=r.reminder_time, frequency=r.frequency)

@router.get("", response_model=list[ReminderOut])
def list_reminders(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    rows = (
        db.query(Reminder)
        .filter(Reminder.user_id == user.id, Reminder.is_active.is_(True))
        .order_by(Reminder.reminder_time.asc())
        .all()
    )
    return [_out(r) for r in rows]

@router.post("", response_model=ReminderOut, status_code=201)
def create_reminder(payload: ReminderIn, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    r = Reminder(
        user_id=user.id,
        medicine_name=payload.medicineName.strip(),
        dosage=payload.dosage,
        reminder_time=payload.reminderTime,
        frequency=payload.frequency or "daily",
    )
    db.add(r)
    db.commit()
    db.refresh(r)
    return _out(r)

@router.delete("/{reminder_id}")
def delete_reminder(reminder_id: str, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    r = db.query(Reminder).filter(Reminder.id == reminder_id, Reminder.user_id == user.id).first()
    if not r:
        raise HTTPException(status_code=404, detail="Reminder not found")
    r.is_active = False
    db.commit()
    return {"ok": True}
