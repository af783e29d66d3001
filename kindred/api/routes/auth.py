import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ...core.db import get_db
from ...core.security import hash_password, verify_password, create_access_token
from ...models import User
from ...services.activity import touch_activity
from ...utils.dates import iso
from ..deps import get_current_user
from ..schemas import RegisterRequest, LoginRequest, AuthResponse, UserOut, ProfileOut, ProfileUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _user_out(user: User) -> UserOut:
    return UserOut(
        id=user.id, name=user.name, email=user.email, age=user.age, gender=user.gender,
        diagnosis=user.diagnosis, therapistName=user.therapist_name,
        streak=user.streak or 0, totalSessions=user.total_sessions or 0,
    )

def _issue(user: User) -> AuthResponse:
    token, ttl = create_access_token(user.id, user.email)
    return AuthResponse(token=token, expiresIn=ttl, user=_user_out(user))

@router.post("/register", response_model=AuthResponse, status_code=201)
def register(req: RegisterRequest, db: Session = Depends(get_db)):
    email = req.email.lower().strip()
    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=409, detail="An account with this email already exists.")
    user = User(
        name=req.name.strip(),
        email=email,
        password_hash=hash_password(req.password),
        age=req.age,
        gender=req.gender,
        diagnosis=req.diagnosis or "unspecified",
        therapist_name=req.therapistName,
        emergency_contact=req.emergencyContact,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("registered user %s", user.id)
    return _issue(user)

@router.post("/login", response_model=AuthResponse)
def login(req: LoginRequest, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == req.email.lower().strip()).first()
    if not user or not verify_password(req.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid email or password.")
    touch_activity(db, user)
    db.commit()
    db.refresh(user)
    return _issue(user)

@router.get("/profile", response_model=ProfileOut)
def profile(user: User = Depends(get_current_user)):
    return ProfileOut(
        **_user_out(user).model_dump(),
        emergencyContact=user.emergency_contact,
        createdAt=iso(user.created_at),
        lastActive=iso(user.last_active),
    )

@router.put("/profile", response_model=ProfileOut)
def update_profile(payload: ProfileUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    if payload.name is not None:
        if not payload.name.strip():
            raise HTTPException(status_code=422, detail="name cannot be empty")
        user.name = payload.name.strip()
    if payload.age is not None:
        user.age = payload.age
    if payload.gender is not None:
        user.gender = payload.gender
    if payload.diagnosis is not None:
        user.diagnosis = payload.diagnosis
    if payload.therapistName is not None:
        user.therapist_name = payload.therapistName
    if payload.emergencyContact is not None:
        user.emergency_contact = payload.emergencyContact
    db.commit()
    db.refresh(user)
    return profile(user)
