from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List

class UserOut(BaseModel):
    id: str
    name: str
    email: str
    age: Optional[int] = None
    gender: Optional[str] = None
    diagnosis: Optional[str] = None
    therapistName: Optional[str] = None
    streak: int = 0
    totalSessions: int = 0

class RegisterRequest(BaseModel):
    name: str = Field(min_length=1)
    email: str
    password: str = Field(min_length=8)
    age: Optional[int] = Field(default=None, ge=0, le=130)
    gender: Optional[str] = None
    diagnosis: Optional[str] = None
    therapistName: Optional[str] = None
    emergencyContact: Optional[str] = None

class LoginRequest(BaseModel):
    email: str
    password: str

class AuthResponse(BaseModel):
    token: str
    expiresIn: int
    user: UserOut

class ProfileOut(UserOut):
    emergencyContact: Optional[str] = None
    createdAt: str
    lastActive: Optional[str] = None

class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0, le=130)
    gender: Optional[str] = None
    diagnosis: Optional[str] = None
    therapistName: Optional[str] = None
    emergencyContact: Optional[str] = None

class ChatMessageIn(BaseModel):
    message: str
    sessionId: Optional[str] = None
    lang: str = "en"

class ChatReply(BaseModel):
    response: str
    sentiment: str
    crisisFlag: bool
    sessionId: str
    meta: Optional[Dict[str, Any]] = None

class ChatHistoryItem(BaseModel):
    id: str
    role: str
    content: str
    sentiment: Optional[str] = None
    crisisFlag: bool
    sessionId: str
    createdAt: str

class ChatSessionSummary(BaseModel):
    sessionId: str
    startedAt: str
    messageCount: int

class MoodLogIn(BaseModel):
    moodScore: int = Field(ge=1, le=10)
    energyLevel: Optional[int] = Field(default=None, ge=1, le=10)
    anxietyLevel: Optional[int] = Field(default=None, ge=1, le=10)
    sleepHours: Optional[float] = Field(default=None, ge=0, le=24)
    notes: Optional[str] = None
    activities: List[str] = []

class MoodLogOut(BaseModel):
    id: str
    moodScore: int
    energyLevel: Optional[int] = None
    anxietyLevel: Optional[int] = None
    sleepHours: Optional[float] = None
    notes: Optional[str] = None
    activities: List[str] = []
    loggedAt: str

class MoodStats(BaseModel):
    avgMood: Optional[float] = None
    avgEnergy: Optional[float] = None
    avgAnxiety: Optional[float] = None
    avgSleep: Optional[float] = None
    minMood: Optional[int] = None
    maxMood: Optional[int] = None
    totalLogs: int = 0

class Phq9In(BaseModel):
    q1: int = Field(ge=0, le=3)
    q2: int = Field(ge=0, le=3)
    q3: int = Field(ge=0, le=3)
    q4: int = Field(ge=0, le=3)
    q5: int = Field(ge=0, le=3)
    q6: int = Field(ge=0, le=3)
    q7: int = Field(ge=0, le=3)
    q8: int = Field(ge=0, le=3)
    q9: int = Field(ge=0, le=3)

    def scores(self) -> List[int]:
        return [self.q1, self.q2, self.q3, self.q4, self.q5, self.q6, self.q7, self.q8, self.q9]

class Phq9Out(BaseModel):
    id: str
    totalScore: int
    severity: str
    items: List[int]
    takenAt: str

class UserStats(BaseModel):
    streak: int
    totalSessions: int
    daysSinceActive: int

class RiskScoresOut(BaseModel):
    attritionRisk: float
    relapseRisk: float
    crisisRisk: float
    engagementScore: float
    factors: List[str]
    userStats: UserStats

class AnalyticsSummary(BaseModel):
    name: str
    streak: int
    totalSessions: int
    latestMood: Optional[Dict[str, Any]] = None
    latestPhq9: Optional[Dict[str, Any]] = None
    chatMessageCount: int
    crisisAlerts: int

class TrendPoint(BaseModel):
    date: str
    avgMood: Optional[float] = None
    avgEnergy: Optional[float] = None
    avgAnxiety: Optional[float] = None

class Phq9TrendPoint(BaseModel):
    date: str
    totalScore: int
    severity: str

class ReminderIn(BaseModel):
    medicineName: str = Field(min_length=1)
    dosage: Optional[str] = None
    reminderTime: str = Field(pattern=r"^\d{2}:\d{2}$")
    frequency: str = "daily"

class ReminderOut(BaseModel):
    id: str
    medicineName: str
    dosage: Optional[str] = None
    reminderTime: str
    frequency: str
