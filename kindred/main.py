import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.db import engine, Base
from .core.log import configure_logging
from .api.routes.auth import router as auth_router
from .api.routes.chat import router as chat_router
from .api.routes.mood import router as mood_router
from .api.routes.assessment import router as assessment_router
from .api.routes.risk import router as risk_router
from .api.routes.analytics import router as analytics_router
from .api.routes.reminders import router as reminders_router
from .api.routes.misc import router as misc_router
from . import models  # noqa: F401  registers tables on Base

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Kindred Health Companion", version=settings.API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    Base.metadata.create_all(bind=engine)
    logger.info("kindred %s started (env=%s)", settings.API_VERSION, settings.APP_ENV)

app.include_router(misc_router)
app.include_router(auth_router)
app.include_router(chat_router)
app.include_router(mood_router)
app.include_router(assessment_router)
app.include_router(risk_router)
app.include_router(analytics_router)
app.include_router(reminders_router)
