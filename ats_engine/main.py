import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ats_engine.api.v1.ats import router as ats_router
from ats_engine.api.v1.health import router as health_router
from ats_engine.core.settings import settings

logging.basicConfig(level=settings.log_level, format="%(message)s")

app = FastAPI(title="ATS Compatibility Engine", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(ats_router, prefix="/v1", tags=["ATS"])
