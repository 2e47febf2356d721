from fastapi import APIRouter

from app.api.endpoints import absence, auth, config, feedback, health, profiles

api_router = APIRouter(prefix="/api")
api_router.include_router(health.router)
api_router.include_router(auth.router)
api_router.include_router(profiles.router)
api_router.include_router(feedback.router)
api_router.include_router(absence.router)
api_router.include_router(config.router)
