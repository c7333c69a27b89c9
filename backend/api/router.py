from fastapi import APIRouter

from api.routes import alerts, exercises, export, falls, sensor, sessions, stats, summary, users

api_router = APIRouter()

api_router.include_router(users.router, tags=["users"], prefix="/users")
api_router.include_router(sensor.router, tags=["sensor"], prefix="/sensor")
api_router.include_router(exercises.router, tags=["exercises"], prefix="/exercises")
api_router.include_router(sessions.router, tags=["exercise-sessions"], prefix="/exercise-sessions")
api_router.include_router(falls.router, tags=["falls"], prefix="/falls")
api_router.include_router(alerts.router, tags=["alerts"], prefix="/alerts")
api_router.include_router(stats.router, tags=["stats"], prefix="/stats")
api_router.include_router(export.router, tags=["export"], prefix="/export")
api_router.include_router(summary.router, tags=["summary"], prefix="/summary")
