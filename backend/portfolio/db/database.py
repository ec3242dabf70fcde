# portfolio/db/database.py
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from portfolio.core.config import Settings

PROFILE_COLLECTION = "profiles"
PROJECT_COLLECTION = "projects"
SERVICE_COLLECTION = "services"
TECHNOLOGY_COLLECTION = "technologies"
CONTACT_COLLECTION = "contacts"


def create_client(settings: Settings) -> AsyncIOMotorClient:
    return AsyncIOMotorClient(
        settings.MONGO_URL,
        serverSelectionTimeoutMS=settings.MONGO_TIMEOUT_MS,
        tz_aware=True,
    )


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """Database handle opened by the app lifespan."""
    return request.app.state.db
