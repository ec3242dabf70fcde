# portfolio/dependencies.py
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from portfolio.crud.profile_crud import ProfileRepository
from portfolio.crud.resource_crud import ResourceRepository
from portfolio.db.database import (
    CONTACT_COLLECTION,
    PROFILE_COLLECTION,
    PROJECT_COLLECTION,
    SERVICE_COLLECTION,
    TECHNOLOGY_COLLECTION,
    get_database,
)


def get_profile_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> ProfileRepository:
    return ProfileRepository(db[PROFILE_COLLECTION])


def get_project_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> ResourceRepository:
    return ResourceRepository(db[PROJECT_COLLECTION], "Project")


def get_service_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> ResourceRepository:
    return ResourceRepository(db[SERVICE_COLLECTION], "Service")


def get_technology_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> ResourceRepository:
    return ResourceRepository(db[TECHNOLOGY_COLLECTION], "Technology")


def get_contact_repository(db: AsyncIOMotorDatabase = Depends(get_database)) -> ResourceRepository:
    return ResourceRepository(db[CONTACT_COLLECTION], "Contact")
