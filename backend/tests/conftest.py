"""Shared fixtures: an in-memory stand-in for the motor database."""

import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from portfolio.core.config import Settings
from portfolio.db.database import get_database
from portfolio.main import create_app
from portfolio.utils.contact_mail import get_contact_notifier


def _matches(doc, query):
    return all(doc.get(key) == value for key, value in query.items())


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def sort(self, key, direction=1):
        self._docs.sort(key=lambda d: d.get(key), reverse=direction == -1)
        return self

    async def to_list(self, length=None):
        return self._docs if length is None else self._docs[:length]


class FakeCollection:
    """Implements the subset of AsyncIOMotorCollection the repositories use."""

    def __init__(self):
        self.docs = []
        self.fail = False

    def _check(self):
        if self.fail:
            raise PyMongoError("connection refused")

    def find(self, query=None):
        self._check()
        return FakeCursor([copy.deepcopy(d) for d in self.docs if _matches(d, query or {})])

    async def find_one(self, query=None):
        self._check()
        for doc in self.docs:
            if _matches(doc, query or {}):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, doc):
        self._check()
        doc.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    def _apply(self, doc, update, inserting):
        doc.update(update.get("$set", {}))
        if inserting:
            doc.update(update.get("$setOnInsert", {}))

    async def update_one(self, query, update, upsert=False):
        self._check()
        for doc in self.docs:
            if _matches(doc, query):
                self._apply(doc, update, inserting=False)
                return SimpleNamespace(matched_count=1, upserted_id=None)
        if not upsert:
            return SimpleNamespace(matched_count=0, upserted_id=None)
        doc = dict(query)
        doc.setdefault("_id", ObjectId())
        self._apply(doc, update, inserting=True)
        self.docs.append(doc)
        return SimpleNamespace(matched_count=0, upserted_id=doc["_id"])

    async def find_one_and_update(self, query, update, return_document=ReturnDocument.BEFORE):
        self._check()
        for doc in self.docs:
            if _matches(doc, query):
                before = copy.deepcopy(doc)
                self._apply(doc, update, inserting=False)
                return copy.deepcopy(doc) if return_document == ReturnDocument.AFTER else before
        return None

    async def delete_one(self, query):
        self._check()
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


class RecordingNotifier:
    def __init__(self):
        self.sent = []
        self.result = True

    async def notify(self, contact):
        self.sent.append(contact)
        return self.result


@pytest.fixture
def db():
    return FakeDatabase()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def settings():
    return Settings(CONTACT_RECIPIENT="owner@example.com", SMS_ENABLED=False)


@pytest.fixture
def client(db, notifier, settings):
    app = create_app(settings)
    app.dependency_overrides[get_database] = lambda: db
    app.dependency_overrides[get_contact_notifier] = lambda: notifier
    return TestClient(app)
