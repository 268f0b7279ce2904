"""
Shared fixtures: SQLite test database, API client, fake translation backend
"""
import os

# Configure before the application modules read settings
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["CACHE_ENABLED"] = "false"
os.environ["TRANSLATION_BACKEND"] = "placeholder"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from translation_service.main import app
from translation_service.core.database import Base, get_db
from translation_service.models.language import Language
from translation_service.services.translation_backend import (
    PlaceholderTranslationBackend,
    get_translation_backend,
)


# Test database (SQLite file, recreated per test)
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Override database dependency for testing"""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


class FakeBackend(PlaceholderTranslationBackend):
    """Placeholder output, records calls, raises for texts in fail_on"""
    
    def __init__(self, fail_on=()):
        self.calls = []
        self.fail_on = set(fail_on)
    
    def translate(self, text, source_language, target_language):
        self.calls.append((text, source_language, target_language))
        if text in self.fail_on:
            raise RuntimeError(f"backend cannot translate {text!r}")
        return f"[{target_language.upper()}] {text}"


class FakeCache:
    """In-memory stand-in for RedisCache"""
    
    def __init__(self):
        self.store = {}
    
    def get(self, key):
        return self.store.get(key)
    
    def set(self, key, value, ttl=3600):
        self.store[key] = value
        return True
    
    def delete(self, key):
        return self.store.pop(key, None) is not None
    
    def delete_pattern(self, pattern):
        prefix = pattern.rstrip("*")
        keys = [k for k in self.store if k.startswith(prefix)]
        for key in keys:
            del self.store[key]
        return len(keys)


@pytest.fixture(scope="function")
def db_session():
    """Create test database session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def backend():
    """Fake backend injected into the API"""
    fake = FakeBackend(fail_on={"bad-input-that-throws"})
    app.dependency_overrides[get_translation_backend] = lambda: fake
    yield fake
    app.dependency_overrides.pop(get_translation_backend, None)


@pytest.fixture
def client(db_session, backend):
    """Create test client"""
    return TestClient(app)


def make_language(db, code, name, is_default=False, status="active", **kwargs):
    language = Language(
        code=code,
        name=name,
        local_name=kwargs.pop("local_name", name),
        status=status,
        is_default=is_default,
        language_metadata=kwargs.pop("metadata", {"direction": "ltr"}),
        **kwargs
    )
    db.add(language)
    db.commit()
    return language


@pytest.fixture
def english(db_session):
    return make_language(db_session, "en", "English", is_default=True)


@pytest.fixture
def spanish(db_session):
    return make_language(db_session, "es", "Spanish", local_name="Español")


@pytest.fixture
def language_factory(db_session):
    """Create languages directly in the test database"""
    def factory(code, name, **kwargs):
        return make_language(db_session, code, name, **kwargs)
    return factory
