import os

# Settings are read at import time, so the environment is fixed before any project import
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["GEMINI_API_KEY"] = ""
os.environ["PASSWORD_SECRET"] = "test-secret"

import pytest
from fastapi.testclient import TestClient

from config.database import Base, SessionLocal, engine
from modules.storage.models import StorageEntry  # noqa: F401
from modules.storage.service import LocalStorage
from modules.auth.service import IdentityStore
from modules.cart.service import CartStore


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def storage(db):
    return LocalStorage(db)


@pytest.fixture
def identity(storage):
    return IdentityStore(storage)


@pytest.fixture
def alice(identity):
    return identity.signup("Alice", "alice@example.com", "s3cret", "s3cret")


@pytest.fixture
def alice_cart(storage, alice):
    return CartStore(storage, alice.id)


@pytest.fixture
def client():
    from main import app
    with TestClient(app) as c:
        yield c
    Base.metadata.drop_all(bind=engine)
