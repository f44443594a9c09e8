import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTO_MIGRATE"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from dispatchboard.db import SessionLocal, engine  # noqa: E402
from dispatchboard.main import app  # noqa: E402
from dispatchboard.models import Base  # noqa: E402


@pytest.fixture(scope="function")
def db_engine():
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def session(db_engine):
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def client(db_engine):
    with TestClient(app) as test_client:
        yield test_client
