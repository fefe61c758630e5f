import os

# Set testing environment before the application is imported
os.environ["TESTING"] = "1"
os.environ["TEST_DATABASE_URL"] = "sqlite:///./test.db"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from doctors_portal.main import app
from doctors_portal.core.database import get_db, Base
from doctors_portal.core.security import create_access_token
from doctors_portal.models import AppointmentOption, User

# Create test database
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db

@pytest.fixture(scope="function")
def test_db():
    # Create tables
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db_session(test_db):
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

@pytest.fixture
def client(test_db):
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client

@pytest.fixture
def make_user(db_session):
    """Insert a user record and return its id."""
    def _make_user(email, role=None, name=None):
        user = User(email=email, role=role, name=name)
        db_session.add(user)
        db_session.commit()
        return user.id
    return _make_user

@pytest.fixture
def make_option(db_session):
    """Insert an appointment option and return its id."""
    def _make_option(name, slots, price=None):
        option = AppointmentOption(name=name, slots=slots, price=price)
        db_session.add(option)
        db_session.commit()
        return option.id
    return _make_option

@pytest.fixture
def auth_headers():
    def _auth_headers(email):
        return {"Authorization": f"Bearer {create_access_token(email)}"}
    return _auth_headers

@pytest.fixture
def admin_headers(make_user, auth_headers):
    make_user("admin@example.com", role="admin")
    return auth_headers("admin@example.com")

@pytest.fixture
def patient_headers(make_user, auth_headers):
    make_user("patient@example.com")
    return auth_headers("patient@example.com")
