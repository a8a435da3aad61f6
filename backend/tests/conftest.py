import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel
import sys
import os

# Append sys.path to ensure the below imports work from tests folder
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set environment variables for testing before importing the app
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from app.main import app
from app.core.database import build_engine, get_session
from app.models.models import Preference

# Create in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"

engine = build_engine(TEST_DATABASE_URL)


# Define a fixture to override database dependency
@pytest.fixture(name="session")
def session_fixture() -> Generator[Session, None, None]:
    """Creates a fresh in-memory database session for each test.

    Yields:
        Session: The SQLModel session connected to the test database.
    """
    # Create the tables in the test DB
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        yield session

    # Tear down (drop tables) after test is done
    SQLModel.metadata.drop_all(engine)


# Define test client fixture
@pytest.fixture(name="client")
def client_fixture(session: Session) -> Generator[TestClient, None, None]:
    """Creates a TestClient with the database dependency overridden.

    Args:
        session (Session): The test database session.

    Yields:
        TestClient: The FastAPI test client.
    """

    # Override the get_session dependency so the app uses SQLite test database
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override

    client = TestClient(app)
    yield client

    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture(name="light_session")
def light_session_fixture(session: Session) -> Session:
    """Pre-populates the database with a stored light theme.

    Args:
        session (Session): The empty test database session.

    Returns:
        Session: The session with the committed preference.
    """
    session.add(Preference(key="theme", value="light"))
    session.commit()
    return session
