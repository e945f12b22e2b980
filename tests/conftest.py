import os
import tempfile
from pathlib import Path

# Set environment variables BEFORE any imports that might use settings
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_ecole_bourse.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["SECRET_KEY"] = "test-secret-key-min-32-characters-long-for-testing"
os.environ["ALGORITHM"] = "HS256"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from app.main import app
from app.core.security import create_access_token
from app.db.models.role import Role as RoleModel
from app.db.models.user import User as UserModel

ALEMBIC_INI = Path(__file__).resolve().parents[1] / "alembic.ini"


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    # Run Alembic migrations to set up the schema and the role rows
    alembic_cfg = Config(str(ALEMBIC_INI))
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()

        for suffix in ["", "-wal", "-shm"]:
            path = f"{test_db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
        if os.path.exists(temp_db_dir):
            os.rmdir(temp_db_dir)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from app.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def make_user(db: Session):
    """Factory creating users with a given role name."""
    counter = {"n": 0}

    def _make_user(
        role: str = "APPRENANT",
        first_name: str = "Awa",
        last_name: str | None = None,
        status: str = "ACTIVE",
    ) -> UserModel:
        counter["n"] += 1
        role_row = db.query(RoleModel).filter(RoleModel.name == role).first()
        if not role_row:
            raise RuntimeError(f"Role {role} not found")

        user = UserModel(
            email=f"{role.lower()}{counter['n']}@example.com",
            first_name=first_name,
            last_name=last_name or f"User{counter['n']:03d}",
            role_id=role_row.id,
            status=status,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


def _token_for(user: UserModel) -> str:
    return create_access_token(data={"sub": user.id})


@pytest.fixture(scope="function")
def admin_user(make_user) -> UserModel:
    return make_user("ADMIN", first_name="Admin", last_name="Principal")


@pytest.fixture(scope="function")
def coach_user(make_user) -> UserModel:
    return make_user("COACH", first_name="Moussa", last_name="Coach")


@pytest.fixture(scope="function")
def learner_user(make_user) -> UserModel:
    return make_user("APPRENANT", first_name="Fatou", last_name="Apprenant")


@pytest.fixture(scope="function")
def admin_token(admin_user: UserModel) -> str:
    return _token_for(admin_user)


@pytest.fixture(scope="function")
def coach_token(coach_user: UserModel) -> str:
    return _token_for(coach_user)


@pytest.fixture(scope="function")
def learner_token(learner_user: UserModel) -> str:
    return _token_for(learner_user)
