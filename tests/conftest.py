import base64
import logging
import os

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault('DATABASE_URL', 'sqlite:///:memory:')

from course_api.auth.security import hash_password  # noqa: E402
from course_api.database import Base  # noqa: E402
from course_api.models.course import Course  # noqa: E402
from course_api.models.user import User  # noqa: E402


@pytest.fixture(autouse=True)
def quiet_auth_logs():
    """Expected 401/403/404 paths log at WARNING; keep test output readable."""
    logger = logging.getLogger('course_api')
    old = logger.level
    logger.setLevel(logging.ERROR)
    try:
        yield
    finally:
        logger.setLevel(old)


@pytest.fixture
def engine():
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine, tables=[User.__table__, Course.__table__])
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine, tables=[Course.__table__, User.__table__])
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db):
    def _make_user(email: str, password: str = 'password', first_name: str = 'Joe', last_name: str = 'Smith') -> User:
        user = User(
            first_name=first_name,
            last_name=last_name,
            email_address=email,
            password=hash_password(password),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_course(db):
    def _make_course(owner: User, title: str = 'Build a Basic Bookcase', description: str = 'High-end furniture.') -> Course:
        course = Course(
            title=title,
            description=description,
            estimated_time='12 hours',
            materials_needed='* 1/2 x 3/4 inch parting strip',
            user_id=owner.id,
        )
        db.add(course)
        db.commit()
        db.refresh(course)
        return course

    return _make_course


def encode_basic_auth(email: str, password: str) -> dict[str, str]:
    token = base64.b64encode(f"{email}:{password}".encode("utf-8")).decode("ascii")
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def auth_header():
    return encode_basic_auth


@pytest.fixture
def client(session_factory):
    from fastapi.testclient import TestClient

    from course_api.database import get_db
    from course_api.main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app, raise_server_exceptions=False)
    finally:
        app.dependency_overrides.clear()
