from __future__ import annotations

from datetime import datetime, timedelta
from itertools import cycle

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from smartattend.api.dependencies import get_clock, get_notifier, get_verifier
from smartattend.database.initialize import create_tables
from smartattend.database.session import get_db
from smartattend.exceptions import DeliveryFailure
from smartattend.main import app
from smartattend.models import Location, User
from smartattend.services import codeManager
from smartattend.utils.clock import Clock
from smartattend.utils.credentialVerifier import PlainTextVerifier


class FrozenClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, current: datetime):
        self.current = current

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


class RecordingNotifier:
    def __init__(self):
        self.sent: list[dict] = []

    def send(self, to_address, subject, body, sender_name=None) -> None:
        self.sent.append(
            {"to": to_address, "subject": subject, "body": body, "sender_name": sender_name}
        )

    @property
    def last_code(self) -> str:
        return self.sent[-1]["body"].rsplit(": ", 1)[1]


class FailingNotifier:
    def send(self, to_address, subject, body, sender_name=None) -> None:
        raise DeliveryFailure("Failed to send email")


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2026, 3, 2, 8, 0, 0))


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def fixed_codes(monkeypatch):
    """Make code generation predictable: 111111, 222222, 333333, ..."""
    codes = cycle(["111111", "222222", "333333", "444444"])
    monkeypatch.setattr(codeManager, "generate_code", lambda length=6, characters="": next(codes))


@pytest.fixture
def user(db) -> User:
    user = User(name="Ani", email="a@x.com", password_hash="p1", role="user", nim_nip="2201001")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def office(db, clock) -> Location:
    location = Location(
        id=1,
        location_name="Head Office",
        latitude=0.0,
        longitude=0.0,
        radius=100.0,
        created_at=clock.now(),
    )
    db.add(location)
    db.commit()
    db.refresh(location)
    return location


@pytest.fixture
def client(session_factory, clock, notifier):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_verifier] = PlainTextVerifier
    yield TestClient(app)
    app.dependency_overrides.clear()
