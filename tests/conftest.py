# tests/conftest.py
from __future__ import annotations

import os
import tempfile
import time
from collections.abc import Generator, Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta
from itertools import count
from pathlib import Path
from threading import Lock

os.environ.setdefault("PYTEST_RUNNING", "true")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("AUDIO_STORAGE_DIR", tempfile.mkdtemp(prefix="slh-audio-"))

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from sounds_like_home.api.v1.dependencies import get_audio_store_dep
from sounds_like_home.core.security import create_access_token
from sounds_like_home.db.session import Base
from sounds_like_home.db.session import get_db as app_get_session
from sounds_like_home.db.time import utcnow
from sounds_like_home.main import app as fastapi_app
from sounds_like_home.models import Prompt, Recording
from sounds_like_home.services.audio_store import AudioStore
from sounds_like_home.services.stores import CursorState

TEST_DB_URL = "sqlite://"

_PROMPT_CLOCK_BASE = datetime(2024, 1, 1)
_PROMPT_SEQ = count(1)


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    connection = engine.connect()
    transaction = connection.begin()
    SessionLocal = sessionmaker(
        bind=connection,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    session.begin_nested()

    @event.listens_for(session, "after_transaction_end")
    def restart_savepoint(sess: Session, trans) -> None:  # pragma: no cover - SQLAlchemy internals
        if trans.nested and not getattr(trans._parent, "nested", False):
            session.begin_nested()

    try:
        yield session
    finally:
        event.remove(session, "after_transaction_end", restart_savepoint)
        session.close()

        if transaction.is_active:
            transaction.rollback()
        connection.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture()
def file_engine(tmp_path: Path) -> Generator[Engine, None, None]:
    """File-backed SQLite engine for tests that need independent connections."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'rotation.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def audio_store(tmp_path: Path) -> AudioStore:
    return AudioStore(tmp_path / "audio")


@pytest.fixture(autouse=True)
def override_audio_store(app: FastAPI, audio_store: AudioStore) -> Iterator[None]:
    app.dependency_overrides[get_audio_store_dep] = lambda: audio_store
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_audio_store_dep, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    """Return authorization headers for an admin session."""
    return {"Authorization": f"Bearer {create_access_token()}"}


def add_prompt(
    session: Session,
    text: str,
    *,
    order: int,
    active: bool = True,
) -> Prompt:
    """Persist a prompt with a strictly increasing creation time."""
    prompt = Prompt(
        text=text,
        order=order,
        active=active,
        created_at=_PROMPT_CLOCK_BASE + timedelta(seconds=next(_PROMPT_SEQ)),
    )
    session.add(prompt)
    session.flush()
    return prompt


@pytest.fixture()
def three_prompts(db_session: Session) -> list[Prompt]:
    """Active prompts ordered 1, 2, 3."""
    prompts = [add_prompt(db_session, f"Prompt {n}", order=n) for n in (1, 2, 3)]
    db_session.commit()
    return prompts


def add_recording(
    session: Session,
    prompt: str,
    *,
    approved: bool = True,
    filename: str | None = None,
    tags: list[str] | None = None,
) -> Recording:
    recording = Recording(
        id=f"rec-{next(_PROMPT_SEQ)}",
        prompt=prompt,
        filename=filename,
        content_type="audio/webm",
        size_bytes=0,
        timestamp=utcnow(),
        tags=tags or [],
        approved=approved,
        duration=12.0,
    )
    session.add(recording)
    session.commit()
    return recording


# --- In-memory collaborators for sequencer tests --------------------------------


@dataclass
class MemoryPrompt:
    id: str
    text: str
    active: bool = True
    order: int = 0


class MemoryPromptStore:
    """Prompt store returning prompts in insertion order."""

    def __init__(self, prompts: list[MemoryPrompt] | None = None) -> None:
        self.prompts = list(prompts or [])

    def list(self) -> list[MemoryPrompt]:
        return list(self.prompts)


class MemoryCursorStore:
    """Cursor store with an atomic compare-and-swap.

    ``read_delay`` sleeps after each read to widen the race window for
    concurrent callers.
    """

    def __init__(self, index: int = 0, *, read_delay: float = 0.0) -> None:
        self._lock = Lock()
        self._state = CursorState(index=index, version=0)
        self.read_delay = read_delay
        self.writes = 0
        self.conflicts = 0

    @property
    def state(self) -> CursorState:
        with self._lock:
            return self._state

    def read(self) -> CursorState:
        with self._lock:
            state = self._state
        if self.read_delay:
            time.sleep(self.read_delay)
        return state

    def write_if_unchanged(self, expected_version: int, index: int, now: datetime) -> bool:
        with self._lock:
            if self._state.version != expected_version:
                self.conflicts += 1
                return False
            self._state = CursorState(index=index, version=expected_version + 1, last_updated=now)
            self.writes += 1
            return True


class ContendedCursorStore(MemoryCursorStore):
    """Simulates another writer winning the next ``losses`` races."""

    def __init__(self, index: int = 0, *, losses: int) -> None:
        super().__init__(index)
        self.losses = losses

    def write_if_unchanged(self, expected_version: int, index: int, now: datetime) -> bool:
        if self.losses > 0:
            self.losses -= 1
            with self._lock:
                current = self._state
                self._state = CursorState(
                    index=current.index,
                    version=current.version + 1,
                    last_updated=now,
                )
        return super().write_if_unchanged(expected_version, index, now)


def memory_prompts(count_: int) -> list[MemoryPrompt]:
    return [MemoryPrompt(id=str(n), text=f"Prompt {n}", order=n) for n in range(1, count_ + 1)]
