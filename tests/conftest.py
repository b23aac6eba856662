import os
import sys
import tempfile
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# keep logs and the sqlite file out of the real user data dir
os.environ.setdefault("TASKBOARD_DATA_DIR", tempfile.mkdtemp(prefix="taskboard-tests-"))

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import models  # noqa: E402,F401  populate metadata
from services.board import TaskBoard
from services.categories import CategoryService
from services.events import ChangeEvents
from services.tasks import TaskService


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    def factory():
        return Session(engine)

    return factory


@pytest.fixture()
def board():
    return TaskBoard()


@pytest.fixture()
def events():
    return ChangeEvents()


@pytest.fixture()
def recorded(events):
    seen = []
    events.subscribe("*", seen.append)
    return seen


@pytest.fixture()
def tasks(board, events):
    return TaskService(board, events)


@pytest.fixture()
def categories(board, events):
    return CategoryService(board, events)
