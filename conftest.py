from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from main import app
from taskboard.database import EntityStore, get_store

# Friday; the week started on Monday 2025-11-24
FIXED_NOW = datetime(2025, 11, 28, 12, 0, 0)


@pytest.fixture
def store():
    """Fresh store loaded with the seed data"""
    return EntityStore().init()


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


def make_task(task_id, **overrides):
    """Raw task dict in wire format for custom fixtures"""
    task = {
        "id": task_id,
        "title": f"Task {task_id}",
        "description": "Generated task",
        "status": "TODO",
        "priority": "MEDIUM",
        "assigneeId": "1",
        "reporterId": "2",
        "projectId": "1",
        "dueDate": "2025-12-31",
        "createdAt": "2025-11-01T09:00:00",
        "tags": [],
        "watcherIds": [],
    }
    task.update(overrides)
    return task
