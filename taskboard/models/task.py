# taskboard/models/task.py
from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from taskboard.models.base import Record


class TaskStatus(str, Enum):
    BACKLOG = "BACKLOG"
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    IN_REVIEW = "IN_REVIEW"
    BLOCKED = "BLOCKED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Priority(str, Enum):
    LOWEST = "LOWEST"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    HIGHEST = "HIGHEST"


HIGH_PRIORITIES = (Priority.HIGH, Priority.HIGHEST)


class Task(Record):
    title: str
    description: str
    status: TaskStatus = TaskStatus.TODO
    priority: Priority = Priority.MEDIUM

    # Relationships
    assignee_id: str
    reporter_id: str
    project_id: Optional[str] = None
    watcher_ids: List[str] = Field(default_factory=list)

    due_date: date
    estimated_hours: Optional[float] = None
    actual_hours: float = Field(default=0, ge=0)

    # System dates
    created_at: datetime
    updated_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    tags: List[str] = Field(default_factory=list)

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    def is_overdue(self, today: date) -> bool:
        """Past its due date and not completed"""
        return self.due_date < today and not self.is_completed
