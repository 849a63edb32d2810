# taskboard/schemas/task.py
from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import Field

from taskboard.models.task import Priority, TaskStatus
from taskboard.schemas.base import CamelModel


class TaskFilter(CamelModel):
    """Arguments of the tasks query; a None filter is not applied"""

    status: Optional[TaskStatus] = None
    priority: Optional[Priority] = None
    assignee_id: Optional[str] = None
    project_id: Optional[str] = None
    search: Optional[str] = None
    tags: Optional[List[str]] = None
    limit: Optional[int] = Field(default=None, ge=0)
    offset: Optional[int] = Field(default=None, ge=0)


class MyTasksArgs(CamelModel):
    status: Optional[TaskStatus] = None


class TaskInput(CamelModel):
    title: str = Field(min_length=1)
    description: str
    status: TaskStatus
    priority: Priority
    assignee_id: str
    reporter_id: str
    project_id: Optional[str] = None
    due_date: date
    estimated_hours: Optional[float] = Field(default=None, ge=0)
    tags: Optional[List[str]] = None
    watcher_ids: Optional[List[str]] = None


class TaskUpdateInput(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[Priority] = None
    assignee_id: Optional[str] = None
    project_id: Optional[str] = None
    due_date: Optional[date] = None
    estimated_hours: Optional[float] = Field(default=None, ge=0)
    actual_hours: Optional[float] = Field(default=None, ge=0)
    tags: Optional[List[str]] = None


class CreateTaskArgs(CamelModel):
    input: TaskInput


class UpdateTaskArgs(CamelModel):
    id: str
    input: TaskUpdateInput


# For returning task data
class TaskConnection(CamelModel):
    tasks: List[Dict[str, Any]]
    total_count: int
    has_more: bool


class TaskStatisticsArgs(CamelModel):
    project_id: Optional[str] = None
    user_id: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None


class TaskStatistics(CamelModel):
    total: int = 0
    backlog: int = 0
    todo: int = 0
    in_progress: int = 0
    in_review: int = 0
    blocked: int = 0
    completed: int = 0
    cancelled: int = 0
    high_priority: int = 0
    overdue: int = 0
    completed_this_week: int = 0
    completed_this_month: int = 0
    # Hours from creation to completion
    average_completion_time: float = 0.0
