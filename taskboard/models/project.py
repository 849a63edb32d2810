# taskboard/models/project.py
from datetime import date
from enum import Enum
from typing import List, Optional

from pydantic import Field

from taskboard.models.base import Record
from taskboard.models.task import Priority


class ProjectStatus(str, Enum):
    PLANNING = "PLANNING"
    ACTIVE = "ACTIVE"
    ON_HOLD = "ON_HOLD"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Project(Record):
    name: str
    description: str
    status: ProjectStatus = ProjectStatus.PLANNING
    priority: Priority = Priority.MEDIUM
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Optional[float] = None
    actual_cost: Optional[float] = None
    progress: float = Field(default=0, ge=0, le=100)

    # Relationships
    owner_id: str
    department_id: Optional[str] = None
    team_ids: List[str] = Field(default_factory=list)

    tags: List[str] = Field(default_factory=list)
