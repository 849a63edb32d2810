# taskboard/schemas/project.py
from datetime import date
from typing import List, Optional

from pydantic import Field

from taskboard.models.project import ProjectStatus
from taskboard.models.task import Priority
from taskboard.schemas.base import CamelModel


class ProjectFilter(CamelModel):
    status: Optional[ProjectStatus] = None
    department_id: Optional[str] = None


class ProjectInput(CamelModel):
    name: str = Field(min_length=1)
    description: str
    status: ProjectStatus = ProjectStatus.PLANNING
    priority: Priority = Priority.MEDIUM
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget: Optional[float] = Field(default=None, ge=0)
    owner_id: Optional[str] = None
    department_id: Optional[str] = None
    team_ids: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)


class CreateProjectArgs(CamelModel):
    input: ProjectInput
