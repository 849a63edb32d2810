# taskboard/models/user.py
from datetime import date
from typing import List, Optional

from pydantic import EmailStr, Field

from taskboard.models.base import Record


class User(Record):
    name: str
    email: EmailStr
    avatar: Optional[str] = None
    role: str
    department_id: Optional[str] = None
    tasks_assigned: int = 0
    tasks_completed: int = 0
    skills: List[str] = Field(default_factory=list)
    is_active: bool = True
    created_at: Optional[date] = None
    last_login: Optional[date] = None
