# taskboard/models/department.py
from typing import Optional

from taskboard.models.base import Record


class Department(Record):
    name: str
    description: Optional[str] = None
    budget: Optional[float] = None
    manager_id: Optional[str] = None
