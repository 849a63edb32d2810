# taskboard/models/time_entry.py
from datetime import date
from typing import Optional

from pydantic import Field

from taskboard.models.base import Record


class TimeEntry(Record):
    user_id: str
    task_id: str
    hours: float = Field(gt=0)
    description: Optional[str] = None
    # "date" on the wire
    entry_date: date = Field(alias="date")
    billable: bool = True
