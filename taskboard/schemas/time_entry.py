# taskboard/schemas/time_entry.py
from datetime import date
from typing import Optional

from pydantic import Field

from taskboard.schemas.base import CamelModel


class TimeEntryInput(CamelModel):
    task_id: str
    hours: float = Field(gt=0)
    description: Optional[str] = None
    entry_date: date = Field(alias="date")
    billable: bool


class LogTimeArgs(CamelModel):
    input: TimeEntryInput
