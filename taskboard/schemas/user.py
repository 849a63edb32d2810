# taskboard/schemas/user.py
from typing import Optional

from taskboard.schemas.base import CamelModel


class UserFilter(CamelModel):
    department_id: Optional[str] = None
    role: Optional[str] = None
    is_active: Optional[bool] = None


class UserPerformance(CamelModel):
    tasks_completed_this_month: int = 0
    average_completion_time: float = 0.0
    # Percentage of completions delivered on or before the due date
    on_time_delivery_rate: float = 0.0
    quality_score: Optional[float] = None
