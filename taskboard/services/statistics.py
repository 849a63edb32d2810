# taskboard/services/statistics.py
"""
Task statistics for the dashboard

Completion windows and completion time are computed from ``completedAt``.
Tasks marked COMPLETED without a completion timestamp still count as
completed but take no part in the time-based figures.
"""

from datetime import date, datetime
from typing import Callable, Iterable, List, Optional

from taskboard.database import EntityStore
from taskboard.models import HIGH_PRIORITIES, Task, TaskStatus
from taskboard.schemas import TaskStatistics, UserPerformance
from taskboard.utils.dates import hours_between, start_of_month, start_of_week, utcnow


def _status_field(status: TaskStatus) -> str:
    # IN_PROGRESS -> in_progress, the TaskStatistics attribute name
    return status.value.lower()


def _completion_hours(tasks: Iterable[Task]) -> List[float]:
    return [
        hours_between(task.created_at, task.completed_at)
        for task in tasks
        if task.is_completed and task.completed_at is not None
    ]


def _average(values: List[float]) -> float:
    if not values:
        return 0.0
    return round(sum(values) / len(values), 2)


class StatisticsAggregator:
    """Counts and derived figures over the task collection"""

    def __init__(self, store: EntityStore, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    def scoped_tasks(
        self,
        project_id: Optional[str] = None,
        user_id: Optional[str] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> List[Task]:
        """Tasks restricted to a project, an assignee and a creation-date window"""
        tasks = self.store.tasks.get_all()
        if project_id is not None:
            tasks = [t for t in tasks if t.project_id == project_id]
        if user_id is not None:
            tasks = [t for t in tasks if t.assignee_id == user_id]
        if date_from is not None:
            tasks = [t for t in tasks if t.created_at.date() >= date_from]
        if date_to is not None:
            tasks = [t for t in tasks if t.created_at.date() <= date_to]
        return tasks

    def task_statistics(
        self,
        project_id: Optional[str] = None,
        user_id: Optional[str] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> TaskStatistics:
        now = self.clock()
        today = now.date()
        tasks = self.scoped_tasks(project_id, user_id, date_from, date_to)

        stats = TaskStatistics(total=len(tasks))
        for status in TaskStatus:
            count = sum(1 for t in tasks if t.status == status)
            setattr(stats, _status_field(status), count)

        stats.high_priority = sum(1 for t in tasks if t.priority in HIGH_PRIORITIES)
        stats.overdue = sum(1 for t in tasks if t.is_overdue(today))
        stats.completed_this_week = self._completed_since(tasks, start_of_week(now), now)
        stats.completed_this_month = self._completed_since(tasks, start_of_month(now), now)
        stats.average_completion_time = _average(_completion_hours(tasks))
        return stats

    def user_performance(self, user_id: str) -> UserPerformance:
        now = self.clock()
        tasks = [t for t in self.store.tasks if t.assignee_id == user_id]
        finished = [t for t in tasks if t.is_completed and t.completed_at is not None]

        on_time_rate = 0.0
        if finished:
            on_time = sum(1 for t in finished if t.completed_at.date() <= t.due_date)
            on_time_rate = round(on_time * 100 / len(finished), 1)

        return UserPerformance(
            tasks_completed_this_month=self._completed_since(tasks, start_of_month(now), now),
            average_completion_time=_average(_completion_hours(tasks)),
            on_time_delivery_rate=on_time_rate,
        )

    @staticmethod
    def _completed_since(tasks: Iterable[Task], start: datetime, end: datetime) -> int:
        return sum(
            1
            for t in tasks
            if t.is_completed and t.completed_at is not None and start <= t.completed_at <= end
        )
