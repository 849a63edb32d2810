# taskboard/services/mutations.py
"""
Writes against the entity store

Each handler builds complete new records first and only then touches the
store, so a failed validation never leaves a partial write behind. Callers
are expected to hold ``store.lock`` for the duration of a handler.
"""

import logging
from collections import defaultdict
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from taskboard.database import EntityStore
from taskboard.models import Comment, Project, Task, TaskStatus, TimeEntry
from taskboard.schemas import CommentInput, ProjectInput, TaskInput, TaskUpdateInput, TimeEntryInput
from taskboard.utils.dates import utcnow
from taskboard.utils.exceptions import InputValidationError, NotFoundError

logger = logging.getLogger(__name__)


def _build(model, data: Dict[str, Any]):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InputValidationError.from_pydantic(e)


def _completion_stamp(old_status, new_status: TaskStatus, completed_at, now: datetime):
    """completedAt after a status change"""
    if new_status != TaskStatus.COMPLETED:
        return None
    if old_status == TaskStatus.COMPLETED and completed_at is not None:
        return completed_at
    return now


class MutationService:
    """Create and update handlers, acting on behalf of ``actor_id``"""

    def __init__(self, store: EntityStore, actor_id: str, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.actor_id = actor_id
        self.clock = clock

    def _sync_user_counters(self, before: Optional[Task], after: Optional[Task]) -> None:
        """Move tasksAssigned and tasksCompleted along with a task change

        ``before`` is None for a new task and ``after`` is None for a deleted
        one. Unknown assignees are skipped.
        """
        deltas: Dict[str, List[int]] = defaultdict(lambda: [0, 0])
        if before is not None:
            deltas[before.assignee_id][0] -= 1
            deltas[before.assignee_id][1] -= int(before.is_completed)
        if after is not None:
            deltas[after.assignee_id][0] += 1
            deltas[after.assignee_id][1] += int(after.is_completed)

        users = self.store.users
        for user_id, (assigned, completed) in deltas.items():
            if not assigned and not completed:
                continue
            index = users.find_index(lambda u: u.id == user_id)
            if index == -1:
                continue
            user = users.get_all()[index]
            users.replace_at(index, user.model_copy(update={
                "tasks_assigned": max(0, user.tasks_assigned + assigned),
                "tasks_completed": max(0, user.tasks_completed + completed),
            }))

    def create_task(self, task_input: TaskInput) -> Task:
        now = self.clock()
        tasks = self.store.tasks

        data = task_input.model_dump()
        data.update(
            id=tasks.next_id(),
            actual_hours=0,
            created_at=now,
            updated_at=now,
            completed_at=_completion_stamp(None, task_input.status, None, now),
            tags=task_input.tags or [],
            watcher_ids=task_input.watcher_ids or [],
        )
        task = _build(Task, data)

        tasks.append(task)
        self._sync_user_counters(None, task)

        logger.info(f"Created task {task.id}: {task.title}")
        return task

    def update_task(self, task_id: str, task_input: TaskUpdateInput) -> Task:
        tasks = self.store.tasks
        index = tasks.find_index(lambda t: t.id == task_id)
        if index == -1:
            raise NotFoundError("Task", task_id)

        current = tasks.get_all()[index]
        changes = task_input.model_dump(exclude_unset=True)

        new_hours = changes.get("actual_hours")
        if new_hours is not None and new_hours < current.actual_hours:
            raise InputValidationError(
                f"actualHours cannot decrease (currently {current.actual_hours})",
                [{"field": "input.actualHours", "message": "Value is lower than the hours already logged"}],
            )

        now = self.clock()
        merged = {**current.model_dump(), **changes, "updated_at": now}
        new_status = changes.get("status") or current.status
        merged["completed_at"] = _completion_stamp(current.status, new_status, current.completed_at, now)

        task = _build(Task, merged)
        tasks.replace_at(index, task)
        self._sync_user_counters(current, task)

        logger.info(f"Updated task {task.id}: {task.title}")
        return task

    def delete_task(self, task_id: str) -> bool:
        """Remove a task; False when there was nothing to remove"""
        tasks = self.store.tasks
        index = tasks.find_index(lambda t: t.id == task_id)
        if index == -1:
            return False
        removed = tasks.remove_at(index)
        self._sync_user_counters(removed, None)
        logger.info(f"Deleted task {task_id}")
        return True

    def create_comment(self, comment_input: CommentInput) -> Comment:
        comments = self.store.comments
        comment = _build(Comment, {
            **comment_input.model_dump(),
            "id": comments.next_id(),
            "author_id": self.actor_id,
            "created_at": self.clock(),
            "is_edited": False,
        })
        comments.append(comment)
        logger.info(f"Added comment {comment.id} on task {comment.task_id}")
        return comment

    def log_time(self, entry_input: TimeEntryInput) -> TimeEntry:
        """Record a time entry and add its hours to the task

        The entry is stored even when the task does not exist; the task
        total is only touched when it does.
        """
        entries = self.store.time_entries
        tasks = self.store.tasks

        entry = _build(TimeEntry, {
            **entry_input.model_dump(),
            "id": entries.next_id(),
            "user_id": self.actor_id,
        })

        index = tasks.find_index(lambda t: t.id == entry.task_id)
        updated_task = None
        if index != -1:
            task = tasks.get_all()[index]
            updated_task = task.model_copy(update={"actual_hours": task.actual_hours + entry.hours})

        entries.append(entry)
        if updated_task is not None:
            tasks.replace_at(index, updated_task)

        logger.info(f"Logged {entry.hours} hours on task {entry.task_id}")
        return entry

    def create_project(self, project_input: ProjectInput) -> Project:
        projects = self.store.projects
        data = project_input.model_dump()
        data.update(
            id=projects.next_id(),
            owner_id=project_input.owner_id or self.actor_id,
            progress=0,
            actual_cost=0,
        )
        project = _build(Project, data)
        projects.append(project)
        logger.info(f"Created project {project.id}: {project.name}")
        return project
