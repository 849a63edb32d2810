# taskboard/services/resolver.py
from datetime import datetime
from typing import Any, Callable, Dict, Iterable, List, Optional

from taskboard.database import Collection, EntityStore
from taskboard.models import Comment, Department, Project, Record, Task, TimeEntry, User
from taskboard.services.statistics import StatisticsAggregator
from taskboard.utils.dates import utcnow


def plain(record: Optional[Record]) -> Optional[Dict[str, Any]]:
    """Serialize a record without expanding its references"""
    if record is None:
        return None
    return record.to_json()


class RelationshipResolver:
    """Expands foreign keys into the related records for response shaping

    Lookups are lenient: a dangling single reference resolves to None and
    unmatched ids in a list reference are dropped. Related records are
    emitted one level deep, with their own foreign keys left as ids.
    """

    def __init__(self, store: EntityStore, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.clock = clock

    @staticmethod
    def find_one(collection: Collection, record_id: Optional[str]) -> Optional[Record]:
        return collection.get_by_id(record_id)

    @staticmethod
    def find_many(collection: Collection, ids: Optional[Iterable[str]]) -> List[Record]:
        """Records whose id is listed, in collection order"""
        wanted = set(ids or [])
        return [record for record in collection if record.id in wanted]

    @staticmethod
    def find_where(collection: Collection, field: str, value: Any) -> List[Record]:
        return [record for record in collection if getattr(record, field) == value]

    # Entity shapes

    def task(self, task: Optional[Task]) -> Optional[Dict[str, Any]]:
        if task is None:
            return None
        store = self.store
        data = task.to_json()
        data["assignee"] = plain(self.find_one(store.users, task.assignee_id))
        data["reporter"] = plain(self.find_one(store.users, task.reporter_id))
        data["project"] = plain(self.find_one(store.projects, task.project_id))
        data["comments"] = [self.comment(c, include_task=False) for c in self.find_where(store.comments, "task_id", task.id)]
        data["timeEntries"] = [self.time_entry(e, include_task=False) for e in self.find_where(store.time_entries, "task_id", task.id)]
        data["watchers"] = [plain(u) for u in self.find_many(store.users, task.watcher_ids)]
        return data

    def project(self, project: Optional[Project]) -> Optional[Dict[str, Any]]:
        if project is None:
            return None
        store = self.store
        data = project.to_json()
        data["owner"] = plain(self.find_one(store.users, project.owner_id))
        data["department"] = plain(self.find_one(store.departments, project.department_id))
        data["team"] = [plain(u) for u in self.find_many(store.users, project.team_ids)]
        data["tasks"] = [plain(t) for t in self.find_where(store.tasks, "project_id", project.id)]
        return data

    def user(self, user: Optional[User]) -> Optional[Dict[str, Any]]:
        if user is None:
            return None
        store = self.store
        data = user.to_json()
        data["department"] = plain(self.find_one(store.departments, user.department_id))
        data["projects"] = [
            plain(p) for p in store.projects
            if user.id in p.team_ids or p.owner_id == user.id
        ]
        performance = StatisticsAggregator(store, self.clock).user_performance(user.id)
        data["performance"] = performance.model_dump(by_alias=True)
        return data

    def department(self, department: Optional[Department]) -> Optional[Dict[str, Any]]:
        if department is None:
            return None
        store = self.store
        data = department.to_json()
        data["manager"] = plain(self.find_one(store.users, department.manager_id))
        data["members"] = [plain(u) for u in self.find_where(store.users, "department_id", department.id)]
        data["projects"] = [plain(p) for p in self.find_where(store.projects, "department_id", department.id)]
        return data

    def comment(self, comment: Optional[Comment], include_task: bool = True) -> Optional[Dict[str, Any]]:
        if comment is None:
            return None
        data = comment.to_json()
        data["author"] = plain(self.find_one(self.store.users, comment.author_id))
        if include_task:
            data["task"] = plain(self.find_one(self.store.tasks, comment.task_id))
        return data

    def time_entry(self, entry: Optional[TimeEntry], include_task: bool = True) -> Optional[Dict[str, Any]]:
        if entry is None:
            return None
        data = entry.to_json()
        data["user"] = plain(self.find_one(self.store.users, entry.user_id))
        if include_task:
            data["task"] = plain(self.find_one(self.store.tasks, entry.task_id))
        return data
