# taskboard/services/query_service.py
from datetime import date
from typing import List, Optional

from taskboard.config.settings import settings
from taskboard.database import EntityStore
from taskboard.models import Department, Project, Task, TaskStatus, User
from taskboard.schemas import ProjectFilter, TaskConnection, TaskFilter, UserFilter
from taskboard.services.resolver import RelationshipResolver


class QueryService:
    """Filter-then-resolve reads over the entity store

    Every filter is an independent predicate; a filter left as None is not
    applied and the rest are ANDed. Results keep insertion order.
    """

    def __init__(self, store: EntityStore, resolver: Optional[RelationshipResolver] = None):
        self.store = store
        self.resolver = resolver or RelationshipResolver(store)

    # Tasks

    def filter_tasks(self, filters: TaskFilter) -> List[Task]:
        tasks = self.store.tasks.get_all()

        if filters.status is not None:
            tasks = [t for t in tasks if t.status == filters.status]
        if filters.priority is not None:
            tasks = [t for t in tasks if t.priority == filters.priority]
        if filters.assignee_id is not None:
            tasks = [t for t in tasks if t.assignee_id == filters.assignee_id]
        if filters.project_id is not None:
            tasks = [t for t in tasks if t.project_id == filters.project_id]
        if filters.search:
            needle = filters.search.lower()
            tasks = [
                t for t in tasks
                if needle in t.title.lower() or needle in t.description.lower()
            ]
        if filters.tags:
            tasks = [t for t in tasks if all(tag in t.tags for tag in filters.tags)]

        return tasks

    def query_tasks(self, filters: TaskFilter) -> TaskConnection:
        """Filtered, paginated and resolved task page"""
        filtered = self.filter_tasks(filters)

        # A missing or zero limit falls back to the default page size
        limit = filters.limit or settings.DEFAULT_TASK_LIMIT
        offset = filters.offset or 0
        page = filtered[offset:offset + limit]

        return TaskConnection(
            tasks=[self.resolver.task(t) for t in page],
            total_count=len(filtered),
            has_more=offset + limit < len(filtered),
        )

    def get_task(self, task_id: str) -> Optional[dict]:
        return self.resolver.task(self.store.tasks.get_by_id(task_id))

    def my_tasks(self, user_id: str, status: Optional[TaskStatus] = None) -> List[dict]:
        tasks = self.filter_tasks(TaskFilter(assignee_id=user_id, status=status))
        return [self.resolver.task(t) for t in tasks]

    def overdue_tasks(self, today: date) -> List[dict]:
        return [self.resolver.task(t) for t in self.store.tasks if t.is_overdue(today)]

    # Projects

    def filter_projects(self, filters: ProjectFilter) -> List[Project]:
        projects = self.store.projects.get_all()
        if filters.status is not None:
            projects = [p for p in projects if p.status == filters.status]
        if filters.department_id is not None:
            projects = [p for p in projects if p.department_id == filters.department_id]
        return projects

    def list_projects(self, filters: ProjectFilter) -> List[dict]:
        return [self.resolver.project(p) for p in self.filter_projects(filters)]

    def get_project(self, project_id: str) -> Optional[dict]:
        return self.resolver.project(self.store.projects.get_by_id(project_id))

    # Users

    def filter_users(self, filters: UserFilter) -> List[User]:
        users = self.store.users.get_all()
        if filters.department_id is not None:
            users = [u for u in users if u.department_id == filters.department_id]
        if filters.role is not None:
            users = [u for u in users if u.role == filters.role]
        if filters.is_active is not None:
            users = [u for u in users if u.is_active == filters.is_active]
        return users

    def list_users(self, filters: UserFilter) -> List[dict]:
        return [self.resolver.user(u) for u in self.filter_users(filters)]

    def get_user(self, user_id: str) -> Optional[dict]:
        return self.resolver.user(self.store.users.get_by_id(user_id))

    # Departments

    def list_departments(self) -> List[dict]:
        departments: List[Department] = self.store.departments.get_all()
        return [self.resolver.department(d) for d in departments]

    def get_department(self, department_id: str) -> Optional[dict]:
        return self.resolver.department(self.store.departments.get_by_id(department_id))
