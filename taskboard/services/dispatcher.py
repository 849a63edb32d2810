# taskboard/services/dispatcher.py
"""
Operation registry and dispatch

An operation is looked up by its exact name, either the root field
(``tasks``) or the client's operation name (``GetTasks``). Variables are
validated into the operation's argument model before its handler runs under
the store lock.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError

from taskboard.database import EntityStore
from taskboard.schemas import (
    CreateCommentArgs, CreateProjectArgs, CreateTaskArgs, IdArgs, LogTimeArgs, MyTasksArgs,
    NoArgs, ProjectFilter, TaskFilter, TaskStatisticsArgs, UpdateTaskArgs, UserFilter,
)
from taskboard.services.mutations import MutationService
from taskboard.services.query_service import QueryService
from taskboard.services.resolver import RelationshipResolver
from taskboard.services.statistics import StatisticsAggregator
from taskboard.utils.dates import utcnow
from taskboard.utils.exceptions import InputValidationError, OperationError, UnknownOperationError

logger = logging.getLogger(__name__)


class OperationKind(str, Enum):
    QUERY = "query"
    MUTATION = "mutation"


class OperationContext:
    """Per-request handles passed to every operation handler"""

    def __init__(self, store: EntityStore, actor_id: str, clock: Callable[[], datetime] = utcnow):
        self.store = store
        self.actor_id = actor_id
        self.clock = clock
        self.resolver = RelationshipResolver(store, clock)
        self.queries = QueryService(store, self.resolver)
        self.statistics = StatisticsAggregator(store, clock)
        self.mutations = MutationService(store, actor_id, clock)


Handler = Callable[[OperationContext, Any], Any]


class Operation:
    def __init__(
        self,
        field: str,
        kind: OperationKind,
        args_model: Type[BaseModel],
        handler: Handler,
        client_name: str,
    ):
        self.field = field
        self.kind = kind
        self.args_model = args_model
        self.handler = handler
        self.client_name = client_name

    def parse_args(self, variables: Optional[Dict[str, Any]]) -> BaseModel:
        try:
            return self.args_model.model_validate(variables or {})
        except ValidationError as e:
            raise InputValidationError.from_pydantic(e)

    def __repr__(self) -> str:
        return f"<Operation {self.kind.value} {self.field}>"


# Handlers

def _tasks(ctx: OperationContext, args: TaskFilter):
    return ctx.queries.query_tasks(args).model_dump(by_alias=True)


def _task(ctx: OperationContext, args: IdArgs):
    return ctx.queries.get_task(args.id)


def _my_tasks(ctx: OperationContext, args: MyTasksArgs):
    return ctx.queries.my_tasks(ctx.actor_id, args.status)


def _overdue_tasks(ctx: OperationContext, args: NoArgs):
    return ctx.queries.overdue_tasks(ctx.clock().date())


def _projects(ctx: OperationContext, args: ProjectFilter):
    return ctx.queries.list_projects(args)


def _project(ctx: OperationContext, args: IdArgs):
    return ctx.queries.get_project(args.id)


def _users(ctx: OperationContext, args: UserFilter):
    return ctx.queries.list_users(args)


def _user(ctx: OperationContext, args: IdArgs):
    return ctx.queries.get_user(args.id)


def _departments(ctx: OperationContext, args: NoArgs):
    return ctx.queries.list_departments()


def _department(ctx: OperationContext, args: IdArgs):
    return ctx.queries.get_department(args.id)


def _task_statistics(ctx: OperationContext, args: TaskStatisticsArgs):
    stats = ctx.statistics.task_statistics(args.project_id, args.user_id, args.date_from, args.date_to)
    return stats.model_dump(by_alias=True)


def _create_task(ctx: OperationContext, args: CreateTaskArgs):
    return ctx.resolver.task(ctx.mutations.create_task(args.input))


def _update_task(ctx: OperationContext, args: UpdateTaskArgs):
    return ctx.resolver.task(ctx.mutations.update_task(args.id, args.input))


def _delete_task(ctx: OperationContext, args: IdArgs):
    return ctx.mutations.delete_task(args.id)


def _create_comment(ctx: OperationContext, args: CreateCommentArgs):
    return ctx.resolver.comment(ctx.mutations.create_comment(args.input))


def _log_time(ctx: OperationContext, args: LogTimeArgs):
    return ctx.resolver.time_entry(ctx.mutations.log_time(args.input))


def _create_project(ctx: OperationContext, args: CreateProjectArgs):
    return ctx.resolver.project(ctx.mutations.create_project(args.input))


_Q = OperationKind.QUERY
_M = OperationKind.MUTATION

OPERATIONS: Tuple[Operation, ...] = (
    Operation("tasks", _Q, TaskFilter, _tasks, "GetTasks"),
    Operation("task", _Q, IdArgs, _task, "GetTask"),
    Operation("myTasks", _Q, MyTasksArgs, _my_tasks, "GetMyTasks"),
    Operation("overdueTasks", _Q, NoArgs, _overdue_tasks, "GetOverdueTasks"),
    Operation("projects", _Q, ProjectFilter, _projects, "GetProjects"),
    Operation("project", _Q, IdArgs, _project, "GetProject"),
    Operation("users", _Q, UserFilter, _users, "GetUsers"),
    Operation("user", _Q, IdArgs, _user, "GetUser"),
    Operation("departments", _Q, NoArgs, _departments, "GetDepartments"),
    Operation("department", _Q, IdArgs, _department, "GetDepartment"),
    Operation("taskStatistics", _Q, TaskStatisticsArgs, _task_statistics, "GetTaskStatistics"),
    Operation("createTask", _M, CreateTaskArgs, _create_task, "CreateTask"),
    Operation("updateTask", _M, UpdateTaskArgs, _update_task, "UpdateTask"),
    Operation("deleteTask", _M, IdArgs, _delete_task, "DeleteTask"),
    Operation("createComment", _M, CreateCommentArgs, _create_comment, "CreateComment"),
    Operation("logTime", _M, LogTimeArgs, _log_time, "LogTime"),
    Operation("createProject", _M, CreateProjectArgs, _create_project, "CreateProject"),
)

OPERATIONS_BY_NAME: Dict[str, Operation] = {}
for _operation in OPERATIONS:
    OPERATIONS_BY_NAME[_operation.field] = _operation
    OPERATIONS_BY_NAME[_operation.client_name] = _operation


def find_operation(name: str) -> Operation:
    operation = OPERATIONS_BY_NAME.get(name)
    if operation is None:
        raise UnknownOperationError(name)
    return operation


def execute(
    store: EntityStore,
    name: str,
    actor_id: str,
    variables: Optional[Dict[str, Any]] = None,
    clock: Callable[[], datetime] = utcnow,
) -> Dict[str, Any]:
    """Run one operation and wrap the outcome in the response envelope

    Operation errors become ``{"errors": [...]}``; anything else propagates
    to the transport as an internal fault.
    """
    try:
        operation = find_operation(name)
        args = operation.parse_args(variables)
        with store.lock:
            ctx = OperationContext(store, actor_id, clock)
            result = operation.handler(ctx, args)
    except UnknownOperationError as e:
        logger.warning(f"Unknown operation requested: {e.operation_name!r}")
        return {"errors": [e.to_dict()]}
    except OperationError as e:
        logger.info(f"Operation {name!r} failed: {e.message}")
        return {"errors": [e.to_dict()]}

    # Mutations are logged at INFO, reads only at DEBUG
    level = logging.INFO if operation.kind == OperationKind.MUTATION else logging.DEBUG
    logger.log(level, f"Ran {operation.kind.value} {operation.field} as user {actor_id}")
    return {"data": {operation.field: result}}
