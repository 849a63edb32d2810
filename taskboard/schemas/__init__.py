from .base import CamelModel, NoArgs, IdArgs
from .task import TaskFilter, MyTasksArgs, TaskInput, TaskUpdateInput, CreateTaskArgs, UpdateTaskArgs, TaskConnection, TaskStatisticsArgs, TaskStatistics
from .project import ProjectFilter, ProjectInput, CreateProjectArgs
from .user import UserFilter, UserPerformance
from .comment import CommentInput, CreateCommentArgs
from .time_entry import TimeEntryInput, LogTimeArgs
from .graphql import GraphQLRequest
