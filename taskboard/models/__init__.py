from .base import Record
from .task import Task, TaskStatus, Priority, HIGH_PRIORITIES
from .project import Project, ProjectStatus
from .user import User
from .department import Department
from .comment import Comment
from .time_entry import TimeEntry
