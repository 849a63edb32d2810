# taskboard/models/comment.py
from datetime import datetime
from typing import List

from pydantic import Field

from taskboard.models.base import Record


class Comment(Record):
    content: str
    author_id: str
    task_id: str
    mention_ids: List[str] = Field(default_factory=list)
    created_at: datetime
    is_edited: bool = False
