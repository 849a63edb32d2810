# taskboard/schemas/comment.py
from typing import List

from pydantic import Field

from taskboard.schemas.base import CamelModel


class CommentInput(CamelModel):
    content: str = Field(min_length=1)
    task_id: str
    # Users mentioned in the comment
    mention_ids: List[str] = Field(default_factory=list)


class CreateCommentArgs(CamelModel):
    input: CommentInput
