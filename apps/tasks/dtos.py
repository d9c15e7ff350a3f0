"""DTOs for Tasks app."""
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from ninja import Field, Schema

from .models import Task


@dataclass(frozen=True)
class TaskPage:
    """One window of the task list plus the numbers needed to page through it."""
    tasks: List[Task]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.limit)


class TaskIn(Schema):
    # Every key is optional; PATCH relies on exclude_unset to tell
    # an absent key from an explicit null.
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


class TaskOut(Schema):
    id: int
    title: str
    description: Optional[str] = None
    status: str
    createdAt: datetime = Field(..., alias='created_at')


class PageMetaOut(Schema):
    page: int
    limit: int
    total: int
    totalPages: int


class TaskListOut(Schema):
    meta: PageMetaOut
    data: List[TaskOut]


class ErrorOut(Schema):
    error: str


class ValidationErrorsOut(Schema):
    errors: Dict[str, str]
