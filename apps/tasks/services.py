"""
Task services.

All persistence and validation for the Task resource lives here; the
router in api.py only maps results onto HTTP responses.
"""
import logging
import re
from typing import Dict, Optional, Union

from django.core.exceptions import ValidationError

from .dtos import TaskIn, TaskPage
from .models import Task, DEFAULT_STATUS

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_LEADING_INT = re.compile(r'\s*[+-]?\d+')


class TaskValidationError(Exception):
    """Raised when a task fails model validation. Carries field -> message."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__(f"Invalid task: {', '.join(sorted(errors))}")


def validate_task(task: Task) -> None:
    """
    Run model validation and collapse Django's message lists
    to one message per field.
    """
    try:
        task.full_clean()
    except ValidationError as e:
        # Last message wins when a field has several.
        errors = {field: messages[-1] for field, messages in e.message_dict.items()}
        logger.info(f"Task validation failed on fields: {sorted(errors)}")
        raise TaskValidationError(errors) from e


def _apply_full(task: Task, payload: TaskIn) -> None:
    task.title = payload.title if payload.title is not None else ''
    task.description = payload.description
    task.status = payload.status if payload.status is not None else DEFAULT_STATUS


def create_task(payload: TaskIn) -> Task:
    task = Task()
    _apply_full(task, payload)
    validate_task(task)
    task.save()
    logger.info(f"Created task {task.id}")
    return task


def coerce_int(value: Union[int, str, None], default: int) -> int:
    """
    Lenient integer parsing for query strings.

    None means "not given" and yields the default. Otherwise the leading
    integer is used ("12abc" -> 12, "1.5" -> 1) and anything without one
    becomes 0, leaving the caller's clamps to decide.
    """
    if value is None:
        return default
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(value)
    return int(match.group()) if match else 0


def list_tasks(limit: Union[int, str, None] = DEFAULT_LIMIT, page: Union[int, str, None] = 1) -> TaskPage:
    """
    Return one page of tasks, newest first.

    limit is clamped to [1, MAX_LIMIT] and page floored at 1. A page past
    the end yields an empty window, never an error.
    """
    limit = max(1, min(coerce_int(limit, DEFAULT_LIMIT), MAX_LIMIT))
    page = max(1, coerce_int(page, 1))
    offset = (page - 1) * limit

    total = Task.objects.count()
    tasks = []
    # Huge offsets overflow the database's integer type; skip the query.
    if offset < total:
        tasks = list(Task.objects.order_by('-created_at', '-id')[offset:offset + limit])

    return TaskPage(tasks=tasks, page=page, limit=limit, total=total)


def get_task(task_id: int) -> Optional[Task]:
    try:
        return Task.objects.get(id=task_id)
    except Task.DoesNotExist:
        return None


def update_task(task_id: int, payload: TaskIn, partial: bool = False) -> Optional[Task]:
    """
    Replace (PUT) or patch (PATCH) a task.

    A full update resets omitted fields to their create defaults. A partial
    update only touches keys present in the request body; an explicit null
    counts as present. Returns None if the task does not exist.
    """
    task = get_task(task_id)
    if task is None:
        return None

    if partial:
        for attr, value in payload.dict(exclude_unset=True).items():
            setattr(task, attr, value)
    else:
        _apply_full(task, payload)

    # Raises before save, so a rejected update never reaches the database.
    validate_task(task)
    task.save()
    logger.info(f"Updated task {task.id} ({'PATCH' if partial else 'PUT'})")
    return task


def delete_task(task_id: int) -> bool:
    deleted, _ = Task.objects.filter(id=task_id).delete()
    if deleted:
        logger.info(f"Deleted task {task_id}")
    return bool(deleted)
