"""
Task API endpoints.

CRUD over the Task resource. Authentication happens earlier, in
ApiKeyMiddleware, so every handler here can assume a valid key.
"""
from typing import Optional
from django.http import HttpRequest
from ninja import Body, Router

from .dtos import TaskIn, TaskOut, TaskListOut, ErrorOut, ValidationErrorsOut
from .services import (
    TaskValidationError,
    create_task,
    delete_task,
    get_task,
    list_tasks,
    update_task,
)

router = Router(tags=["Tasks"])

NOT_FOUND = {"error": "Task not found"}


@router.post("", response={201: TaskOut, 422: ValidationErrorsOut})
def create_task_api(request: HttpRequest, payload: TaskIn = Body(None)):
    """
    Create a task.

    Missing title becomes "" (and fails validation); missing status becomes "open".
    """
    try:
        task = create_task(payload if payload is not None else TaskIn())
    except TaskValidationError as e:
        return 422, {"errors": e.errors}
    return 201, task


@router.get("", response=TaskListOut)
def list_tasks_api(request: HttpRequest, limit: Optional[str] = None, page: Optional[str] = None):
    """
    List tasks, newest first.

    Query Parameters:
    - limit: page size, clamped to 1..100 (default 10)
    - page: 1-based page number, floored at 1 (default 1)

    Values are parsed leniently: a non-numeric value counts as 0 and goes
    through the same clamps, so listing never fails on bad input.
    """
    result = list_tasks(limit=limit, page=page)
    return {
        "meta": {
            "page": result.page,
            "limit": result.limit,
            "total": result.total,
            "totalPages": result.total_pages,
        },
        "data": result.tasks,
    }


@router.get("/{task_id}", response={200: TaskOut, 404: ErrorOut})
def get_task_api(request: HttpRequest, task_id: int):
    task = get_task(task_id)
    if task is None:
        return 404, NOT_FOUND
    return 200, task


@router.api_operation(["PUT", "PATCH"], "/{task_id}", response={200: TaskOut, 404: ErrorOut, 422: ValidationErrorsOut})
def update_task_api(request: HttpRequest, task_id: int, payload: TaskIn = Body(None)):
    """
    Update a task.

    PUT replaces every field (omitted ones fall back to create defaults).
    PATCH only overwrites keys present in the body.
    """
    try:
        task = update_task(task_id, payload if payload is not None else TaskIn(), partial=request.method == "PATCH")
    except TaskValidationError as e:
        return 422, {"errors": e.errors}
    if task is None:
        return 404, NOT_FOUND
    return 200, task


@router.delete("/{task_id}", response={204: None, 404: ErrorOut})
def delete_task_api(request: HttpRequest, task_id: int):
    if not delete_task(task_id):
        return 404, NOT_FOUND
    return 204, None
