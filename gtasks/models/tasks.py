from enum import Enum

from pydantic import Field

from gtasks.models.common import Collection, QueryOptions, Resource, Timestamp


class TaskStatus(str, Enum):
    NEEDS_ACTION = "needsAction"
    COMPLETED = "completed"


class TaskLink(Resource):
    link_type: str | None = Field(default=None, alias="type")  # e.g. "email"
    description: str | None = None
    link: str | None = None


class Task(Resource):
    kind: str | None = None  # always "tasks#task"
    id: str | None = None
    etag: str | None = None
    title: str | None = None
    updated: Timestamp | None = None
    self_link: str | None = None
    # Read-only; use move_task to change parent or position
    parent: str | None = None
    position: str | None = None
    notes: str | None = None
    status: TaskStatus | None = None
    # Only the date part is stored by the API
    due: Timestamp | None = None
    completed: Timestamp | None = None
    deleted: bool | None = None
    hidden: bool | None = None
    links: list[TaskLink] | None = None
    web_view_link: str | None = None


class Tasks(Collection[Task]):
    pass


class TaskOptions(QueryOptions):
    """Filters for listing tasks. Absent options fall back to the server defaults."""

    completed_max: Timestamp | None = None
    completed_min: Timestamp | None = None
    due_max: Timestamp | None = None
    due_min: Timestamp | None = None
    max_results: int | None = Field(default=None, ge=1)
    page_token: str | None = None
    show_completed: bool | None = None
    show_deleted: bool | None = None
    show_hidden: bool | None = None
    updated_min: Timestamp | None = None


class InsertOptions(QueryOptions):
    """Placement of a new or moved task. Omit both to place it first at the top level."""

    parent: str | None = None
    previous: str | None = None
