from pydantic import Field

from gtasks.models.common import Collection, QueryOptions, Resource, Timestamp


class TaskList(Resource):
    kind: str | None = None  # always "tasks#taskList"
    id: str | None = None
    etag: str | None = None
    title: str | None = None
    updated: Timestamp | None = None
    self_link: str | None = None


class TaskLists(Collection[TaskList]):
    pass


class TaskListOptions(QueryOptions):
    max_results: int | None = Field(default=None, ge=1)
    page_token: str | None = None
