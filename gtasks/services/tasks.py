from gtasks.client import TasksClient
from gtasks.exceptions import InvalidArgumentError
from gtasks.models.common import parse_resource
from gtasks.models.tasks import InsertOptions, Task, TaskOptions, Tasks

READ_ONLY_ON_UPDATE = {"updated"}


def _tasks_path(tasklist_id: str, *rest: str) -> tuple[str, ...]:
    if not tasklist_id:
        raise InvalidArgumentError("tasklist_id cannot be empty")
    return ("lists", tasklist_id, *rest)


def _task_path(tasklist_id: str, task_id: str, *rest: str) -> tuple[str, ...]:
    if not task_id:
        raise InvalidArgumentError("task_id cannot be empty")
    return _tasks_path(tasklist_id, "tasks", task_id, *rest)


def list_tasks(
    client: TasksClient,
    tasklist_id: str,
    options: TaskOptions | None = None,
    page_token: str | None = None,
) -> Tasks | None:
    """Return one page of tasks in a task list. Use '@default' for the user's default list.

    Pagination is left to the caller: pass `next_page_token` back as `page_token`.
    """
    if page_token is not None:
        options = (options or TaskOptions()).model_copy(update={"page_token": page_token})
    data = client.request("GET", _tasks_path(tasklist_id, "tasks"), options=options)
    return parse_resource(Tasks, data)


def get_task(client: TasksClient, tasklist_id: str, task_id: str) -> Task | None:
    """Return the specified task."""
    data = client.request("GET", _task_path(tasklist_id, task_id))
    return parse_resource(Task, data)


def insert_task(
    client: TasksClient,
    tasklist_id: str,
    task: Task,
    options: InsertOptions | None = None,
) -> Task | None:
    """Create a new task in a task list, optionally under `options.parent` after `options.previous`."""
    data = client.request("POST", _tasks_path(tasklist_id, "tasks"), options=options, body=task.to_body())
    return parse_resource(Task, data)


def update_task(client: TasksClient, tasklist_id: str, task_id: str, task: Task) -> Task | None:
    """Replace the specified task. The read-only `updated` timestamp is not sent."""
    body = task.to_body(exclude=READ_ONLY_ON_UPDATE)
    data = client.request("PUT", _task_path(tasklist_id, task_id), body=body)
    return parse_resource(Task, data)


def patch_task(client: TasksClient, tasklist_id: str, task_id: str, task: Task) -> Task | None:
    """Update only the fields set on `task`."""
    data = client.request("PATCH", _task_path(tasklist_id, task_id), body=task.to_body())
    return parse_resource(Task, data)


def delete_task(client: TasksClient, tasklist_id: str, task_id: str) -> None:
    """Delete the specified task from the task list."""
    client.request("DELETE", _task_path(tasklist_id, task_id))


def clear_tasks(client: TasksClient, tasklist_id: str) -> None:
    """Clear all completed tasks from a task list.

    Cleared tasks are marked hidden and no longer returned by default when listing.
    """
    client.request("POST", _tasks_path(tasklist_id, "clear"))


def move_task(
    client: TasksClient,
    tasklist_id: str,
    task_id: str,
    options: InsertOptions | None = None,
) -> Task | None:
    """Move a task under a new parent and/or after another sibling.

    Without options the task moves to the first position at the top level.
    """
    data = client.request("POST", _task_path(tasklist_id, task_id, "move"), options=options)
    return parse_resource(Task, data)
