from gtasks.client import TasksClient
from gtasks.exceptions import InvalidArgumentError
from gtasks.models.common import parse_resource
from gtasks.models.tasklists import TaskList, TaskListOptions, TaskLists

LISTS_PATH = ("users", "@me", "lists")


def _tasklist_path(tasklist_id: str) -> tuple[str, ...]:
    if not tasklist_id:
        raise InvalidArgumentError("tasklist_id cannot be empty")
    return (*LISTS_PATH, tasklist_id)


def list_tasklists(
    client: TasksClient,
    options: TaskListOptions | None = None,
    page_token: str | None = None,
) -> TaskLists | None:
    """Return one page of the authenticated user's task lists.

    Pass the returned `next_page_token` back as `page_token` to fetch the next page.
    """
    if page_token is not None:
        options = (options or TaskListOptions()).model_copy(update={"page_token": page_token})
    data = client.request("GET", LISTS_PATH, options=options)
    return parse_resource(TaskLists, data)


def get_tasklist(client: TasksClient, tasklist_id: str) -> TaskList | None:
    """Return the authenticated user's specified task list."""
    data = client.request("GET", _tasklist_path(tasklist_id))
    return parse_resource(TaskList, data)


def insert_tasklist(client: TasksClient, tasklist: TaskList) -> TaskList | None:
    """Create a new task list and add it to the authenticated user's task lists."""
    data = client.request("POST", LISTS_PATH, body=tasklist.to_body())
    return parse_resource(TaskList, data)


def update_tasklist(client: TasksClient, tasklist_id: str, tasklist: TaskList) -> TaskList | None:
    """Replace the specified task list with `tasklist`."""
    data = client.request("PUT", _tasklist_path(tasklist_id), body=tasklist.to_body())
    return parse_resource(TaskList, data)


def patch_tasklist(client: TasksClient, tasklist_id: str, tasklist: TaskList) -> TaskList | None:
    """Update only the fields set on `tasklist`."""
    data = client.request("PATCH", _tasklist_path(tasklist_id), body=tasklist.to_body())
    return parse_resource(TaskList, data)


def delete_tasklist(client: TasksClient, tasklist_id: str) -> None:
    """Delete the specified task list."""
    client.request("DELETE", _tasklist_path(tasklist_id))
