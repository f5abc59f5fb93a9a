"""Single entry point for the Google Tasks API: one method per remote operation.

    service = Service.from_token(access_token)
    page = service.list_tasks("@default", TaskOptions(show_completed=False))

Every method makes exactly one request. Errors are raised as the types in
`gtasks.exceptions` and are never retried.
"""

from collections.abc import Callable

import requests

from gtasks.auth import DynamicTokenProvider, StaticTokenProvider, TokenProvider
from gtasks.client import TasksClient
from gtasks.models.tasklists import TaskList, TaskListOptions, TaskLists
from gtasks.models.tasks import InsertOptions, Task, TaskOptions, Tasks
from gtasks.services import tasklists as tasklists_service
from gtasks.services import tasks as tasks_service


class Service:
    def __init__(
        self,
        token_provider: TokenProvider | str | Callable[[], str],
        session: requests.Session | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        self.client = TasksClient(token_provider, session=session, base_url=base_url, timeout=timeout)

    @classmethod
    def from_token(cls, access_token: str, **kwargs) -> "Service":
        """Build a service around a pre-fetched access token."""
        return cls(StaticTokenProvider(access_token), **kwargs)

    @classmethod
    def from_provider(cls, func: Callable[[], str], **kwargs) -> "Service":
        """Build a service that calls `func` for a fresh token on every request."""
        return cls(DynamicTokenProvider(func), **kwargs)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "Service":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- Task Lists ---

    def list_tasklists(
        self, options: TaskListOptions | None = None, page_token: str | None = None
    ) -> TaskLists | None:
        """Return one page of the authenticated user's task lists."""
        return tasklists_service.list_tasklists(self.client, options, page_token)

    def get_tasklist(self, tasklist_id: str) -> TaskList | None:
        return tasklists_service.get_tasklist(self.client, tasklist_id)

    def insert_tasklist(self, tasklist: TaskList) -> TaskList | None:
        return tasklists_service.insert_tasklist(self.client, tasklist)

    def update_tasklist(self, tasklist_id: str, tasklist: TaskList) -> TaskList | None:
        return tasklists_service.update_tasklist(self.client, tasklist_id, tasklist)

    def patch_tasklist(self, tasklist_id: str, tasklist: TaskList) -> TaskList | None:
        return tasklists_service.patch_tasklist(self.client, tasklist_id, tasklist)

    def delete_tasklist(self, tasklist_id: str) -> None:
        tasklists_service.delete_tasklist(self.client, tasklist_id)

    # --- Tasks ---

    def list_tasks(
        self,
        tasklist_id: str,
        options: TaskOptions | None = None,
        page_token: str | None = None,
    ) -> Tasks | None:
        """Return one page of tasks in a task list."""
        return tasks_service.list_tasks(self.client, tasklist_id, options, page_token)

    def get_task(self, tasklist_id: str, task_id: str) -> Task | None:
        return tasks_service.get_task(self.client, tasklist_id, task_id)

    def insert_task(self, tasklist_id: str, task: Task, options: InsertOptions | None = None) -> Task | None:
        return tasks_service.insert_task(self.client, tasklist_id, task, options)

    def update_task(self, tasklist_id: str, task_id: str, task: Task) -> Task | None:
        return tasks_service.update_task(self.client, tasklist_id, task_id, task)

    def patch_task(self, tasklist_id: str, task_id: str, task: Task) -> Task | None:
        return tasks_service.patch_task(self.client, tasklist_id, task_id, task)

    def delete_task(self, tasklist_id: str, task_id: str) -> None:
        tasks_service.delete_task(self.client, tasklist_id, task_id)

    def clear_tasks(self, tasklist_id: str) -> None:
        """Hide all completed tasks in the list."""
        tasks_service.clear_tasks(self.client, tasklist_id)

    def move_task(self, tasklist_id: str, task_id: str, options: InsertOptions | None = None) -> Task | None:
        return tasks_service.move_task(self.client, tasklist_id, task_id, options)
