import json
from unittest.mock import MagicMock

import pytest
import requests

from gtasks.client import TasksClient
from gtasks.config import get_settings

BASE_URL = "https://www.googleapis.com/tasks/v1"


# --- Canned API responses ---

TASKLIST_API_ITEM = {
    "kind": "tasks#taskList",
    "id": "list123",
    "etag": '"etag-list"',
    "title": "My Tasks",
    "updated": "2025-01-15T10:30:00.000Z",
    "selfLink": f"{BASE_URL}/users/@me/lists/list123",
}

TASKLIST_API_LIST = {
    "kind": "tasks#taskLists",
    "etag": '"etag-lists"',
    "nextPageToken": "page2",
    "items": [TASKLIST_API_ITEM],
}

TASK_API_ITEM = {
    "kind": "tasks#task",
    "id": "task456",
    "etag": '"etag-task"',
    "title": "Buy milk",
    "updated": "2025-01-15T10:30:00.000Z",
    "selfLink": f"{BASE_URL}/lists/list123/tasks/task456",
    "parent": "task000",
    "position": "00000000000000000001",
    "notes": "2% please",
    "status": "completed",
    "due": "2025-01-20T00:00:00.000Z",
    "completed": "2025-01-16T08:00:00.000Z",
    "deleted": False,
    "hidden": True,
    "links": [
        {"type": "email", "description": "Reminder mail", "link": "https://mail.google.com/mail/#all/abc"},
    ],
    "webViewLink": "https://tasks.google.com/task/task456",
}

TASK_API_LIST = {
    "kind": "tasks#tasks",
    "etag": '"etag-tasks"',
    "items": [TASK_API_ITEM],
}

ERROR_API_NOT_FOUND = {
    "error": {
        "code": 404,
        "message": "not found",
        "errors": [{"message": "not found", "domain": "global", "reason": "notFound"}],
        "status": "NOT_FOUND",
    },
}


def make_response(status_code: int = 200, json_body=None, text: str | None = None) -> requests.Response:
    """Build a real requests.Response with the given status and body."""
    resp = requests.Response()
    resp.status_code = status_code
    if json_body is not None:
        text = json.dumps(json_body)
    resp._content = (text or "").encode("utf-8")
    resp.encoding = "utf-8"
    resp.headers["Content-Type"] = "application/json; charset=UTF-8"
    return resp


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_session():
    """requests.Session whose `request` returns an empty 200 unless a test says otherwise."""
    session = MagicMock(spec=requests.Session)
    session.request.return_value = make_response(200, {})
    return session


@pytest.fixture
def client(mock_session):
    """TasksClient with static token "T" over the mocked session."""
    return TasksClient("T", session=mock_session)


def sent_request(mock_session) -> dict:
    """Return method, url and keyword arguments of the last request sent through the mock."""
    call = mock_session.request.call_args
    method, url = call.args
    return {"method": method, "url": url, **call.kwargs}
