from fastapi.testclient import TestClient
from http import HTTPStatus

from gamedev_tasks.models.project import Project as ProjectModel
from gamedev_tasks.models.task import Task as TaskModel


def test_subtask_lifecycle(client: TestClient, task: TaskModel):
    subtask = client.post("/subtasks/", json={"task_id": task.id, "title": "Wall jump"}).json()
    assert subtask["order"] == 0
    assert subtask["is_completed"] is False

    toggled = client.patch(f"/subtasks/{subtask['id']}", json={"is_completed": True})
    assert toggled.json()["is_completed"] is True

    assert client.delete(f"/subtasks/{subtask['id']}").status_code == HTTPStatus.OK
    assert client.get(f"/subtasks/{subtask['id']}").status_code == HTTPStatus.NOT_FOUND

def test_subtask_for_missing_task(client: TestClient):
    response = client.post("/subtasks/", json={"task_id": 999, "title": "Orphan"})
    assert response.status_code == HTTPStatus.NOT_FOUND

def test_block_lifecycle(client: TestClient, project: ProjectModel, task: TaskModel):
    block = client.post("/blocks/", json={"id": "qa", "title": "QA", "project_id": project.id}).json()
    assert block["color"] == "#6200EA"
    assert client.post("/blocks/", json={"id": "qa", "title": "Again"}).status_code == HTTPStatus.CONFLICT

    client.patch(f"/tasks/{task.id}", json={"block_id": "qa"})
    assert client.patch("/blocks/qa", json={"title": "Testing"}).json()["title"] == "Testing"

    assert client.delete("/blocks/qa").status_code == HTTPStatus.OK
    assert client.get(f"/tasks/{task.id}").json()["block_id"] is None
    assert client.delete("/blocks/qa").status_code == HTTPStatus.NOT_FOUND

def test_comment_author_from_header(client: TestClient, task: TaskModel):
    response = client.post("/comments/", json={"task_id": task.id, "content": "Ship it"}, headers={"X-User-Id": "jane"})

    assert response.status_code == HTTPStatus.OK
    assert response.json()["created_by"] == "jane"
    comments = client.get(f"/tasks/{task.id}/comments").json()
    assert [c["content"] for c in comments] == ["Ship it"]

    assert client.delete(f"/comments/{comments[0]['id']}").status_code == HTTPStatus.OK
    assert client.get(f"/tasks/{task.id}/comments").json() == []

def test_missing_subtask_error_body(client: TestClient):
    response = client.patch("/subtasks/999", json={"title": "Ghost"})

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.json() == {"detail": "Subtask not found", "error": "SubtaskNotFound"}

def test_duplicate_block_id_error_body(client: TestClient, project: ProjectModel):
    client.post("/blocks/", json={"id": "qa", "title": "QA", "project_id": project.id})

    response = client.post("/blocks/", json={"id": "qa", "title": "Again"})

    assert response.status_code == HTTPStatus.CONFLICT
    assert response.json()["error"] == "BlockAlreadyExists"
    assert [b["title"] for b in client.get(f"/projects/{project.id}/blocks").json()] == ["QA"]
