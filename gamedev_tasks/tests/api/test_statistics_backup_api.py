from fastapi.testclient import TestClient
from http import HTTPStatus

from gamedev_tasks.models.project import Project as ProjectModel
from gamedev_tasks.models.task import Task as TaskModel


def test_statistics_api(client: TestClient, project: ProjectModel, task: TaskModel):
    client.post(f"/tasks/{task.id}/complete")

    stats = client.get("/statistics/", params={"window_days": 7}).json()

    assert stats["total_projects"] == 1
    assert stats["completed_tasks"] == 1
    assert stats["tasks_by_category"] == {"programming": 1}
    assert len(stats["tasks_by_day"]) == 7
    assert sum(stats["tasks_by_day"].values()) == 1
    assert stats["subtask_stats"] == {"total": 0, "completed": 0}
    assert client.get("/statistics/", params={"window_days": 0}).status_code == HTTPStatus.UNPROCESSABLE_ENTITY

def test_backup_and_restore_api(client: TestClient, project: ProjectModel, task: TaskModel):
    backup = client.get("/backup").json()
    assert [p["name"] for p in backup["projects"]] == ["Space Shooter"]
    assert "timeLogs" in backup and "activityLog" in backup

    client.delete(f"/projects/{project.id}")
    assert client.get("/projects/").json() == []

    response = client.post("/restore", json=backup)
    assert response.status_code == HTTPStatus.OK
    assert [p["id"] for p in client.get("/projects/").json()] == [project.id]
    assert client.get(f"/tasks/{task.id}").json()["title"] == "Implement player controller"

def test_restore_rejects_invalid_backup(client: TestClient, project: ProjectModel):
    response = client.post("/restore", json={"projects": [{"name": "No id"}], "tasks": [], "date": "2024-01-01"})

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert [p["id"] for p in client.get("/projects/").json()] == [project.id]
