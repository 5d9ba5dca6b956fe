from fastapi.testclient import TestClient
from http import HTTPStatus

from gamedev_tasks.models.task import Task as TaskModel


def test_initial_phase(client: TestClient):
    phase = client.get("/pomodoro/").json()
    assert phase == {
        "mode": "work",
        "completed_pomodoros": 0,
        "task_id": None,
        "time_log_id": None,
        "duration_seconds": 1500,
    }

def test_complete_and_switch(client: TestClient):
    client.patch("/settings/", json={"pomodoro_settings": {
        "workDuration": 25, "breakDuration": 5, "longBreakDuration": 15, "longBreakInterval": 1,
    }})

    phase = client.post("/pomodoro/complete", json={"mode": "work", "completed_pomodoros": 0}).json()
    assert phase["mode"] == "longBreak"
    assert phase["completed_pomodoros"] == 1
    assert phase["duration_seconds"] == 900

    switched = client.post("/pomodoro/switch", json={**phase, "target": "shortBreak"}).json()
    assert switched["mode"] == "shortBreak"
    assert switched["completed_pomodoros"] == 1

def test_bound_pomodoro_tracks_time(client: TestClient, task: TaskModel):
    started = client.post("/pomodoro/start", json={"mode": "work", "task_id": task.id}).json()
    assert started["time_log_id"] is not None

    finished = client.post("/pomodoro/complete", json=started).json()
    assert finished["mode"] == "shortBreak"
    assert finished["time_log_id"] is None
    logs = client.get(f"/tasks/{task.id}/time-logs").json()
    assert len(logs) == 1
    assert logs[0]["end_time"] is not None

def test_bound_to_missing_task(client: TestClient):
    response = client.post("/pomodoro/start", json={"mode": "work", "task_id": 999})
    assert response.status_code == HTTPStatus.NOT_FOUND
