import pytest
from sqlalchemy.orm import Session

from gamedev_tasks.services.pomodoro import PomodoroCycle
from gamedev_tasks.schemas.pomodoro import PomodoroState
from gamedev_tasks.crud.settings import save_settings
from gamedev_tasks.crud.time_log import get_time_log, get_active_time_log
from gamedev_tasks.core.exceptions import TaskNotFound
from gamedev_tasks.models.task import Task as TaskModel


def test_durations_from_defaults():
    cycle = PomodoroCycle()
    assert cycle.duration_seconds("work") == 25 * 60
    assert cycle.duration_seconds("shortBreak") == 5 * 60
    assert cycle.duration_seconds("longBreak") == 15 * 60

def test_cycle_with_long_break_interval():
    cycle = PomodoroCycle({"longBreakInterval": 2})

    modes = []
    for _ in range(5):
        phase = cycle.complete_phase()
        modes.append((phase.mode, phase.completed_pomodoros))

    assert modes == [
        ("shortBreak", 1),
        ("work", 1),
        ("longBreak", 2),
        ("work", 2),
        ("shortBreak", 3),
    ]

def test_switch_mode_keeps_count():
    cycle = PomodoroCycle(state=PomodoroState(mode="work", completed_pomodoros=3))
    phase = cycle.switch_mode("longBreak")
    assert phase.mode == "longBreak"
    assert phase.completed_pomodoros == 3
    assert phase.duration_seconds == 15 * 60

def test_from_settings_uses_stored_durations(db: Session):
    save_settings(db, {"pomodoro_settings": {
        "workDuration": 50, "breakDuration": 10, "longBreakDuration": 20, "longBreakInterval": 4,
    }})
    assert PomodoroCycle.from_settings(db).phase().duration_seconds == 50 * 60

def test_work_phase_tracks_time_on_bound_task(db: Session, task: TaskModel):
    cycle = PomodoroCycle.from_settings(db, PomodoroState(task_id=task.id))

    started = cycle.start(db)
    assert started.time_log_id is not None
    assert get_active_time_log(db, task.id).id == started.time_log_id

    rest = cycle.complete_phase(db)
    assert rest.mode == "shortBreak"
    assert rest.time_log_id is None
    assert get_time_log(db, started.time_log_id).end_time is not None
    assert get_active_time_log(db, task.id) is None

    back_to_work = cycle.complete_phase(db)
    assert back_to_work.mode == "work"
    assert back_to_work.time_log_id not in (None, started.time_log_id)

def test_start_reuses_running_log(db: Session, task: TaskModel):
    first = PomodoroCycle.from_settings(db, PomodoroState(task_id=task.id)).start(db)
    again = PomodoroCycle.from_settings(db, PomodoroState(task_id=task.id)).start(db)
    assert again.time_log_id == first.time_log_id

def test_bound_to_missing_task(db: Session):
    with pytest.raises(TaskNotFound):
        PomodoroCycle.from_settings(db, PomodoroState(task_id=404)).start(db)
