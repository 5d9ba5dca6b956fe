# gamedev_tasks/services/pomodoro.py
from sqlalchemy.orm import Session
from typing import Optional
import logging

from gamedev_tasks.core.constants import DEFAULT_POMODORO_SETTINGS
from gamedev_tasks.core.exceptions import TaskNotFound, TimeLogNotFound
from gamedev_tasks.crud.settings import get_settings
from gamedev_tasks.crud.time_log import start_time_tracking, stop_time_tracking, get_active_time_log
from gamedev_tasks.schemas.pomodoro import PomodoroMode, PomodoroState, PomodoroPhase

logger = logging.getLogger("GameDevTasks.Pomodoro")

class PomodoroCycle:
    """
    Цикл Pomodoro: work -> shortBreak/longBreak -> work ...

    Сам таймер тикает на клиенте; здесь только переходы между фазами.
    Если цикл привязан к задаче (state.task_id), вход в фазу work запускает
    учёт времени по задаче, а завершение work его останавливает.
    """

    def __init__(self, pomodoro_settings: Optional[dict] = None, state: Optional[PomodoroState] = None):
        self.config = {**DEFAULT_POMODORO_SETTINGS, **(pomodoro_settings or {})}
        self.state = state.model_copy() if state else PomodoroState()

    @classmethod
    def from_settings(cls, db: Session, state: Optional[PomodoroState] = None) -> "PomodoroCycle":
        return cls(get_settings(db).pomodoro_settings, state)

    def duration_seconds(self, mode: Optional[PomodoroMode] = None) -> int:
        mode = mode or self.state.mode
        minutes = {
            "work": self.config["workDuration"],
            "shortBreak": self.config["breakDuration"],
            "longBreak": self.config["longBreakDuration"],
        }[mode]
        return minutes * 60

    def phase(self) -> PomodoroPhase:
        return PomodoroPhase(**self.state.model_dump(), duration_seconds=self.duration_seconds())

    def next_mode(self) -> PomodoroMode:
        """
        Режим, который последует за текущим, если фазу довести до конца.
        """
        if self.state.mode != "work":
            return "work"
        count = self.state.completed_pomodoros + 1
        return "longBreak" if count % self.config["longBreakInterval"] == 0 else "shortBreak"

    def start(self, db: Optional[Session] = None, user_id: Optional[str] = None) -> PomodoroPhase:
        """
        Запускает текущую фазу (для work — вместе с учётом времени по задаче).
        """
        if self.state.mode == "work":
            self._start_tracking(db, user_id)
        return self.phase()

    def complete_phase(self, db: Optional[Session] = None, user_id: Optional[str] = None) -> PomodoroPhase:
        """
        Фаза доиграна до конца: счётчик помидоров растёт после work,
        затем переход в следующий режим.
        """
        next_mode = self.next_mode()
        if self.state.mode == "work":
            self._stop_tracking(db, user_id)
            self.state.completed_pomodoros += 1
            logger.info(f"Pomodoro #{self.state.completed_pomodoros} completed, next: {next_mode}")
        self.state.mode = next_mode
        return self.start(db, user_id)

    def switch_mode(
        self, mode: PomodoroMode, db: Optional[Session] = None, user_id: Optional[str] = None
    ) -> PomodoroPhase:
        """
        Ручное переключение режима; счётчик не меняется, прерванный work закрывает учёт времени.
        """
        if self.state.mode == "work" and mode != "work":
            self._stop_tracking(db, user_id)
        self.state.mode = mode
        return self.start(db, user_id)

    def _start_tracking(self, db: Optional[Session], user_id: Optional[str]) -> None:
        if db is None or self.state.task_id is None or self.state.time_log_id is not None:
            return
        running = get_active_time_log(db, self.state.task_id)
        if running:
            self.state.time_log_id = running.id
            return
        time_log = start_time_tracking(db, self.state.task_id, "Pomodoro", user_id=user_id)
        if time_log is None:
            raise TaskNotFound(f"Task {self.state.task_id} not found")
        self.state.time_log_id = time_log.id

    def _stop_tracking(self, db: Optional[Session], user_id: Optional[str]) -> None:
        if db is None or self.state.time_log_id is None:
            return
        time_log = stop_time_tracking(db, self.state.time_log_id, user_id=user_id)
        if time_log is None:
            raise TimeLogNotFound(f"Time log {self.state.time_log_id} not found")
        self.state.time_log_id = None
