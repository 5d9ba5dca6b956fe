# gamedev_tasks/api/pomodoro.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from gamedev_tasks.schemas.pomodoro import PomodoroState, PomodoroPhase, PomodoroSwitch
from gamedev_tasks.services.pomodoro import PomodoroCycle
from gamedev_tasks.dependencies import get_db, get_current_user_id

router = APIRouter(prefix="/pomodoro", tags=["Pomodoro"])

@router.get("/", response_model=PomodoroPhase)
def initial_phase(db: Session = Depends(get_db)):
    """
    Начальная фаза (work, 0 помидоров) с длительностью из настроек.
    """
    return PomodoroCycle.from_settings(db).phase()

@router.post("/start", response_model=PomodoroPhase)
def start_phase(
    state: PomodoroState,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    return PomodoroCycle.from_settings(db, state).start(db, user_id)

@router.post("/complete", response_model=PomodoroPhase)
def complete_phase(
    state: PomodoroState,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    """
    Текущая фаза завершена: вернуть следующую.
    """
    return PomodoroCycle.from_settings(db, state).complete_phase(db, user_id)

@router.post("/switch", response_model=PomodoroPhase)
def switch_mode(
    data: PomodoroSwitch,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    state = PomodoroState(**data.model_dump(exclude={"target"}))
    return PomodoroCycle.from_settings(db, state).switch_mode(data.target, db, user_id)
