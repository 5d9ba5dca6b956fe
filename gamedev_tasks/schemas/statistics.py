# gamedev_tasks/schemas/statistics.py
from pydantic import BaseModel, Field
from typing import Dict

class SubtaskStats(BaseModel):
    total: int = 0
    completed: int = 0

class StatisticsRead(BaseModel):
    """
    StatisticsRead — агрегаты по всем таблицам, пересчитываются на каждый запрос.
    """
    total_projects: int
    completed_tasks: int
    in_progress_tasks: int
    not_started_tasks: int
    tasks_by_category: Dict[str, int] = Field(default_factory=dict, description="Категория -> число задач")
    tasks_by_day: Dict[str, int] = Field(default_factory=dict, description="YYYY-MM-DD -> завершено задач")
    total_tracked_seconds: int = Field(0, description="Сумма по закрытым интервалам")
    avg_completion_time_hours: float = Field(0, description="Среднее время от создания до завершения")
    subtask_stats: SubtaskStats = Field(default_factory=SubtaskStats)
