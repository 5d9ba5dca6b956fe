# gamedev_tasks/core/constants.py
from typing import Literal

# === ПЕРЕЧИСЛЕНИЯ ДОМЕНА ===

ProjectPhase = Literal["pre-production", "production", "post-production"]

TaskStatus = Literal["not-started", "in-progress", "completed"]

TaskPriority = Literal["high", "medium", "low"]

TaskCategory = Literal["programming", "design", "audio", "marketing", "other"]

GameEngine = Literal["unity", "unreal", "godot", "gamemaker", "custom", "other"]

DevelopmentTool = Literal["blender", "maya", "photoshop", "illustrator", "audacity", "fmod", "substance", "other"]

NotificationType = Literal["deadline", "reminder", "update", "completion"]

# Sync-очередь
SyncEntityType = Literal["project", "task", "subtask", "block", "comment", "timeLog"]
SyncAction = Literal["create", "update", "delete"]

DEFAULT_COLOR = "#6200EA"

# Значения по умолчанию для вложенных настроек
DEFAULT_WIDGET_SETTINGS = {"showCompleted": False, "maxItems": 5, "sortBy": "deadline"}
DEFAULT_POMODORO_SETTINGS = {
    "workDuration": 25,
    "breakDuration": 5,
    "longBreakDuration": 15,
    "longBreakInterval": 4,
}
