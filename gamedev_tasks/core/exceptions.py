# gamedev_tasks/core/exceptions.py

class BaseAppException(Exception):
    """Базовый класс для всех кастомных исключений приложения."""
    def __init__(self, message: str = "App exception"):
        super().__init__(message)

# ==== Валидация ====

class ValidationError(BaseAppException):
    """Общая ошибка валидации."""
    def __init__(self, message: str = "Validation error"):
        super().__init__(message)

class SubtaskValidationError(ValidationError):
    """Ошибка валидации подзадачи (в т.ч. некорректный reorder)."""
    def __init__(self, message: str = "Subtask validation error"):
        super().__init__(message)

class BlockAlreadyExists(ValidationError):
    """Колонка с таким id уже есть (HTTP 409)."""
    def __init__(self, message: str = "Block already exists"):
        super().__init__(message)

class BackupValidationError(ValidationError):
    """Бэкап не удалось разобрать: восстановление отменено целиком."""
    def __init__(self, message: str = "Backup validation error"):
        super().__init__(message)

# ==== NotFound ====

class NotFoundError(BaseAppException):
    """Ошибка отсутствия ресурса."""
    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)

class ProjectNotFound(NotFoundError):
    """Ошибка: проект не найден."""
    def __init__(self, message: str = "Project not found"):
        super().__init__(message)

class TaskNotFound(NotFoundError):
    """Ошибка: задача не найдена."""
    def __init__(self, message: str = "Task not found"):
        super().__init__(message)

class SubtaskNotFound(NotFoundError):
    """Ошибка: подзадача не найдена."""
    def __init__(self, message: str = "Subtask not found"):
        super().__init__(message)

class TimeLogNotFound(NotFoundError):
    """Ошибка: запись учёта времени не найдена."""
    def __init__(self, message: str = "Time log not found"):
        super().__init__(message)

# ==== Хранилище ====

class StorageError(BaseAppException):
    """Сбой движка БД: транзакция откатана, частичных изменений нет."""
    def __init__(self, message: str = "Storage error"):
        super().__init__(message)

# ==== Учёт времени ====

class TimeTrackingError(BaseAppException):
    """Нарушение правил учёта времени (второй открытый таймер, повторный stop)."""
    def __init__(self, message: str = "Time tracking error"):
        super().__init__(message)
