"""pomotask domain models.

Pydantic models for the persisted records (tasks, focus logs, posts,
settings) and the dataclass-based Pomodoro session state.
"""

from .config_models import AppConfig, Settings
from .focus.history import FocusLog
from .post import SNSPost
from .task import Priority, Task, TaskUpdate

__all__ = [
    "AppConfig",
    "FocusLog",
    "Priority",
    "SNSPost",
    "Settings",
    "Task",
    "TaskUpdate",
]
