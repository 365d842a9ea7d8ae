"""pomotask - task list, Pomodoro focus timer and focus statistics."""

__version__ = "0.1.0"
