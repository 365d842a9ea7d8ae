"""Custom exceptions for pomotask."""


class PomotaskError(Exception):
    """Base exception for all pomotask errors."""


class ValidationError(PomotaskError):
    """Raised when input is rejected before it reaches the domain core."""


class TaskNotFoundError(ValidationError):
    """Raised when a task id does not match any stored task."""

    def __init__(self, task_id: str):
        super().__init__(f"Task '{task_id}' not found")
        self.task_id = task_id


class StorageError(PomotaskError):
    """Raised when the persistence gateway fails to load, save or remove a key."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key
