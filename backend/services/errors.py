"""Errors raised by the task services.

Every error carries a short ``label`` that clients can match on and the HTTP
status the transport layer should answer with.
"""


class TaskError(Exception):
    """Base exception for all task operation failures."""

    label = "error"
    status_code = 400


class Unauthorized(TaskError):
    """No authenticated caller, or the caller may not touch this task."""

    label = "not-authorized"
    status_code = 403

    def __init__(self, message="not-authorized", status_code=None):
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class NotFound(TaskError):
    """Task with given id doesn't exist."""

    label = "not-found"
    status_code = 404

    def __init__(self, task_id):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class InvalidInput(TaskError):
    """Input validation failed."""

    label = "invalid-input"
    status_code = 400
