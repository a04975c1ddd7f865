"""Ownership checks run before every task mutation."""
import logging

from backend.services.errors import Unauthorized

logger = logging.getLogger(__name__)


def require_caller(caller):
    if caller is None:
        logger.warning("Rejected anonymous caller")
        raise Unauthorized("login required", status_code=401)
    return caller


def is_owner(task, caller) -> bool:
    return caller is not None and task.get("owner") == caller.user_id


def can_modify(task, caller) -> bool:
    """Public tasks are open to any caller; private ones only to their owner."""
    return not task.get("private") or is_owner(task, caller)


def require_owner(task, caller):
    require_caller(caller)
    if not is_owner(task, caller):
        logger.warning(
            "Caller %s is not the owner of task %s",
            caller.user_id,
            task.get("_id"),
        )
        raise Unauthorized()


def require_modify(task, caller):
    if task.get("private"):
        require_caller(caller)
    if not can_modify(task, caller):
        logger.warning(
            "Caller %s may not modify private task %s",
            caller.user_id,
            task.get("_id"),
        )
        raise Unauthorized()
