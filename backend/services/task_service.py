"""
Task mutations: create, toggle checked, toggle private, delete.

Each operation takes the caller explicitly and the ``tasks`` collection it
writes to. Existence is checked before ownership so a missing id is always
reported as NotFound.
"""
import logging
from datetime import datetime

from backend.models.task_model import Task
from backend.services import guard
from backend.services.errors import InvalidInput, NotFound
from backend.utils.db import to_object_id

logger = logging.getLogger(__name__)


def get_task(tasks, task_id) -> dict:
    oid = to_object_id(task_id)
    doc = tasks.find_one({"_id": oid}) if oid is not None else None
    if doc is None:
        raise NotFound(task_id)
    return doc


def _require_bool(name, value):
    if not isinstance(value, bool):
        raise InvalidInput(f"{name} must be a boolean")


def create_task(tasks, text, caller, now=None) -> str:
    guard.require_caller(caller)
    if not isinstance(text, str) or not text.strip():
        raise InvalidInput("Text is required")
    text = text.strip()

    task = Task(
        text=text,
        owner=caller.user_id,
        username=caller.username,
        created_at=now or datetime.utcnow(),
    )
    res = tasks.insert_one(task.to_document())
    logger.info("addTask %s by %s", res.inserted_id, caller.user_id)
    return str(res.inserted_id)


def set_checked(tasks, task_id, value, caller):
    doc = get_task(tasks, task_id)
    guard.require_modify(doc, caller)
    _require_bool("checked", value)

    tasks.update_one({"_id": doc["_id"]}, {"$set": {"checked": value}})
    logger.info("setChecked %s=%s by %s", task_id, value, caller.user_id if caller else None)


def set_private(tasks, task_id, value, caller):
    doc = get_task(tasks, task_id)
    guard.require_owner(doc, caller)
    _require_bool("private", value)

    tasks.update_one({"_id": doc["_id"]}, {"$set": {"private": value}})
    logger.info("setPrivate %s=%s by %s", task_id, value, caller.user_id)


def delete_task(tasks, task_id, caller):
    doc = get_task(tasks, task_id)
    guard.require_modify(doc, caller)

    tasks.delete_one({"_id": doc["_id"]})
    logger.info("deleteTask %s by %s", task_id, caller.user_id if caller else None)
