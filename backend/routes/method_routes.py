"""
Fixed-name remote methods and the ``tasks`` publication.

Clients call ``POST /api/methods/<name>`` with ``{"params": [...]}``; the
caller comes from the bearer token when one is sent. Authorization is left
to the task services so anonymous calls fail the same way they would there.
"""
from flask import Blueprint, current_app, jsonify, request

from backend.models.task_model import Task
from backend.routes.auth_routes import current_caller
from backend.services import task_service
from backend.services.errors import InvalidInput
from backend.services.visibility import visible_tasks
from backend.utils.db import get_db


methods_bp = Blueprint("methods", __name__)


METHODS = {
    "addTask": (task_service.create_task, 1),
    "setChecked": (task_service.set_checked, 2),
    "setPrivate": (task_service.set_private, 2),
    "deleteTask": (task_service.delete_task, 1),
}


@methods_bp.post("/methods/<name>")
def call_method(name):
    if name not in METHODS:
        return jsonify(error="method-not-found", message=f"Method '{name}' not found"), 404
    func, arity = METHODS[name]

    payload = request.get_json(silent=True) or {}
    params = payload.get("params", [])
    if not isinstance(params, list) or len(params) != arity:
        raise InvalidInput(f"{name} expects {arity} parameter(s)")

    caller = current_caller()
    current_app.logger.debug("method %s params=%r caller=%s", name, params, caller)
    result = func(get_db().tasks, *params, caller)
    return jsonify(result=result), 200


@methods_bp.get("/publications/tasks")
def publish_tasks():
    docs = visible_tasks(get_db().tasks, current_caller())
    return jsonify(items=[Task.from_document(d).to_json() for d in docs]), 200
