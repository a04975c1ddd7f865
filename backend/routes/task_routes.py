from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from backend.models.task_model import Task
from backend.routes.auth_routes import current_caller
from backend.services import task_service
from backend.services.visibility import visible_tasks
from backend.utils.db import get_db
from backend.views.task_view import build_view, dispatch_event


tasks_bp = Blueprint("tasks", __name__)


def _flag(name):
    return request.args.get(name, "").lower() in ("1", "true", "yes", "on")


@tasks_bp.get("/")
@jwt_required()
def list_tasks():
    docs = visible_tasks(get_db().tasks, current_caller(), hide_completed=_flag("hideCompleted"))
    return jsonify(items=[Task.from_document(d).to_json() for d in docs]), 200


@tasks_bp.get("/view")
@jwt_required()
def task_view():
    caller = current_caller()
    # hideCompleted refines the already-visible set, like the client does
    docs = visible_tasks(get_db().tasks, caller)
    return jsonify(build_view(docs, caller, hide_completed=_flag("hideCompleted"))), 200


@tasks_bp.post("/")
@jwt_required()
def create_task():
    payload = request.get_json(silent=True) or {}
    tasks = get_db().tasks
    task_id = task_service.create_task(tasks, payload.get("text"), current_caller())
    created = Task.from_document(task_service.get_task(tasks, task_id))
    return jsonify(item=created.to_json()), 201


@tasks_bp.put("/<task_id>/checked")
@jwt_required()
def set_checked(task_id):
    payload = request.get_json(silent=True) or {}
    tasks = get_db().tasks
    task_service.set_checked(tasks, task_id, payload.get("checked"), current_caller())
    return jsonify(item=Task.from_document(task_service.get_task(tasks, task_id)).to_json()), 200


@tasks_bp.put("/<task_id>/private")
@jwt_required()
def set_private(task_id):
    payload = request.get_json(silent=True) or {}
    tasks = get_db().tasks
    task_service.set_private(tasks, task_id, payload.get("private"), current_caller())
    return jsonify(item=Task.from_document(task_service.get_task(tasks, task_id)).to_json()), 200


@tasks_bp.delete("/<task_id>")
@jwt_required()
def delete_task(task_id):
    task_service.delete_task(get_db().tasks, task_id, current_caller())
    return jsonify(status="deleted", id=task_id), 200


@tasks_bp.post("/events/<event>")
@tasks_bp.post("/<task_id>/events/<event>")
@jwt_required()
def ui_event(event, task_id=None):
    payload = request.get_json(silent=True) or {}
    outcome = dispatch_event(
        event, get_db().tasks, current_caller(), task_id=task_id, text=payload.get("text")
    )
    return jsonify(outcome), 200
