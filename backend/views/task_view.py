"""
Bindings between the task list UI and the task services.

``build_view`` turns the caller's visible set into what the page renders;
``EVENT_BINDINGS`` maps each UI control to the method it calls and how the
method's arguments are derived from the task the control belongs to.
"""
from backend.models.task_model import Task
from backend.services import task_service
from backend.services.errors import InvalidInput, TaskError
from backend.services.guard import is_owner
from backend.services.visibility import apply_hide_completed


def build_view(docs, caller, hide_completed=False) -> dict:
    docs = list(docs)
    items = []
    for doc in apply_hide_completed(docs, hide_completed):
        item = Task.from_document(doc).to_json()
        item["isOwner"] = is_owner(doc, caller)
        items.append(item)
    return {
        "tasks": items,
        "hideCompleted": bool(hide_completed),
        "incompleteCount": sum(1 for d in docs if d.get("checked") is not True),
    }


def _add_task(tasks, task, caller, text):
    return task_service.create_task(tasks, text, caller)


def _toggle_checked(tasks, task, caller, text):
    task_service.set_checked(tasks, str(task["_id"]), not task.get("checked"), caller)


def _toggle_private(tasks, task, caller, text):
    task_service.set_private(tasks, str(task["_id"]), not task.get("private"), caller)


def _delete(tasks, task, caller, text):
    task_service.delete_task(tasks, str(task["_id"]), caller)


# event name -> (method name, handler)
EVENT_BINDINGS = {
    "submit-new-task": ("addTask", _add_task),
    "toggle-checked": ("setChecked", _toggle_checked),
    "toggle-private": ("setPrivate", _toggle_private),
    "delete": ("deleteTask", _delete),
}


def dispatch_event(event, tasks, caller, task_id=None, text=None) -> dict:
    """Run the method bound to ``event`` and report the outcome.

    Failures come back as ``{"ok": False, "error": label}`` so the page can
    show them instead of dropping them.
    """
    if event not in EVENT_BINDINGS:
        raise InvalidInput(f"Unknown event {event}")
    method, handler = EVENT_BINDINGS[event]
    try:
        task = task_service.get_task(tasks, task_id) if task_id is not None else None
        if task is None and event != "submit-new-task":
            raise InvalidInput(f"{event} needs a task")
        result = handler(tasks, task, caller, text)
    except TaskError as exc:
        return {"ok": False, "method": method, "error": exc.label, "message": str(exc)}
    return {"ok": True, "method": method, "result": result}
