"""Read-time rule restricting private tasks to their owner."""
from pymongo import DESCENDING

SORT_ORDER = [("created_at", DESCENDING), ("_id", DESCENDING)]


def visibility_query(caller):
    public = {"private": {"$ne": True}}
    if caller is None:
        return public
    return {"$or": [public, {"owner": caller.user_id}]}


def is_visible(task, caller) -> bool:
    return not task.get("private") or (caller is not None and task.get("owner") == caller.user_id)


def visible_tasks(tasks, caller, hide_completed=False):
    """Tasks the caller may see, newest first.

    ``tasks`` is the Mongo collection.
    """
    query = visibility_query(caller)
    if hide_completed:
        query = {"$and": [query, {"checked": {"$ne": True}}]}
    return list(tasks.find(query).sort(SORT_ORDER))


def apply_hide_completed(docs, hide_completed):
    """Refine an already-read visible set the way the client does."""
    if not hide_completed:
        return list(docs)
    return [d for d in docs if d.get("checked") is not True]
