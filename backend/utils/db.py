"""Mongo connection handling for the Flask app.

The client lives on the app (one per process); the database handle is cached
on ``flask.g`` for the duration of a request.
"""
from bson import ObjectId
from bson.errors import InvalidId
from flask import current_app, g
from pymongo import ASCENDING, DESCENDING, MongoClient


def init_app(app, client=None):
    if client is None:
        client = MongoClient(app.config["MONGO_URI"], serverSelectionTimeoutMS=2000)
    app.extensions["mongo_client"] = client
    app.teardown_appcontext(_release_db)

    db = client[app.config["MONGO_DB_NAME"]]
    try:
        ensure_indexes(db)
    except Exception as exc:  # noqa: BLE001
        # The server may be down at boot; requests will surface the failure.
        app.logger.warning("Could not create Mongo indexes: %s", exc)


def ensure_indexes(db):
    db.tasks.create_index([("created_at", DESCENDING), ("_id", DESCENDING)])
    db.tasks.create_index([("owner", ASCENDING)])
    db.users.create_index([("username", ASCENDING)], unique=True)


def get_db():
    if "db" not in g:
        client = current_app.extensions["mongo_client"]
        g.db = client[current_app.config["MONGO_DB_NAME"]]
    return g.db


def _release_db(_=None):
    g.pop("db", None)


def ping():
    """Return True when the Mongo server answers a ping."""
    client = current_app.extensions["mongo_client"]
    try:
        client.admin.command("ping")
        return True
    except Exception as exc:  # noqa: BLE001
        current_app.logger.warning("MongoDB ping failed: %s", exc)
        return False


def to_object_id(value):
    """Parse a hex id; returns None for anything that is not a valid ObjectId."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        return None

