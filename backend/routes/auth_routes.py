from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import (
    create_access_token,
    get_jwt,
    get_jwt_identity,
    jwt_required,
    verify_jwt_in_request,
)
from pymongo.errors import DuplicateKeyError
from werkzeug.security import check_password_hash, generate_password_hash

from backend.models.user_model import Caller, User
from backend.utils.db import get_db, to_object_id


auth_bp = Blueprint("auth", __name__)


def current_caller():
    """Caller for this request, or None when no valid token was sent."""
    verify_jwt_in_request(optional=True)
    user_id = get_jwt_identity()
    if user_id is None:
        return None
    return Caller(user_id=user_id, username=get_jwt().get("username"))


def _issue_token(user):
    return create_access_token(identity=user.id, additional_claims={"username": user.username})


def _read_credentials():
    payload = request.get_json(silent=True) or {}
    username = payload.get("username")
    password = payload.get("password")
    if not isinstance(username, str) or not isinstance(password, str):
        return "", ""
    return username.strip(), password


@auth_bp.post("/register")
def register():
    username, password = _read_credentials()
    if not username or not password:
        return jsonify(error="invalid-input", message="Username and password are required"), 400

    db = get_db()
    if db.users.find_one({"username": username}):
        return jsonify(error="username-taken", message="Username already exists"), 409

    user = User(username=username, password_hash=generate_password_hash(password))
    try:
        res = db.users.insert_one(user.to_document())
    except DuplicateKeyError:
        return jsonify(error="username-taken", message="Username already exists"), 409
    user.id = str(res.inserted_id)
    current_app.logger.info("Registered user %s (%s)", user.username, user.id)
    return jsonify(user=user.to_json(), access_token=_issue_token(user)), 201


@auth_bp.post("/login")
def login():
    username, password = _read_credentials()
    if not username or not password:
        return jsonify(error="invalid-input", message="Username and password are required"), 400

    doc = get_db().users.find_one({"username": username})
    if doc is None or not check_password_hash(doc["password_hash"], password):
        current_app.logger.warning("Failed login for %s", username)
        return jsonify(error="not-authorized", message="Invalid username or password"), 401

    user = User.from_document(doc)
    return jsonify(user=user.to_json(), access_token=_issue_token(user)), 200


@auth_bp.get("/me")
@jwt_required()
def me():
    oid = to_object_id(get_jwt_identity())
    doc = get_db().users.find_one({"_id": oid}) if oid is not None else None
    if doc is None:
        return jsonify(error="not-found", message="User not found"), 404
    return jsonify(user=User.from_document(doc).to_json()), 200
