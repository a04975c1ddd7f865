import logging
import os

from flask import Flask, jsonify, send_from_directory
from flask.logging import default_handler
from flask_cors import CORS
from flask_jwt_extended import JWTManager

from backend.services.errors import TaskError


def create_app(config_object="backend.config.Config", mongo_client=None):
    package_logger = logging.getLogger("backend")
    if default_handler not in package_logger.handlers:
        package_logger.addHandler(default_handler)

    # Point Flask to frontend folder for static files
    frontend_dir = os.path.join(os.path.dirname(os.path.dirname(__file__)), "frontend")
    app = Flask(__name__,
                static_folder=frontend_dir,
                static_url_path="")
    app.config.from_object(config_object)
    # app.logger is "backend.app"; services log under "backend.services.*"
    package_logger.setLevel(str(app.config.get("LOG_LEVEL", "INFO")).upper())

    # Core extensions
    CORS(app, resources={r"/api/*": {"origins": "*"}})
    jwt = JWTManager(app)

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify(error="not-authorized", message=reason), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify(error="not-authorized", message=reason), 401

    @jwt.expired_token_loader
    def expired_token(_header, _payload):
        return jsonify(error="not-authorized", message="Token has expired"), 401

    # Mongo client and teardown hooks
    from backend.utils.db import init_app as init_db, ping

    init_db(app, client=mongo_client)

    # Register blueprints
    from backend.routes.auth_routes import auth_bp
    from backend.routes.method_routes import methods_bp
    from backend.routes.task_routes import tasks_bp

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(tasks_bp, url_prefix="/api/tasks")
    app.register_blueprint(methods_bp, url_prefix="/api")

    @app.get("/")
    def index():
        return send_from_directory(app.static_folder, "index.html")

    @app.get("/api/health")
    def health():
        return jsonify(status="ok", service="Simple Todos API", mongo=ping()), 200

    @app.errorhandler(TaskError)
    def task_error(exc):
        return jsonify(error=exc.label, message=str(exc)), exc.status_code

    @app.errorhandler(404)
    def not_found(_):
        return jsonify(error="Not Found"), 404

    @app.errorhandler(500)
    def server_error(_):
        return jsonify(error="Internal Server Error"), 500

    return app


if __name__ == "__main__":
    # Direct run support: python -m backend.app
    create_app().run(
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "5000")),
        debug=os.environ.get("FLASK_DEBUG", "1") == "1",
    )
