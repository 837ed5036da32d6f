"""Flask application for the hand checker."""

from flask import Flask, jsonify

from web.config import Config
from web.routes import checker_bp


def create_app(config_class=Config) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.ensure_ascii = app.config["JSON_AS_ASCII"]

    app.register_blueprint(checker_bp)

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"success": False, "error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"success": False, "error": "Method not allowed"}), 405

    @app.route("/health")
    def health():
        return jsonify({"success": True, "status": "ok"})

    return app
