from __future__ import annotations
from flask import Flask, request
from flask_cors import CORS

from app.core.container import Container
from app.presentation.http.blueprints.health_bp import bp as health_bp
from app.presentation.http.blueprints.prompt_bp import bp as prompt_bp
from app.shared.setup_logger import LOGGER
from app.shared.trace import TRACE_HEADER, get_trace_id, new_trace_id, set_trace_id

def create_app(container: Container | None = None) -> Flask:
    app = Flask(__name__, static_folder=None)
    app.container = container or Container()  # type: ignore
    LOGGER.set_debug(app.container.settings.app_debug)
    CORS(app, origins=app.container.settings.cors_origins)

    @app.before_request
    def _bind_trace_id():
        set_trace_id(new_trace_id(request.headers.get(TRACE_HEADER)))

    @app.after_request
    def _expose_trace_id(resp):
        trace_id = get_trace_id()
        if trace_id:
            resp.headers[TRACE_HEADER] = trace_id
        return resp

    app.register_blueprint(health_bp)
    app.register_blueprint(prompt_bp)
    return app
