from flask import Blueprint, jsonify, current_app

bp = Blueprint("health", __name__)

@bp.get("/health")
def health():
    c = current_app.container
    return jsonify({
        "ok": True,
        "completion_configured": c.completion is not None,
        "completion_mode": c.completion_mode,
        "model": c.settings.completion_model,
    })
