"""Prompt generation endpoint for social media content."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from app.application.use_cases.generate_prompt import execute as generate_prompt_uc
from app.presentation.http.prompt_request_parser import InvalidRequestBody, parse_prompt_request
from app.shared.setup_logger import LOGGER

bp = Blueprint("prompt", __name__)
logger = LOGGER.get_logger(__name__)


@bp.post("/api/generate-prompt")
def generate_prompt_route():
    c = current_app.container
    try:
        try:
            args = parse_prompt_request(request)
        except InvalidRequestBody as exc:
            logger.info("[prompt] invalid_body content_type=%s", request.content_type)
            return jsonify({"error": str(exc)}), 400

        out, status = generate_prompt_uc(c.completion, args)
        return jsonify(out), status
    except Exception as exc:
        logger.error("[prompt] generate_prompt_exception error=%s", str(exc))
        return jsonify({"error": f"generate_prompt_exception:{exc}"}), 500
