"""Use-case for social content prompt generation with local fallback."""

from __future__ import annotations

import time

from app.application.services.prompt_builder import (
    PROMPT_PREFIX,
    SYSTEM_PROMPT,
    build_fallback_prompt,
    build_user_prompt,
)
from app.domain.models import CompletionFailure, CompletionResult, CompletionSuccess, PromptRequest
from app.domain.ports import ICompletionClient
from app.shared.setup_logger import LOGGER

logger = LOGGER.get_logger(__name__)

COMPLETION_TEMPERATURE = 0.7
COMPLETION_MAX_TOKENS = 1200

MISSING_FIELDS_ERROR = "Todos os campos são obrigatórios"
FALLBACK_NOTE = "Usando modo de fallback - API de IA temporariamente indisponível"


def _request_completion(client: ICompletionClient | None, req: PromptRequest) -> CompletionResult:
    if client is None:
        return CompletionFailure(reason="completion_not_configured")
    user_prompt = build_user_prompt(req)
    try:
        return client.complete(
            system_prompt=SYSTEM_PROMPT,
            user_prompt=user_prompt,
            temperature=COMPLETION_TEMPERATURE,
            max_tokens=COMPLETION_MAX_TOKENS,
        )
    except Exception as exc:
        return CompletionFailure(reason=f"completion_exception:{exc}")


def execute(client: ICompletionClient | None, req: PromptRequest) -> tuple[dict, int]:
    missing = req.missing_required_fields()
    if missing:
        logger.info("[prompt] validation_failed missing=%s", ",".join(missing))
        return {"error": MISSING_FIELDS_ERROR}, 400

    t0 = time.time()
    result = _request_completion(client, req)
    latency_ms = int((time.time() - t0) * 1000)

    if isinstance(result, CompletionSuccess) and result.text:
        logger.info(
            "[prompt] completion_ok model=%s platform=%s latency_ms=%s",
            result.model,
            req.platform,
            latency_ms,
        )
        return (
            {
                "prompt": f"{PROMPT_PREFIX}{result.text}",
                "success": True,
                "platform": req.platform,
                "logo": req.has_logo,
                "referenceImage": req.has_reference_image,
                "customText": req.has_custom_text,
            },
            200,
        )

    reason = result.reason if isinstance(result, CompletionFailure) else "completion_empty_content"
    logger.warning(
        "[prompt] completion_failed reason=%s platform=%s latency_ms=%s",
        reason,
        req.platform,
        latency_ms,
    )
    return (
        {
            "prompt": build_fallback_prompt(req),
            "success": True,
            "note": FALLBACK_NOTE,
        },
        200,
    )
