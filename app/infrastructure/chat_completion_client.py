"""OpenAI-compatible chat-completion adapter (GLM via Z.ai / BigModel)."""

from __future__ import annotations

import requests

from app.core.settings import Settings
from app.domain.models import CompletionFailure, CompletionResult, CompletionSuccess
from app.domain.ports import ICompletionClient


class ChatCompletionClient(ICompletionClient):
    def __init__(self, settings: Settings):
        self._s = settings
        if not self._s.zai_api_key:
            raise RuntimeError("missing_ZAI_API_KEY")
        self._model = (self._s.completion_model or "glm-4").strip()
        self._url = f"{self._s.zai_base_url}/chat/completions"
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {self._s.zai_api_key}",
                "Content-Type": "application/json",
            }
        )

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> CompletionResult:
        payload = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        try:
            r = self._session.post(self._url, json=payload, timeout=self._s.completion_timeout)
        except requests.RequestException as exc:
            return CompletionFailure(reason=f"completion_request_error:{exc}")

        if not r.ok:
            body = (r.text or "").replace("\n", " ").strip()[:300]
            return CompletionFailure(reason=f"completion_http_{r.status_code}:{body}")

        try:
            data = r.json() or {}
        except ValueError:
            return CompletionFailure(reason="completion_invalid_json")

        choices = data.get("choices") or []
        first = choices[0] if choices and isinstance(choices[0], dict) else {}
        content = (first.get("message") or {}).get("content")
        if not isinstance(content, str) or not content:
            return CompletionFailure(reason="completion_empty_content")

        return CompletionSuccess(text=content, model=data.get("model") or self._model)
