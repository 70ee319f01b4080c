"""Mock client for chat completions (offline development)."""

from collections import deque

from app.domain.models import CompletionFailure, CompletionSuccess
from app.domain.ports import ICompletionClient

MAX_RECORDED_CALLS = 50

class CompletionMockClient(ICompletionClient):
    def __init__(self, settings=None, fail_reason: str | None = None):
        self.settings = settings
        self.fail_reason = fail_reason
        # o container mantém um único mock por processo; guarda só as últimas chamadas
        self.calls: deque = deque(maxlen=MAX_RECORDED_CALLS)

    def complete(self, system_prompt: str, user_prompt: str, temperature: float, max_tokens: int):
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "temperature": temperature,
                "max_tokens": max_tokens,
            }
        )
        if self.fail_reason:
            return CompletionFailure(reason=self.fail_reason)
        lines = [l.strip() for l in user_prompt.splitlines() if l.strip()]
        return CompletionSuccess(
            text="[MOCK] " + " | ".join(lines[:6]),
            model="mock",
        )
