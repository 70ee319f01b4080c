"""Ports implemented by infrastructure adapters."""

from abc import ABC, abstractmethod

from app.domain.models import CompletionResult


class ICompletionClient(ABC):
    @abstractmethod
    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> CompletionResult:
        """Returns CompletionSuccess or CompletionFailure; never raises for provider errors."""
