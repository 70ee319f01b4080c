from dataclasses import dataclass, field
from app.core.settings import Settings
from app.domain.ports import ICompletionClient
from app.infrastructure.chat_completion_client import ChatCompletionClient
from app.infrastructure.completion_mock_client import CompletionMockClient


@dataclass
class Container:
    settings: Settings = field(default_factory=Settings.load)

    completion: ICompletionClient | None = None

    def __post_init__(self):
        # sem chave e sem mock: o endpoint responde sempre em modo fallback
        if self.settings.completion_mock:
            self.completion = CompletionMockClient(self.settings)
        elif self.settings.zai_api_key:
            self.completion = ChatCompletionClient(self.settings)

    @property
    def completion_mode(self) -> str:
        if isinstance(self.completion, CompletionMockClient):
            return "mock"
        if self.completion is not None:
            return "http"
        return "none"
