import os
from dataclasses import dataclass, field

@dataclass(frozen=True)
class Settings:
    base_dir: str

    zai_api_key: str | None
    zai_base_url: str
    completion_model: str
    completion_timeout: int
    completion_mock: bool

    app_host: str
    app_port: int
    app_debug: bool

    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @staticmethod
    def load() -> "Settings":
        base = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        root = os.path.abspath(os.path.join(base, ".."))

        origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

        return Settings(
            base_dir=root,
            zai_api_key=(os.getenv("ZAI_API_KEY") or "").strip() or None,
            zai_base_url=os.getenv("ZAI_BASE_URL", "https://open.bigmodel.cn/api/paas/v4").rstrip("/"),
            completion_model=os.getenv("COMPLETION_MODEL", "glm-4"),
            completion_timeout=int(os.getenv("COMPLETION_TIMEOUT", "60")),
            completion_mock=os.getenv("COMPLETION_MOCK", "false").lower() == "true",
            app_host=os.getenv("APP_HOST", "127.0.0.1"),
            app_port=int(os.getenv("APP_PORT", "5001")),
            app_debug=os.getenv("APP_DEBUG", "false").lower() == "true",
            cors_origins=origins or ["*"],
        )
