import os
from typing import Optional
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


class Settings(BaseModel):
    api_key: Optional[str] = None
    openai_key: Optional[str] = None
    openai_model: str = "gpt-4o"
    cors_origin: str = "http://localhost:5173"
    rate_limit_window_ms: int = 15 * 60 * 1000  # 15 minutes
    rate_limit_max: int = 100
    environment: str = "development"
    redis_url: Optional[str] = None
    port: int = 5000

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def rate_limit(self) -> str:
        """Limit string in slowapi notation, e.g. '100/900 seconds'"""
        window_seconds = max(1, self.rate_limit_window_ms // 1000)
        return f"{self.rate_limit_max}/{window_seconds} seconds"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_key=os.getenv("API_KEY") or None,
            openai_key=os.getenv("OPENAI_KEY") or None,
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o"),
            cors_origin=os.getenv("CORS_ORIGIN", "http://localhost:5173"),
            rate_limit_window_ms=_int_env("RATE_LIMIT_WINDOW_MS", 15 * 60 * 1000),
            rate_limit_max=_int_env("RATE_LIMIT_MAX", 100),
            environment=os.getenv("ENVIRONMENT", "development"),
            redis_url=os.getenv("REDIS_URL") or None,
            port=_int_env("PORT", 5000),
        )


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default
