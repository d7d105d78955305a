"""
Relay settings loaded from environment variables.

Keep the OpenAI credential and completion parameters centralized here.
"""
import os
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, Field

PLACEHOLDER_API_KEY = "your_openai_api_key_here"


class Settings(BaseModel):
    """Completion relay configuration"""
    openai_api_key: Optional[str] = Field(default=None, repr=False)
    openai_api_url: str = "https://api.openai.com"
    model: str = "gpt-3.5-turbo"
    temperature: float = 0.7
    max_tokens: int = 500
    request_timeout: float = 30.0
    app_env: str = "development"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        # VITE_ prefix is what the browser build reads; accept it as a fallback
        api_key = os.getenv("OPENAI_API_KEY") or os.getenv("VITE_OPENAI_API_KEY")
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            openai_api_key=api_key,
            openai_api_url=os.getenv("OPENAI_API_URL", "https://api.openai.com"),
            model=os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"),
            temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.7")),
            max_tokens=int(os.getenv("OPENAI_MAX_TOKENS", "500")),
            request_timeout=float(os.getenv("OPENAI_TIMEOUT", "30.0")),
            app_env=os.getenv("APP_ENV", "development"),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() in {"dev", "development", "local"}

    def api_key_configured(self) -> bool:
        """Check if the OpenAI API key is present and not the template value"""
        if not self.openai_api_key:
            return False
        api_key = self.openai_api_key.strip()
        if not api_key or api_key == PLACEHOLDER_API_KEY:
            return False
        return True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
