"""
Configuration management for the img2ggb backend.
"""

from pydantic_settings import BaseSettings
from typing import List, Optional


# Origins that are always trusted, regardless of TRUSTED_ORIGINS
DEFAULT_TRUSTED_ORIGINS = [
    "http://localhost:*",
    "http://127.0.0.1:*",
    "https://*.workers.dev",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Keys
    ai_api_key: Optional[str] = None

    # "true" forces demo output even when a key is configured; any other value is ignored
    test_mode: str = ""

    # Comma-separated origin patterns appended to DEFAULT_TRUSTED_ORIGINS
    trusted_origins: str = ""

    # LLM Settings (OpenAI-compatible endpoint)
    ai_base_url: str = "https://dashscope.aliyuncs.com/compatible-mode/v1"
    ocr_model: str = "qwen3-vl-plus"
    codegen_model: str = "deepseek-r1"

    # Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    class Config:
        # Look for .env in current directory, then parent directory
        env_file = [".env", "../.env"]
        case_sensitive = False
        extra = "ignore"

    @property
    def demo_mode(self) -> bool:
        """True when the provider must not be called (no key, or test mode)."""
        return not self.ai_api_key or self.test_mode.strip().lower() == "true"

    def trusted_origin_list(self) -> List[str]:
        """Get built-in trusted origins followed by the configured ones."""
        configured = [o.strip() for o in self.trusted_origins.split(",")]
        return DEFAULT_TRUSTED_ORIGINS + [o for o in configured if o]


def get_settings() -> Settings:
    """Get application settings (read fresh for every request)."""
    return Settings()
