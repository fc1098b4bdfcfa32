import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

_LOGGING_CONFIGURED = False


def _env_list(name: str, default: str = "") -> tuple[str, ...]:
    raw = os.getenv(name, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Redirect target after reopening an account
    web_url: str = os.getenv("WEB_URL", "http://localhost:3000")
    login_page: str = os.getenv("LOGIN_PAGE", "/login")

    # Routing
    api_version: str = os.getenv("API_VERSION", "v1")

    # Cache
    cache_backend: str = os.getenv("CACHE_BACKEND", "memory").lower()
    countries_cache_minutes: int = int(os.getenv("COUNTRIES_CACHE_MINUTES", "30"))

    # Redis (only used when CACHE_BACKEND=redis)
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # Identity forwarded by the upstream gateway
    admin_role: str = os.getenv("ADMIN_ROLE", "Admin")
    user_id_header: str = os.getenv("USER_ID_HEADER", "X-User-Id")
    user_roles_header: str = os.getenv("USER_ROLES_HEADER", "X-User-Roles")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"
    cors_origins: tuple[str, ...] = field(default_factory=lambda: _env_list("CORS_ORIGINS", "*"))

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def login_redirect_url(self) -> str:
        """Absolute URL of the login page (base URL and path concatenated as-is)."""
        return f"{self.web_url}{self.login_page}"

    @property
    def api_prefix(self) -> str:
        return f"/api/{self.api_version}"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.countries_cache_minutes <= 0:
            raise ValueError("COUNTRIES_CACHE_MINUTES must be greater than 0")

        if self.cache_backend not in ("memory", "redis"):
            raise ValueError(
                f"CACHE_BACKEND must be one of ['memory', 'redis'], got {self.cache_backend!r}"
            )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=False,
    )


def configure_logging() -> None:
    """Configure process-wide logging from settings."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _LOGGING_CONFIGURED = True
