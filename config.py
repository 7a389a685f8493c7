"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field
from typing import Literal


def _parse_cors_origins() -> list[str]:
    """Parse CORS_ORIGINS environment variable."""
    origins = os.getenv("CORS_ORIGINS", "*")
    return [o.strip() for o in origins.split(",") if o.strip()]


def _parse_log_format() -> Literal["simple", "structured"]:
    """Parse LOG_FORMAT environment variable, falling back to simple."""
    value = os.getenv("LOG_FORMAT", "simple").strip().lower()
    return "structured" if value == "structured" else "simple"


@dataclass(frozen=True)
class CORSConfig:
    """CORS configuration."""

    allowed_origins: list[str] = field(default_factory=_parse_cors_origins)
    allow_credentials: bool = False
    allow_methods: list[str] = field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    allow_headers: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class RateLimitConfig:
    """Rate limiting configuration."""

    enabled: bool = field(
        default_factory=lambda: os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    )
    requests_per_minute: int = field(
        default_factory=lambda: int(os.getenv("RATE_LIMIT_RPM", "120"))
    )


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    format: Literal["simple", "structured"] = field(default_factory=_parse_log_format)


@dataclass(frozen=True)
class StrategyConfig:
    """Decision strategy configuration."""

    # Game type 1 hits every non-pok hand instead of using the basic rules
    aggressive_basic: bool = field(
        default_factory=lambda: os.getenv("POKDENG_AGGRESSIVE_BASIC", "false").lower() == "true"
    )
    max_hands: int = field(
        default_factory=lambda: int(os.getenv("POKDENG_MAX_HANDS", "26"))
    )

    def __post_init__(self) -> None:
        """Validate limits."""
        if not 1 <= self.max_hands <= 26:
            raise ValueError("max_hands must be between 1 and 26")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))

    cors: CORSConfig = field(default_factory=CORSConfig)
    rate_limit: RateLimitConfig = field(default_factory=RateLimitConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    strategy: StrategyConfig = field(default_factory=StrategyConfig)


# Global configuration instance
config = AppConfig()
