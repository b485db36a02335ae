"""
Configuration for the Virtual SA service
"""
import logging.config

import structlog
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "NVIDIA Virtual SA"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8001

    # Security
    ALLOWED_HOSTS: List[str] = ["*"]
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    # Upstream LLM (NVIDIA NIM)
    NVIDIA_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("NVIDIA_API_KEY", "VITE_NVIDIA_API_KEY"),
    )
    NVIDIA_API_BASE_URL: str = "https://integrate.api.nvidia.com"
    NVIDIA_API_TIMEOUT: float = 120.0  # seconds
    LLM_MODEL: str = "meta/llama-3.3-70b-instruct"
    ARCHITECTURE_TEMPERATURE: float = 0.2
    ARCHITECTURE_MAX_TOKENS: int = 4096
    CHAT_TEMPERATURE: float = 0.3
    CHAT_MAX_TOKENS: int = 1024
    REQUEST_TRACKING_MAX_SESSIONS: int = 10000  # (session, operation) pairs kept for stale checks

    # Monitoring
    ENABLE_METRICS: bool = True
    LOG_LEVEL: str = "INFO"
    STRUCTURED_LOGGING: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


# Global settings instance
settings = Settings()


# Logging configuration
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
            "class": "pythonjsonlogger.jsonlogger.JsonFormatter",
        },
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json" if settings.STRUCTURED_LOGGING else "standard",
            "level": settings.LOG_LEVEL,
        },
    },
    "loggers": {
        "": {  # Root logger
            "handlers": ["console"],
            "level": settings.LOG_LEVEL,
            "propagate": False,
        },
        "uvicorn": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "httpx": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
    },
}


# Deployment defaults for the ROI simulator
DEFAULT_DEPLOYMENT_MODE = "cloud-api"

# Discovery cost slider bounds
COST_MULTIPLIER_CONFIG = {
    "min": 0.25,
    "max": 3.0,
    "step": 0.25,
    "default": 1.0,
    "default_monthly_cost": 2500,
    "queries_per_day_at_1x": 50,  # thousands
}


def configure_logging():
    """Apply LOGGING_CONFIG and route structlog events through stdlib logging"""
    logging.config.dictConfig(LOGGING_CONFIG)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.stdlib.render_to_log_kwargs,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
