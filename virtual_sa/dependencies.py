"""
FastAPI dependencies for settings, catalog and services
"""
from typing import Optional

import structlog

from .config import Settings, settings
from .services.catalog import ScenarioCatalog, load_catalog
from .services.discovery_service import DiscoveryService
from .services.llm_client import NvidiaClient

logger = structlog.get_logger()


def get_settings() -> Settings:
    """Get application settings"""
    return settings


def get_catalog() -> ScenarioCatalog:
    """Get the validated scenario catalog"""
    return load_catalog()


# Service dependencies
_nvidia_client_instance: Optional[NvidiaClient] = None
_discovery_service_instance: Optional[DiscoveryService] = None


def get_nvidia_client() -> NvidiaClient:
    """Get NVIDIA API client (singleton)"""
    global _nvidia_client_instance
    if _nvidia_client_instance is None:
        _nvidia_client_instance = NvidiaClient(settings)
        if not _nvidia_client_instance.configured:
            logger.warning("NVIDIA API key not configured; LLM calls will fail")
    return _nvidia_client_instance


def get_discovery_service() -> DiscoveryService:
    """Get discovery service instance (singleton)"""
    global _discovery_service_instance
    if _discovery_service_instance is None:
        _discovery_service_instance = DiscoveryService(get_nvidia_client(), settings)
    return _discovery_service_instance
