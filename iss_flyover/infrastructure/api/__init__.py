# iss_flyover/infrastructure/api/__init__.py
from .clients import AsyncFlyoverApiClient, AsyncGeoIPApiClient, AsyncIPApiClient

__all__ = [
    "AsyncIPApiClient", "AsyncGeoIPApiClient", "AsyncFlyoverApiClient",
]
