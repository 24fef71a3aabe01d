"""
Wowza Streaming Engine REST management API client
"""

from wowza_rest.core.config import ClientConfig, Settings, StreamOptions, get_settings
from wowza_rest.core.exceptions import (
    WowzaAPIError,
    WowzaHTTPError,
    WowzaResponseError,
    WowzaTransportError,
)
from wowza_rest.services.wowza_api import WowzaAPIClient

__version__ = "1.0.0"

__all__ = [
    "ClientConfig",
    "Settings",
    "StreamOptions",
    "get_settings",
    "WowzaAPIError",
    "WowzaHTTPError",
    "WowzaResponseError",
    "WowzaTransportError",
    "WowzaAPIClient",
]
