from wowza_rest.services.wowza_api import (
    WowzaAPIClient,
    normalize_stream_file,
)

__all__ = [
    "WowzaAPIClient",
    "normalize_stream_file",
]
