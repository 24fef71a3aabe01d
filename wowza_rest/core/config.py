"""
Client configuration settings
"""

from dataclasses import dataclass, fields, replace
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Wowza management API is always served on this port and path prefix
WOWZA_API_PORT = 8087
WOWZA_API_PREFIX = "/v2/servers/_defaultServer_/vhosts/_defaultVHost_"

DEFAULT_HOST = "localhost"
DEFAULT_APPLICATION = "live"
DEFAULT_STREAM_FILE = "myStream.stream"
DEFAULT_APP_INSTANCE = "_definst_"
DEFAULT_MEDIA_CASTER_TYPE = "rtp"
DEFAULT_TIMEOUT = 30.0


def resolve(value: Optional[str], default: str) -> str:
    """Return the per-call value when it is non-empty, otherwise the default."""
    return value if value else default


@dataclass(frozen=True)
class StreamOptions:
    """Per-call overrides for the stream parameters of a ClientConfig"""
    application: Optional[str] = None
    stream_file: Optional[str] = None
    app_instance: Optional[str] = None
    media_caster_type: Optional[str] = None


@dataclass(frozen=True)
class ClientConfig:
    """Connection defaults for the Wowza management API"""
    host: str = DEFAULT_HOST
    application: str = DEFAULT_APPLICATION
    stream_file: str = DEFAULT_STREAM_FILE
    app_instance: str = DEFAULT_APP_INSTANCE
    media_caster_type: str = DEFAULT_MEDIA_CASTER_TYPE
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        # Empty strings fall back to the documented defaults
        for field in fields(self):
            if field.type in (str, "str"):
                object.__setattr__(self, field.name, resolve(getattr(self, field.name), field.default))
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{WOWZA_API_PORT}{WOWZA_API_PREFIX}"

    def merge(self, options: Optional[StreamOptions] = None) -> "ClientConfig":
        """
        Apply per-call overrides without touching this instance.

        Fields of ``options`` that are None or empty keep the stored value.
        """
        if options is None:
            return self
        return replace(
            self,
            application=resolve(options.application, self.application),
            stream_file=resolve(options.stream_file, self.stream_file),
            app_instance=resolve(options.app_instance, self.app_instance),
            media_caster_type=resolve(options.media_caster_type, self.media_caster_type),
        )


class Settings(BaseSettings):
    """Client settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"  # Ignore unrelated variables in .env
    )

    WOWZA_HOST: str = DEFAULT_HOST
    WOWZA_APPLICATION: str = DEFAULT_APPLICATION
    WOWZA_STREAM_FILE: str = DEFAULT_STREAM_FILE
    WOWZA_APP_INSTANCE: str = DEFAULT_APP_INSTANCE
    WOWZA_MEDIA_CASTER_TYPE: str = DEFAULT_MEDIA_CASTER_TYPE
    WOWZA_TIMEOUT: float = DEFAULT_TIMEOUT  # seconds
    WOWZA_DEBUG: bool = False

    @field_validator("WOWZA_TIMEOUT")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Requests must always be bounded."""
        if v <= 0:
            raise ValueError("WOWZA_TIMEOUT must be greater than zero")
        return v

    def to_client_config(self) -> ClientConfig:
        return ClientConfig(
            host=self.WOWZA_HOST,
            application=self.WOWZA_APPLICATION,
            stream_file=self.WOWZA_STREAM_FILE,
            app_instance=self.WOWZA_APP_INSTANCE,
            media_caster_type=self.WOWZA_MEDIA_CASTER_TYPE,
            timeout=self.WOWZA_TIMEOUT,
        )


@lru_cache
def get_settings() -> Settings:
    """Settings are read from the environment on first use."""
    return Settings()
