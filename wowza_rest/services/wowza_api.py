"""
Wowza Streaming Engine REST API client.

Wraps the management endpoints on port 8087 used to list, connect and
disconnect stream files and to create, list and stop stream recorders.
Every operation is a single HTTP round trip on its own connection.
"""

import json
import logging
from dataclasses import replace
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

import httpx

from wowza_rest.core.config import ClientConfig, Settings, StreamOptions, get_settings
from wowza_rest.core.exceptions import (
    WowzaHTTPError,
    WowzaResponseError,
    WowzaTransportError,
)
from wowza_rest.schemas.schemas import RecorderParameters, StreamRecorderConfig

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
STREAM_FILE_SUFFIX = ".stream"


def normalize_stream_file(stream_file: str) -> str:
    """
    Strip a trailing ``.stream`` from a stream file name.

    The connect endpoint identifies a stream file by its base name only,
    while every other endpoint wants the full file name.
    """
    if stream_file.endswith(STREAM_FILE_SUFFIX):
        return stream_file[:-len(STREAM_FILE_SUFFIX)]
    return stream_file


def _segment(value: str) -> str:
    """Percent-encode one path segment so '/', '?' and '#' stay inside it."""
    return quote(value, safe="")


class WowzaAPIClient:
    """Async HTTP client for the Wowza Streaming Engine management API."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or ClientConfig()
        self.transport = transport
        self.headers = {
            "Accept": JSON_CONTENT_TYPE,
            "Content-Type": JSON_CONTENT_TYPE,
        }

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "WowzaAPIClient":
        """Build a client from WOWZA_* environment settings."""
        settings = settings or get_settings()
        return cls(settings.to_client_config(), transport=transport)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.config.timeout,
            transport=self.transport,
        )

    def _effective(self, options: Optional[StreamOptions], **overrides: Optional[str]) -> ClientConfig:
        """Keyword overrides win over ``options``, which win over the stored config."""
        options = options or StreamOptions()
        given = {key: value for key, value in overrides.items() if value}
        if given:
            options = replace(options, **given)
        return self.config.merge(options)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, str]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send one request and return the parsed JSON body."""
        url = f"{self.base_url}{path}"
        content = json.dumps(body, separators=(",", ":")) if body is not None else None

        try:
            async with self._client() as client:
                response = await client.request(method, path, params=params, content=content)
        except httpx.TransportError as e:
            logger.error(
                f"Wowza request {method} {url} failed: {e}",
                extra={"method": method, "url": url},
            )
            raise WowzaTransportError(f"problem with request: {e}", cause=e) from e

        logger.debug(
            f"Wowza {method} {url} -> {response.status_code}",
            extra={"method": method, "url": url, "status_code": response.status_code},
        )

        if response.status_code >= 300:
            reason = response.reason_phrase
            logger.error(
                f"Wowza API error {response.status_code} {reason}: {method} {url}",
                extra={"method": method, "url": url, "status_code": response.status_code},
            )
            raise WowzaHTTPError(response.status_code, reason, method=method, url=url)

        try:
            return response.json()
        except ValueError as e:
            logger.error(
                f"Wowza returned a non-JSON body for {method} {url}",
                extra={"method": method, "url": url, "status_code": response.status_code},
            )
            raise WowzaResponseError(
                f"invalid JSON in response to {method} {path}",
                status_code=response.status_code,
                cause=e,
            ) from e

    # ------------------------------------------------------------ Stream files

    async def list_stream_files(
        self,
        options: Optional[StreamOptions] = None,
        *,
        application: Optional[str] = None,
    ) -> Any:
        """
        Get the stream files of an application.

        Wowza answers with something like
        ``{"serverName": "_defaultServer_", "streamFiles": [{"id": "ipCamera", "href": "..."}]}``.
        """
        cfg = self._effective(options, application=application)
        return await self._request("GET", f"/applications/{_segment(cfg.application)}/streamfiles")

    async def get_stream_configuration(
        self,
        options: Optional[StreamOptions] = None,
        *,
        application: Optional[str] = None,
        stream_file: Optional[str] = None,
    ) -> Any:
        """Get the configuration (uri, name, version) of one stream file."""
        cfg = self._effective(options, application=application, stream_file=stream_file)
        return await self._request(
            "GET",
            f"/applications/{_segment(cfg.application)}/streamfiles/{_segment(cfg.stream_file)}",
        )

    async def connect_stream_file(
        self,
        options: Optional[StreamOptions] = None,
        *,
        application: Optional[str] = None,
        stream_file: Optional[str] = None,
        app_instance: Optional[str] = None,
        media_caster_type: Optional[str] = None,
    ) -> Any:
        """Start publishing an existing stream file into an application instance."""
        cfg = self._effective(
            options,
            application=application,
            stream_file=stream_file,
            app_instance=app_instance,
            media_caster_type=media_caster_type,
        )
        params = {
            "connectAppName": cfg.application,
            "appInstance": cfg.app_instance,
            "mediaCasterType": cfg.media_caster_type,
        }
        result = await self._request(
            "PUT",
            f"/streamfiles/{_segment(normalize_stream_file(cfg.stream_file))}/actions/connect",
            params=params,
        )
        logger.info(f"Connected stream file {cfg.stream_file} to {cfg.application}/{cfg.app_instance}")
        return result

    async def disconnect_stream_file(
        self,
        options: Optional[StreamOptions] = None,
        *,
        application: Optional[str] = None,
        stream_file: Optional[str] = None,
        app_instance: Optional[str] = None,
    ) -> Any:
        """Stop the incoming stream published from a stream file."""
        cfg = self._effective(
            options,
            application=application,
            stream_file=stream_file,
            app_instance=app_instance,
        )
        result = await self._request(
            "PUT",
            f"/applications/{_segment(cfg.application)}/instances/{_segment(cfg.app_instance)}"
            f"/incomingstreams/{_segment(cfg.stream_file)}/actions/disconnectStream",
        )
        logger.info(f"Disconnected stream file {cfg.stream_file} from {cfg.application}/{cfg.app_instance}")
        return result

    # --------------------------------------------------------------- Recorders

    async def create_recorder(
        self,
        recorder_params: Union[RecorderParameters, StreamRecorderConfig],
        options: Optional[StreamOptions] = None,
        *,
        application: Optional[str] = None,
        stream_file: Optional[str] = None,
        app_instance: Optional[str] = None,
    ) -> Any:
        """
        Create a stream recorder, which starts recording once the stream is up.

        ``recorder_params`` is sent as the JSON body without validation; a
        StreamRecorderConfig is serialized by alias with unset fields dropped.
        Wowza answers ``{"success": true, "message": "Recorder Created", "data": null}``.
        """
        if isinstance(recorder_params, StreamRecorderConfig):
            body = recorder_params.to_request_body()
        else:
            body = dict(recorder_params)

        cfg = self._effective(
            options,
            application=application,
            stream_file=stream_file,
            app_instance=app_instance,
        )
        result = await self._request(
            "POST",
            f"/applications/{_segment(cfg.application)}/instances/{_segment(cfg.app_instance)}/streamrecorders/{_segment(cfg.stream_file)}",
            body=body,
        )
        logger.info(f"Created recorder for {cfg.stream_file} in {cfg.application}/{cfg.app_instance}")
        return result

    async def stop_recording(
        self,
        options: Optional[StreamOptions] = None,
        *,
        application: Optional[str] = None,
        stream_file: Optional[str] = None,
        app_instance: Optional[str] = None,
    ) -> Any:
        """Stop the recorder attached to a stream file."""
        cfg = self._effective(
            options,
            application=application,
            stream_file=stream_file,
            app_instance=app_instance,
        )
        result = await self._request(
            "PUT",
            f"/applications/{_segment(cfg.application)}/instances/{_segment(cfg.app_instance)}"
            f"/streamrecorders/{_segment(cfg.stream_file)}/actions/stopRecording",
        )
        logger.info(f"Stopped recording {cfg.stream_file} in {cfg.application}/{cfg.app_instance}")
        return result

    async def list_recorders(
        self,
        options: Optional[StreamOptions] = None,
        *,
        application: Optional[str] = None,
        app_instance: Optional[str] = None,
    ) -> Any:
        """List the recorders of an application instance with their full settings."""
        cfg = self._effective(options, application=application, app_instance=app_instance)
        return await self._request(
            "GET",
            f"/applications/{_segment(cfg.application)}/instances/{_segment(cfg.app_instance)}/streamrecorders",
        )
