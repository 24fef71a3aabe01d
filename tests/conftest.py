"""Pytest configuration and fixtures for wowza_rest tests."""

from __future__ import annotations

import json
from typing import Any, Optional

import httpx
import pytest

from wowza_rest import ClientConfig, WowzaAPIClient

API_PREFIX = "/v2/servers/_defaultServer_/vhosts/_defaultVHost_"


class FakeWowza:
    """Records every request and answers with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {"success": True, "message": "", "data": None}
        self.raw: Optional[bytes] = None
        self.error: Optional[Exception] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, content=json.dumps(self.body).encode())

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    def last_path(self) -> str:
        path = self.last.url.path
        assert path.startswith(API_PREFIX)
        return path[len(API_PREFIX):]


@pytest.fixture
def wowza_server() -> FakeWowza:
    return FakeWowza()


@pytest.fixture
def client(wowza_server: FakeWowza) -> WowzaAPIClient:
    return WowzaAPIClient(ClientConfig(), transport=httpx.MockTransport(wowza_server))


@pytest.fixture
def configured_client(wowza_server: FakeWowza) -> WowzaAPIClient:
    config = ClientConfig(
        host="192.168.1.15",
        application="webrtc",
        stream_file="ipCamera.stream",
        app_instance="_definst_",
        media_caster_type="rtp",
    )
    return WowzaAPIClient(config, transport=httpx.MockTransport(wowza_server))
