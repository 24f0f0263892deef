"""Testes do GitHubHttpClient com httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import jwt
import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from api.connectors.github import GitHubHttpClient
from api.connectors.github.http_client import extract_github_message
from app.infra.http import HttpClientConfig
from app.protocols.models import InstallationToken
from config.settings import GitHubAppSettings
from utils.errors import CredentialExchangeError, DispatchError

API = "https://api.github.test"


class _Recorder:
    """Handler do MockTransport que grava requests e responde em fila."""

    def __init__(self, *responses: httpx.Response) -> None:
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responses.pop(0)


def _client(rsa_private_key: rsa.RSAPrivateKey, recorder: _Recorder) -> GitHubHttpClient:
    return GitHubHttpClient(
        app_id="4242",
        private_key=rsa_private_key,
        api_base_url=f"{API}/",
        config=HttpClientConfig(transport=httpx.MockTransport(recorder)),
    )


class TestCreateInstallationToken:
    @pytest.mark.asyncio
    async def test_exchanges_jwt_for_token(self, rsa_private_key: rsa.RSAPrivateKey) -> None:
        recorder = _Recorder(
            httpx.Response(201, json={"token": "ghs_abc", "expires_at": "2026-10-18T11:00:00Z"})
        )

        token = await _client(rsa_private_key, recorder).create_installation_token(77)

        assert token == InstallationToken(token="ghs_abc", expires_at="2026-10-18T11:00:00Z")
        request = recorder.requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{API}/app/installations/77/access_tokens"
        assert request.headers["accept"] == "application/vnd.github+json"
        assert request.headers["user-agent"] == "dependabot-alert-bridge"
        assert request.headers["x-github-api-version"] == "2022-11-28"

        scheme, app_jwt = request.headers["authorization"].split(" ", 1)
        assert scheme == "Bearer"
        claims = jwt.decode(app_jwt, rsa_private_key.public_key(), algorithms=["RS256"])
        assert claims["iss"] == "4242"

    @pytest.mark.asyncio
    async def test_http_failure_raises(self, rsa_private_key: rsa.RSAPrivateKey) -> None:
        recorder = _Recorder(httpx.Response(404, json={"message": "Not Found"}))

        with pytest.raises(CredentialExchangeError) as exc_info:
            await _client(rsa_private_key, recorder).create_installation_token(77)

        assert exc_info.value.status_code == 404
        assert exc_info.value.installation_id == 77
        assert "Not Found" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_response_without_token_raises(self, rsa_private_key: rsa.RSAPrivateKey) -> None:
        recorder = _Recorder(httpx.Response(201, json={"expires_at": "2026-10-18T11:00:00Z"}))

        with pytest.raises(CredentialExchangeError, match="without token"):
            await _client(rsa_private_key, recorder).create_installation_token(77)

    @pytest.mark.asyncio
    async def test_non_json_response_raises(self, rsa_private_key: rsa.RSAPrivateKey) -> None:
        recorder = _Recorder(httpx.Response(200, text="<html>"))

        with pytest.raises(CredentialExchangeError, match="not JSON"):
            await _client(rsa_private_key, recorder).create_installation_token(77)


class TestCreateRepositoryDispatch:
    @pytest.mark.asyncio
    async def test_posts_dispatch_with_installation_token(
        self, rsa_private_key: rsa.RSAPrivateKey
    ) -> None:
        recorder = _Recorder(httpx.Response(204))
        body = {"event_type": "dependabot-alert-opened", "client_payload": {"ecosystem": "npm"}}

        await _client(rsa_private_key, recorder).create_repository_dispatch(
            "acme", "widgets", InstallationToken(token="ghs_abc"), body
        )

        request = recorder.requests[0]
        assert str(request.url) == f"{API}/repos/acme/widgets/dispatches"
        assert request.headers["authorization"] == "token ghs_abc"
        assert json.loads(request.content) == body

    @pytest.mark.asyncio
    async def test_rejected_dispatch_raises(self, rsa_private_key: rsa.RSAPrivateKey) -> None:
        recorder = _Recorder(
            httpx.Response(422, json={"message": "Resource not accessible by integration"})
        )

        with pytest.raises(DispatchError) as exc_info:
            await _client(rsa_private_key, recorder).create_repository_dispatch(
                "acme", "widgets", InstallationToken(token="ghs_abc"), {}
            )

        assert exc_info.value.status_code == 422
        assert exc_info.value.github_message == "Resource not accessible by integration"
        assert len(recorder.requests) == 1


def test_from_settings_loads_key(private_key_pem: str) -> None:
    settings = GitHubAppSettings(
        webhook_secret="s",
        app_id="4242",
        private_key=private_key_pem,
        api_base_url=API,
        request_timeout_seconds=3.0,
    )

    client = GitHubHttpClient.from_settings(settings)

    assert isinstance(client, GitHubHttpClient)


def test_extract_github_message() -> None:
    assert extract_github_message({"message": "Bad credentials"}) == "Bad credentials"
    assert extract_github_message({"message": 42}) is None
    assert extract_github_message(None) is None
