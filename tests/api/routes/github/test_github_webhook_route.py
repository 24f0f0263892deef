"""Testes do endpoint de webhook via TestClient (sem rede)."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from config.settings import GitHubAppSettings
from tests.fakes.dependabot_payloads import (
    MINIMAL_ALERT_BODY,
    MINIMAL_ALERT_BODY_WITHOUT_ECOSYSTEM,
    WEBHOOK_SECRET,
    build_alert_payload,
    encode_payload,
    sign,
)
from tests.fakes.fake_github_client import FakeGitHubClient

DELIVERY_ID = "72d3162e-cc78-11e3-81ab-4c9367dc0958"


def _settings(**overrides: object) -> GitHubAppSettings:
    values: dict[str, object] = {
        "webhook_secret": WEBHOOK_SECRET,
        "app_id": "4242",
        "private_key": "unused-with-fake-client",
        "max_body_bytes": 4096,
    }
    values.update(overrides)
    return GitHubAppSettings(**values)


def _headers(body: bytes, event: str = "dependabot_alert") -> dict[str, str]:
    return {
        "X-GitHub-Delivery": DELIVERY_ID,
        "X-GitHub-Event": event,
        "X-Hub-Signature-256": sign(body),
        "Content-Type": "application/json",
    }


@pytest.fixture
def github_client() -> FakeGitHubClient:
    return FakeGitHubClient()


@pytest.fixture
def client(github_client: FakeGitHubClient) -> Iterator[TestClient]:
    with TestClient(create_app(_settings(), github_client=github_client)) as test_client:
        yield test_client


class TestRouting:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_unknown_path_is_not_found(self, client: TestClient) -> None:
        response = client.post("/nope", content=b"{}")

        assert response.status_code == 404
        assert response.json() == {"error": "not_found"}

    def test_wrong_method_is_not_found(self, client: TestClient) -> None:
        response = client.get("/webhook")

        assert response.status_code == 404
        assert response.json() == {"error": "not_found"}

    def test_root_path_accepts_webhooks(
        self, client: TestClient, github_client: FakeGitHubClient
    ) -> None:
        body = encode_payload(build_alert_payload())

        response = client.post("/", content=body, headers=_headers(body))

        assert response.status_code == 202
        assert len(github_client.dispatches) == 1


class TestWebhookGate:
    def test_missing_headers(self, client: TestClient, github_client: FakeGitHubClient) -> None:
        response = client.post("/webhook", content=b"{}")

        assert response.status_code == 400
        assert response.json() == {"error": "missing_headers"}
        assert github_client.token_requests == []

    def test_unsupported_event_is_skipped(
        self, client: TestClient, github_client: FakeGitHubClient
    ) -> None:
        body = b'{"zen": "Keep it logically awesome."}'

        response = client.post("/webhook", content=body, headers=_headers(body, event="ping"))

        assert response.status_code == 202
        assert response.json() == {"skipped": "unsupported_event", "event": "ping"}
        assert github_client.token_requests == []

    def test_unsupported_event_with_bad_signature_is_still_skipped(
        self, client: TestClient
    ) -> None:
        headers = _headers(b"", event="push")
        headers["X-Hub-Signature-256"] = "sha256=bad"

        response = client.post("/webhook", content=b"{}", headers=headers)

        assert response.status_code == 202

    def test_payload_too_large(self, client: TestClient, github_client: FakeGitHubClient) -> None:
        body = b"x" * 5000

        response = client.post("/webhook", content=body, headers=_headers(body))

        assert response.status_code == 413
        assert response.json() == {"error": "payload_too_large"}
        assert github_client.token_requests == []

    def test_bad_signature(self, client: TestClient, github_client: FakeGitHubClient) -> None:
        body = encode_payload(build_alert_payload())
        headers = _headers(body)
        headers["X-Hub-Signature-256"] = "sha256=" + "0" * 64

        response = client.post("/webhook", content=body, headers=headers)

        assert response.status_code == 401
        assert response.json() == {"error": "invalid_signature"}
        assert github_client.dispatches == []


class TestWebhookRelay:
    def test_created_alert_is_accepted(
        self, client: TestClient, github_client: FakeGitHubClient
    ) -> None:
        body = encode_payload(build_alert_payload())

        response = client.post("/webhook", content=body, headers=_headers(body))

        assert response.status_code == 202
        assert response.json() == {"accepted": True, "delivery_id": DELIVERY_ID}
        assert github_client.dispatches[0]["body"]["client_payload"]["dependencies"] == [
            "brace-expansion",
            "minimatch",
        ]

    def test_minimal_alert_without_action_is_accepted(
        self, client: TestClient, github_client: FakeGitHubClient
    ) -> None:
        response = client.post(
            "/webhook", content=MINIMAL_ALERT_BODY, headers=_headers(MINIMAL_ALERT_BODY)
        )

        assert response.status_code == 202
        assert response.json() == {"accepted": True, "delivery_id": DELIVERY_ID}
        assert len(github_client.dispatches) == 1

    def test_minimal_alert_without_ecosystem_is_internal_error(
        self, client: TestClient, github_client: FakeGitHubClient
    ) -> None:
        body = MINIMAL_ALERT_BODY_WITHOUT_ECOSYSTEM

        response = client.post("/webhook", content=body, headers=_headers(body))

        assert response.status_code == 500
        assert response.json() == {"error": "internal_error"}
        assert github_client.token_requests == []

    def test_fixed_alert_is_skipped(self, client: TestClient) -> None:
        body = encode_payload(build_alert_payload(action="fixed"))

        response = client.post("/webhook", content=body, headers=_headers(body))

        assert response.status_code == 202
        assert response.json() == {"skipped": "unsupported_action", "action": "fixed"}

    def test_invalid_alert_is_internal_error(self, client: TestClient) -> None:
        payload = build_alert_payload()
        del payload["alert"]["dependency"]["package"]["ecosystem"]
        body = encode_payload(payload)

        response = client.post("/webhook", content=body, headers=_headers(body))

        assert response.status_code == 500
        assert response.json() == {"error": "internal_error"}

    def test_downstream_failure(self) -> None:
        app = create_app(_settings(), github_client=FakeGitHubClient(fail_dispatch=True))
        body = encode_payload(build_alert_payload())

        with TestClient(app) as test_client:
            response = test_client.post("/webhook", content=body, headers=_headers(body))

        assert response.status_code == 500
        assert response.json() == {"error": "internal_error"}


def test_unexpected_exception_is_internal_error() -> None:
    class _ExplodingUseCase:
        async def execute(self, event: object) -> None:
            raise RuntimeError("boom")

    app = create_app(_settings(), github_client=FakeGitHubClient())
    app.state.relay_use_case = _ExplodingUseCase()
    body = encode_payload(build_alert_payload())

    with TestClient(app) as test_client:
        response = test_client.post("/webhook", content=body, headers=_headers(body))

    assert response.status_code == 500
    assert response.json() == {"error": "internal_error"}
