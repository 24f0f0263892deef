"""Testes do portão de entrada: headers obrigatórios e teto de bytes."""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest

from api.connectors.github.webhook.gate import (
    extract_webhook_headers,
    is_supported_event,
    read_limited_body,
)
from app.protocols.models import Rejection, RejectionKind, WebhookHeaders


async def _chunks(*parts: bytes) -> AsyncIterator[bytes]:
    for part in parts:
        yield part


def _headers(**overrides: str) -> dict[str, str]:
    headers = {
        "X-GitHub-Delivery": "72d3162e-cc78-11e3-81ab-4c9367dc0958",
        "X-GitHub-Event": "dependabot_alert",
        "X-Hub-Signature-256": "sha256=abc",
    }
    headers.update(overrides)
    return headers


class TestExtractWebhookHeaders:
    def test_extracts_all_headers_case_insensitive(self) -> None:
        result = extract_webhook_headers(_headers())

        assert result == WebhookHeaders(
            delivery_id="72d3162e-cc78-11e3-81ab-4c9367dc0958",
            event_name="dependabot_alert",
            signature="sha256=abc",
        )

    def test_missing_signature_is_rejected(self) -> None:
        headers = _headers()
        del headers["X-Hub-Signature-256"]

        result = extract_webhook_headers(headers)

        assert isinstance(result, Rejection)
        assert result.kind is RejectionKind.MISSING_HEADERS
        assert result.status_code == 400
        assert result.detail == "x-hub-signature-256"

    def test_blank_values_count_as_missing(self) -> None:
        result = extract_webhook_headers(
            _headers(**{"X-GitHub-Delivery": "  ", "X-GitHub-Event": ""})
        )

        assert isinstance(result, Rejection)
        assert result.detail == "x-github-delivery,x-github-event"

    def test_no_headers_at_all(self) -> None:
        result = extract_webhook_headers({})

        assert isinstance(result, Rejection)
        assert result.as_body() == {"error": "missing_headers"}


def test_is_supported_event() -> None:
    assert is_supported_event("dependabot_alert") is True
    assert is_supported_event("push") is False
    assert is_supported_event("Dependabot_Alert") is False


class TestReadLimitedBody:
    @pytest.mark.asyncio
    async def test_reads_body_within_limit(self) -> None:
        body = await read_limited_body(_chunks(b'{"a":', b"", b"1}"), max_bytes=16)

        assert body == b'{"a":1}'

    @pytest.mark.asyncio
    async def test_body_exactly_at_limit_is_accepted(self) -> None:
        body = await read_limited_body(_chunks(b"x" * 8), max_bytes=8)

        assert body == b"x" * 8

    @pytest.mark.asyncio
    async def test_streamed_body_over_limit_is_rejected(self) -> None:
        result = await read_limited_body(_chunks(b"x" * 5, b"x" * 5), max_bytes=8)

        assert isinstance(result, Rejection)
        assert result.kind is RejectionKind.PAYLOAD_TOO_LARGE
        assert result.status_code == 413

    @pytest.mark.asyncio
    async def test_declared_length_over_limit_rejects_without_reading(self) -> None:
        consumed: list[bytes] = []

        async def _tracking() -> AsyncIterator[bytes]:
            consumed.append(b"chunk")
            yield b"x"

        result = await read_limited_body(_tracking(), max_bytes=8, content_length="9")

        assert isinstance(result, Rejection)
        assert result.detail == "declared=9"
        assert consumed == []

    @pytest.mark.asyncio
    async def test_invalid_content_length_falls_back_to_streaming(self) -> None:
        body = await read_limited_body(_chunks(b"ok"), max_bytes=8, content_length="abc")

        assert body == b"ok"
