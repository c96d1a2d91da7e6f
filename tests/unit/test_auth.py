from __future__ import annotations

from starlette.datastructures import Headers

from logflare_mcp.handlers.sse.auth import get_credentials, missing_credential_headers


def test_credentials_from_headers() -> None:
    headers = Headers({"X-Logflare-Api-Key": " secret-123 ", "x-logflare-source-token": "src"})
    creds = get_credentials(headers)

    assert creds is not None
    assert creds.api_key == "secret-123"
    assert creds.source_token == "src"
    assert "secret-123" not in repr(creds)


def test_missing_or_blank_header_yields_none() -> None:
    assert get_credentials(Headers({"x-logflare-api-key": "key"})) is None
    assert get_credentials(Headers({"x-logflare-source-token": "src"})) is None
    assert get_credentials(Headers({"x-logflare-api-key": "  ", "x-logflare-source-token": "src"})) is None


def test_missing_headers_are_named() -> None:
    assert missing_credential_headers(Headers({})) == ["x-logflare-api-key", "x-logflare-source-token"]
    assert missing_credential_headers(Headers({"x-logflare-api-key": "k"})) == ["x-logflare-source-token"]
    assert missing_credential_headers(Headers({"x-logflare-api-key": "k", "x-logflare-source-token": "t"})) == []
