"""Tests for the read-paste handler."""

import httpx
import pytest

from core.config import PastebinSettings
from core.models import ErrorKind, PasteReadRequest
from core.read_paste import read_paste
from core.transport import PastebinTransport
from tests.fakes import FakeTransport, http_error, network_error, ok, timeout


@pytest.mark.asyncio
async def test_empty_key_makes_no_call(full_credentials) -> None:
    transport = FakeTransport()

    result = await read_paste(PasteReadRequest(paste_key="  "), full_credentials, transport)

    assert result.kind is ErrorKind.VALIDATION
    assert result.error == "pasteKey is required"
    assert transport.call_count == 0


@pytest.mark.asyncio
async def test_missing_developer_key_makes_no_call(no_credentials) -> None:
    transport = FakeTransport()

    result = await read_paste(PasteReadRequest(paste_key="AbCd"), no_credentials, transport)

    assert result.kind is ErrorKind.MISSING_CREDENTIAL
    assert transport.call_count == 0


@pytest.mark.asyncio
async def test_show_paste_check_then_raw_fetch(full_credentials) -> None:
    transport = FakeTransport(post=[ok("line one\nline two")], raw=[ok("line one\nline two")])

    result = await read_paste(PasteReadRequest(paste_key="AbCd"), full_credentials, transport)

    assert result.to_dict() == {
        "success": True,
        "content": "line one\nline two",
        "pasteKey": "AbCd",
        "url": "https://pastebin.com/AbCd",
    }
    assert transport.posted_urls == ["https://pastebin.com/api/api_raw.php"]
    assert transport.posted[0] == {
        "api_dev_key": "dev-key",
        "api_user_key": "user-key",
        "api_option": "show_paste",
        "api_paste_key": "AbCd",
    }
    assert transport.fetched == ["AbCd"]


@pytest.mark.asyncio
async def test_without_user_key_reads_raw_endpoint_only(dev_only_credentials) -> None:
    transport = FakeTransport(raw=[ok("public text")])

    result = await read_paste(PasteReadRequest(paste_key="AbCd"), dev_only_credentials, transport)

    assert result.success
    assert result.data["content"] == "public text"
    assert transport.posted == []
    assert transport.fetched == ["AbCd"]


@pytest.mark.asyncio
async def test_remote_error_on_show_paste_skips_raw_fetch(full_credentials) -> None:
    transport = FakeTransport(post=[ok("Bad API request, invalid permission to view this paste")])

    result = await read_paste(PasteReadRequest(paste_key="AbCd"), full_credentials, transport)

    assert result.kind is ErrorKind.REMOTE_APPLICATION
    assert transport.fetched == []


@pytest.mark.asyncio
async def test_show_paste_timeout(full_credentials) -> None:
    transport = FakeTransport(post=[timeout()])

    result = await read_paste(PasteReadRequest(paste_key="AbCd"), full_credentials, transport)

    assert result.kind is ErrorKind.TRANSPORT_TIMEOUT
    assert transport.fetched == []


@pytest.mark.asyncio
async def test_raw_fetch_failure_keeps_key_and_url(full_credentials) -> None:
    transport = FakeTransport(post=[ok("")], raw=[http_error(404, "Not Found")])

    result = await read_paste(PasteReadRequest(paste_key="AbCd"), full_credentials, transport)

    payload = result.to_dict()
    assert payload["error"].startswith("Failed to fetch raw paste content: ")
    assert payload["pasteKey"] == "AbCd"
    assert payload["url"] == "https://pastebin.com/AbCd"
    assert result.kind is ErrorKind.TRANSPORT_NETWORK


@pytest.mark.asyncio
async def test_raw_fetch_timeout_keeps_key_and_url(full_credentials) -> None:
    transport = FakeTransport(post=[ok("")], raw=[timeout()])

    result = await read_paste(PasteReadRequest(paste_key="AbCd"), full_credentials, transport)

    assert result.kind is ErrorKind.TRANSPORT_TIMEOUT
    assert result.data == {"pasteKey": "AbCd", "url": "https://pastebin.com/AbCd"}


@pytest.mark.asyncio
async def test_raw_fetch_network_error_keeps_key_and_url(full_credentials) -> None:
    transport = FakeTransport(post=[ok("")], raw=[network_error("connection reset")])

    result = await read_paste(PasteReadRequest(paste_key="AbCd"), full_credentials, transport)

    assert result.error == "Failed to fetch raw paste content: connection reset"
    assert result.data["url"] == "https://pastebin.com/AbCd"


@pytest.mark.asyncio
async def test_end_to_end_with_mock_http(full_credentials) -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(f"{request.method} {request.url}")
        return httpx.Response(200, text="raw text")

    transport = PastebinTransport(PastebinSettings(), http_transport=httpx.MockTransport(handler))

    result = await read_paste(PasteReadRequest(paste_key="AbCd"), full_credentials, transport)

    assert result.success
    assert result.data["content"] == "raw text"
    assert seen == [
        "POST https://pastebin.com/api/api_raw.php",
        "GET https://pastebin.com/raw/AbCd",
    ]


@pytest.mark.asyncio
async def test_redirected_raw_fetch_returns_final_content(full_credentials) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "POST":
            return httpx.Response(200, text="")
        if request.url.path == "/raw/AbCd":
            return httpx.Response(302, headers={"Location": "https://cdn.pastebin.com/raw/AbCd"})
        return httpx.Response(200, text="real content")

    transport = PastebinTransport(PastebinSettings(), http_transport=httpx.MockTransport(handler))

    result = await read_paste(PasteReadRequest(paste_key="AbCd"), full_credentials, transport)

    assert result.success
    assert result.data["content"] == "real content"
