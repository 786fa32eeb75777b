"""Tests for the httpx-backed transport, using httpx.MockTransport."""

from urllib.parse import parse_qs

import httpx
import pytest

from core.config import PastebinSettings
from core.models import ErrorKind
from core.transport import PastebinTransport


def _transport(handler) -> PastebinTransport:
    return PastebinTransport(PastebinSettings(), http_transport=httpx.MockTransport(handler))


class TestPostForm:
    @pytest.mark.asyncio
    async def test_sends_form_encoded_body(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="https://pastebin.com/AbCd1234")

        outcome = await _transport(handler).post_form({"api_option": "paste", "api_paste_code": "a b&c"})

        assert outcome.ok
        assert outcome.body == "https://pastebin.com/AbCd1234"
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://pastebin.com/api/api_post.php"
        assert request.headers["content-type"] == "application/x-www-form-urlencoded"
        assert parse_qs(request.content.decode()) == {"api_option": ["paste"], "api_paste_code": ["a b&c"]}

    @pytest.mark.asyncio
    async def test_explicit_url_overrides_api_endpoint(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="content")

        transport = _transport(handler)
        await transport.post_form({"api_option": "show_paste"}, url=transport.settings.raw_api_url)

        assert str(seen[0].url) == "https://pastebin.com/api/api_raw.php"

    @pytest.mark.asyncio
    async def test_timeout_is_its_own_kind(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        outcome = await _transport(handler).post_form({})

        assert not outcome.ok
        assert outcome.error_kind is ErrorKind.TRANSPORT_TIMEOUT

    @pytest.mark.asyncio
    async def test_connection_failure_is_network_kind(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("[Errno -2] Name or service not known", request=request)

        outcome = await _transport(handler).post_form({})

        assert outcome.error_kind is ErrorKind.TRANSPORT_NETWORK
        assert "Name or service not known" in outcome.error_message

    @pytest.mark.asyncio
    async def test_http_error_status_keeps_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, text="Bad API request, invalid api_option")

        outcome = await _transport(handler).post_form({})

        assert outcome.error_kind is ErrorKind.TRANSPORT_NETWORK
        assert outcome.status_code == 422
        assert outcome.body == "Bad API request, invalid api_option"
        assert outcome.details == "Bad API request, invalid api_option"


class TestGetRaw:
    @pytest.mark.asyncio
    async def test_fetches_raw_url(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="hello world")

        outcome = await _transport(handler).get_raw("AbCd1234")

        assert outcome.body == "hello world"
        assert seen[0].method == "GET"
        assert str(seen[0].url) == "https://pastebin.com/raw/AbCd1234"

    @pytest.mark.asyncio
    async def test_follows_redirects(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/raw/AbCd1234":
                return httpx.Response(302, headers={"Location": "https://pastebin.com/raw/moved"})
            return httpx.Response(200, text="moved content")

        outcome = await _transport(handler).get_raw("AbCd1234")

        assert outcome.ok
        assert outcome.status_code == 200
        assert outcome.body == "moved content"

    @pytest.mark.asyncio
    async def test_redirect_without_location_is_a_failure(self) -> None:
        outcome = await _transport(lambda request: httpx.Response(302)).get_raw("AbCd1234")

        assert outcome.error_kind is ErrorKind.TRANSPORT_NETWORK
        assert outcome.status_code == 302

    @pytest.mark.asyncio
    async def test_not_found(self) -> None:
        outcome = await _transport(lambda request: httpx.Response(404, text="Not Found")).get_raw("gone")

        assert outcome.error_kind is ErrorKind.TRANSPORT_NETWORK
        assert outcome.status_code == 404


def test_urls_follow_base_url() -> None:
    transport = PastebinTransport(PastebinSettings(base_url="https://paste.example.org/"))
    assert transport.raw_url("k1") == "https://paste.example.org/raw/k1"
    assert transport.paste_url("k1") == "https://paste.example.org/k1"
    assert transport.paste_url("a/b") == "https://paste.example.org/a%2Fb"


def test_default_timeout_is_ten_seconds() -> None:
    assert PastebinTransport().settings.timeout_seconds == 10.0
