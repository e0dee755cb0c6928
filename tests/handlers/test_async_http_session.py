from __future__ import annotations

import logging
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from handlers.async_comm import AsyncCommError, AsyncCommInvalidContentTypeError, AsyncCommTimeoutError, AsyncHttp


class FakeResponse:
    def __init__(self, body: bytes, content_type: str) -> None:
        self.headers: dict[str, str] = {"Content-Type": content_type}
        self.read = AsyncMock(return_value=body)


class FakeRequestContext:
    def __init__(self, *, response: FakeResponse | None = None, error: BaseException | None = None) -> None:
        self.response: FakeResponse | None = response
        self.error: BaseException | None = error

    async def __aenter__(self) -> FakeResponse:
        if self.error is not None:
            raise self.error
        assert self.response is not None
        return self.response

    async def __aexit__(self, *args: object) -> None:
        return None


class FakeSession:
    def __init__(self, context: FakeRequestContext) -> None:
        self.context: FakeRequestContext = context
        self.calls: list[dict[str, Any]] = []

    def request(self, **kwargs: Any) -> FakeRequestContext:
        self.calls.append(kwargs)
        return self.context


def _http_with(monkeypatch: pytest.MonkeyPatch, context: FakeRequestContext) -> tuple[AsyncHttp, FakeSession]:
    http = AsyncHttp()
    session = FakeSession(context)
    monkeypatch.setattr(http, "initialize_session", lambda: session)
    return http, session


@pytest.mark.asyncio
async def test_session_is_created_lazily_and_closed(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)
    http = AsyncHttp(headers={"Accept": "application/json"})

    assert http.is_open is False
    assert not any("session initialized" in rec.message for rec in caplog.records)

    session: aiohttp.ClientSession = http.initialize_session()
    assert http.is_open is True
    assert http.initialize_session() is session

    await http.close()
    assert http.is_open is False
    assert session.closed is True
    assert any("AsyncHttp session initialized" in rec.message for rec in caplog.records)


@pytest.mark.asyncio
async def test_session_is_recreated_after_close(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)
    http = AsyncHttp()

    first: aiohttp.ClientSession = http.initialize_session()
    await http.close()
    caplog.clear()

    second: aiohttp.ClientSession = http.initialize_session()
    assert second is not first
    assert http.is_open is True
    assert any("AsyncHttp session initialized" in rec.message for rec in caplog.records)

    await http.close()
    await http.close()
    assert http.is_open is False


@pytest.mark.asyncio
async def test_post_decodes_json(monkeypatch: pytest.MonkeyPatch) -> None:
    context = FakeRequestContext(response=FakeResponse(b'{"ok": true}', "application/json; charset=utf-8"))
    http, session = _http_with(monkeypatch, context)

    result: Any = await http.post(url="http://service/translate", data={"text": "hi"}, total_timeout=3.0)

    assert result == {"ok": True}
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["json"] == {"text": "hi"}
    assert session.calls[0]["timeout"].total == 3.0


@pytest.mark.asyncio
async def test_empty_body_decodes_to_none(monkeypatch: pytest.MonkeyPatch) -> None:
    http, _ = _http_with(monkeypatch, FakeRequestContext(response=FakeResponse(b"", "application/json")))

    assert await http.post(url="http://service/empty") is None


@pytest.mark.asyncio
@pytest.mark.parametrize("content_type", ["text/plain", "text/html", "application/octet-stream"])
async def test_only_json_is_decoded_by_default(monkeypatch: pytest.MonkeyPatch, content_type: str) -> None:
    http, _ = _http_with(monkeypatch, FakeRequestContext(response=FakeResponse(b"hello", content_type)))

    with pytest.raises(AsyncCommInvalidContentTypeError, match=content_type):
        await http.post(url="http://service/translate")


@pytest.mark.asyncio
async def test_invalid_json_raises_comm_error(monkeypatch: pytest.MonkeyPatch) -> None:
    http, _ = _http_with(monkeypatch, FakeRequestContext(response=FakeResponse(b"{broken", "application/json")))

    with pytest.raises(AsyncCommError, match="not valid"):
        await http.post(url="http://service/broken")


@pytest.mark.asyncio
async def test_custom_handler_replaces_default(monkeypatch: pytest.MonkeyPatch) -> None:
    http, _ = _http_with(monkeypatch, FakeRequestContext(response=FakeResponse(b'{"a": 1}', "application/json")))
    http.add_handler("application/json", lambda raw: raw.upper())

    assert await http.post(url="http://service/translate") == b'{"A": 1}'


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "expected", "message"),
    [
        (TimeoutError(), AsyncCommTimeoutError, "Timeout"),
        (aiohttp.ServerDisconnectedError(), AsyncCommError, "disconnected"),
        (ConnectionResetError(), AsyncCommError, "disconnected"),
        (
            aiohttp.ClientResponseError(request_info=MagicMock(), history=(), status=503),
            AsyncCommError,
            "status='503'",
        ),
    ],
)
async def test_transport_errors_are_mapped(
    monkeypatch: pytest.MonkeyPatch, error: BaseException, expected: type[AsyncCommError], message: str
) -> None:
    http, _ = _http_with(monkeypatch, FakeRequestContext(error=error))

    with pytest.raises(expected, match=message):
        await http.post(url="http://service/translate", data={})


def test_timeout_budget() -> None:
    assert AsyncHttp._timeout(0).total is None  # noqa: SLF001
    assert AsyncHttp._timeout(0.5).connect is None  # noqa: SLF001
    budget: aiohttp.ClientTimeout = AsyncHttp._timeout(5.0)  # noqa: SLF001
    assert budget.total == 5.0
    assert budget.connect == 1.0
