from __future__ import annotations

from types import SimpleNamespace
from typing import Any, cast

import pytest

from core.trans.engines import remote_service as remote_service_module
from core.trans.interface import ExternalServiceUnavailableError, TransInterface
from handlers.async_comm import AsyncCommTimeoutError
from models.translation_models import TranslationResult


class DummyHttp:
    def __init__(self, *, headers: dict[str, str] | None = None) -> None:
        self.headers: dict[str, str] = dict(headers or {})
        self.payload: Any = None
        self.error: Exception | None = None
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    async def post(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.payload

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> Any:
    return SimpleNamespace(REMOTE=SimpleNamespace(URL="http://service/translate", TIMEOUT=2.5))


@pytest.fixture
def engine(monkeypatch: pytest.MonkeyPatch, config: Any) -> remote_service_module.RemoteServiceTranslation:
    monkeypatch.setattr(remote_service_module, "AsyncHttp", DummyHttp)
    monkeypatch.delenv("REMOTE_API_OAUTH", raising=False)
    instance = remote_service_module.RemoteServiceTranslation()
    instance.initialize(config)
    return instance


def _http(engine: remote_service_module.RemoteServiceTranslation) -> DummyHttp:
    return cast("DummyHttp", engine._http)  # noqa: SLF001


def test_engine_is_registered() -> None:
    assert TransInterface.registered["remote"] is remote_service_module.RemoteServiceTranslation


def test_uninitialized_engine_is_unavailable() -> None:
    engine = remote_service_module.RemoteServiceTranslation()

    assert engine.is_available is False
    with pytest.raises(ExternalServiceUnavailableError):
        _ = engine._http  # noqa: SLF001


def test_initialize_sets_headers(monkeypatch: pytest.MonkeyPatch, config: Any) -> None:
    monkeypatch.setattr(remote_service_module, "AsyncHttp", DummyHttp)
    monkeypatch.setenv("REMOTE_API_OAUTH", "secret")
    engine = remote_service_module.RemoteServiceTranslation()

    engine.initialize(config)

    assert engine.is_available is True
    assert engine.engine_name == "Remote translation service"
    assert _http(engine).headers == {"Accept": "application/json", "Authorization": "Bearer secret"}


def test_initialize_with_incomplete_config_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(remote_service_module, "AsyncHttp", DummyHttp)
    engine = remote_service_module.RemoteServiceTranslation()

    with pytest.raises(RuntimeError):
        engine.initialize(SimpleNamespace())  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_translation_returns_remote_result(engine: remote_service_module.RemoteServiceTranslation) -> None:
    _http(engine).payload = {
        "translatedText": "धन्यवाद",
        "isTranslated": True,
        "sourceLanguage": "english",
        "targetLanguage": "hindi",
    }

    result: TranslationResult = await engine.translation("thanks a lot", "english", "hindi")

    assert result.text == "धन्यवाद"
    assert result.method == "remote"
    assert result.confidence == 1.0
    assert _http(engine).calls[0]["url"] == "http://service/translate"
    assert _http(engine).calls[0]["total_timeout"] == 2.5
    assert _http(engine).calls[0]["data"] == {
        "text": "thanks a lot",
        "sourceLanguage": "english",
        "targetLanguage": "hindi",
    }


@pytest.mark.asyncio
async def test_untranslated_payload_is_passthrough(engine: remote_service_module.RemoteServiceTranslation) -> None:
    _http(engine).payload = {
        "translatedText": "xyzzy",
        "isTranslated": False,
        "sourceLanguage": "english",
        "targetLanguage": "hindi",
    }

    result: TranslationResult = await engine.translation("xyzzy", "english", "hindi")

    assert result == TranslationResult.passthrough("xyzzy", "english", "hindi")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        "not a dict",
        ["list"],
        {"isTranslated": True},
        {"translatedText": None, "isTranslated": True, "sourceLanguage": "english", "targetLanguage": "hindi"},
        {"translatedText": "नमस्ते", "isTranslated": True, "sourceLanguage": "english"},
    ],
)
async def test_malformed_payload_raises(engine: remote_service_module.RemoteServiceTranslation, payload: Any) -> None:
    _http(engine).payload = payload

    with pytest.raises(ExternalServiceUnavailableError):
        await engine.translation("hello", "english", "hindi")


@pytest.mark.asyncio
async def test_transport_failure_raises(engine: remote_service_module.RemoteServiceTranslation) -> None:
    _http(engine).error = AsyncCommTimeoutError("Timeout")

    with pytest.raises(ExternalServiceUnavailableError) as excinfo:
        await engine.translation("hello", "english", "hindi")
    assert isinstance(excinfo.value.__cause__, AsyncCommTimeoutError)


@pytest.mark.asyncio
async def test_close_closes_http(engine: remote_service_module.RemoteServiceTranslation) -> None:
    http: DummyHttp = _http(engine)

    await engine.close()

    assert http.closed is True
