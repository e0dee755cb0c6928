"""Remote translation service engine.

Posts ``{text, sourceLanguage, targetLanguage}`` to a configured HTTP endpoint and expects
``{translatedText, isTranslated, sourceLanguage, targetLanguage}`` back. Used only as a fallback
when local pivot translation produced no usable result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from core.trans.interface import EngineAttributes, ExternalServiceUnavailableError, TransInterface
from handlers.async_comm import AsyncCommError, AsyncHttp
from models.remote_models import RemoteTranslationRequest, RemoteTranslationResponse
from models.translation_models import TranslationResult
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from config.loader import Config

__all__: list[str] = ["RemoteServiceTranslation"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class RemoteServiceTranslation(TransInterface):
    def __init__(self) -> None:
        super().__init__()
        self.__http: AsyncHttp | None = None
        self._url: str = ""
        self._timeout: float = 5.0

    @property
    def _http(self) -> AsyncHttp:
        if self.__http is None:
            msg = "The remote service client is not initialised"
            raise ExternalServiceUnavailableError(msg)
        return self.__http

    @property
    def is_available(self) -> bool:
        return self.__http is not None and bool(self._url)

    @staticmethod
    def fetch_engine_name() -> str:
        return "remote"

    def initialize(self, config: Config) -> None:
        logger.debug("'%s' Initialization start", self.__class__.__name__)
        self.engine_attributes = EngineAttributes(name="Remote translation service", requires_authentication=False)
        try:
            self._url = config.REMOTE.URL
            self._timeout = config.REMOTE.TIMEOUT
        except AttributeError as err:
            logger.critical(err)
            msg = "an error occurred in instance creation"
            raise RuntimeError(msg) from err

        headers: dict[str, str] = {"Accept": "application/json"}
        token: str = self.get_authentication_key()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.__http = AsyncHttp(headers=headers)

    async def translation(self, text: str, source_language: str, target_language: str) -> TranslationResult:
        logger.info("'%s': 'start translation'", self.__class__.__name__)
        logger.debug("'text': '%s', 'source': '%s', 'target': '%s'", text, source_language, target_language)

        request: RemoteTranslationRequest = RemoteTranslationRequest(
            text=text, source_language=source_language, target_language=target_language
        )
        msg: str
        try:
            payload: Any = await self._http.post(url=self._url, data=request.to_dict(), total_timeout=self._timeout)
        except AsyncCommError as err:
            logger.warning("Remote translation failed: %s", err)
            msg = "the remote translation service is unavailable"
            raise ExternalServiceUnavailableError(msg) from err

        if not isinstance(payload, dict):
            msg = f"the remote translation service returned a {type(payload).__name__} payload"
            logger.warning(msg)
            raise ExternalServiceUnavailableError(msg)
        try:
            response: RemoteTranslationResponse = RemoteTranslationResponse.from_dict(payload)
        except (KeyError, TypeError, ValueError) as err:
            logger.warning("Malformed remote translation payload: %s", err)
            msg = "the remote translation service returned a malformed payload"
            raise ExternalServiceUnavailableError(msg) from err

        logger.info("translation completed (%s > %s)", source_language, target_language)
        is_translated: bool = response.is_translated and response.translated_text != text
        if not is_translated:
            return TranslationResult.passthrough(text, source_language, target_language)
        return TranslationResult(
            text=response.translated_text,
            original_text=text,
            source_language=source_language,
            target_language=target_language,
            is_translated=True,
            confidence=1.0,
            method="remote",
        )

    async def close(self) -> None:
        if self.__http is not None:
            await self.__http.close()
        logger.info("'%s' process termination", self.__class__.__name__)
