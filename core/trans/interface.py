"""This module defines the abstract base class for network translation engines and the exception hierarchy
shared by the translation layer.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from config.loader import Config
    from models.translation_models import TranslationResult

__all__: list[str] = [
    "EngineAttributes",
    "ExternalServiceUnavailableError",
    "QueueTaskFailedError",
    "TransInterface",
    "TranslateExceptionError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


@dataclass
class EngineAttributes:
    """Engine-specific capabilities and behavior flags.

    Attributes:
        name (str): Display name of the translation engine. Not used for identification.
        requires_authentication (bool): Whether requests must carry the engine's authentication key.
    """

    name: str
    requires_authentication: bool = False


class TranslateExceptionError(Exception):
    """An error occurred during the translation process."""


class QueueTaskFailedError(TranslateExceptionError):
    """A queued translation task failed while running."""


class ExternalServiceUnavailableError(TranslateExceptionError):
    """The external translation service could not produce a usable result."""


class TransInterface(ABC):
    """Abstract base class for network translation engines.

    Engines are consulted only after local pivot translation produced no usable result.

    Attributes:
        registered (ClassVar[dict[str, type[TransInterface]]]): Registered engine classes, keyed by their
            distinguished names.
    """

    registered: ClassVar[dict[str, type[TransInterface]]] = {}

    def __init_subclass__(cls, **kwargs) -> None:
        """Register the subclass under its distinguished name.

        Args:
            **kwargs: Additional keyword arguments passed to parent class.
        """
        super().__init_subclass__(**kwargs)
        if not hasattr(cls, "fetch_engine_name") or not callable(cls.fetch_engine_name):
            msg = "Subclasses of TransInterface must implement the static method fetch_engine_name()."
            raise TypeError(msg)

        if not isinstance(cls.fetch_engine_name(), str) or cls.fetch_engine_name() == "":
            return  # Engines with empty names are allowed but not added to the registry.

        if cls.fetch_engine_name() in cls.registered:
            msg: str = f"A translation engine with the name '{cls.fetch_engine_name()}' is already registered."
            raise ValueError(msg)

        cls.registered[cls.fetch_engine_name()] = cls

    def __init__(self) -> None:
        self._engine_attributes: EngineAttributes | None = None

    @property
    def engine_attributes(self) -> EngineAttributes:
        if self._engine_attributes is None:
            msg = "Engine attributes have not been set."
            raise RuntimeError(msg)
        return self._engine_attributes

    @engine_attributes.setter
    def engine_attributes(self, attributes: EngineAttributes) -> None:
        if self._engine_attributes is not None:
            msg = "Engine attributes can only be set once during initialization."
            raise RuntimeError(msg)
        self._engine_attributes = attributes

    @property
    def engine_name(self) -> str:
        return self.engine_attributes.name

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Check if the translation engine is available.

        Returns:
            bool: True if the translation engine is available, False otherwise.
        """
        raise NotImplementedError

    @staticmethod
    @abstractmethod
    def fetch_engine_name() -> str:
        """Fetch the distinguished name of the translation engine.

        Called during class registration in __init_subclass__, so the implementation must be available
        at subclass definition time.

        Returns:
            str: The distinguished name of the translation engine.
        """
        raise NotImplementedError

    @abstractmethod
    def initialize(self, config: Config) -> None:
        """Initialize the translation engine with the given configuration.

        Args:
            config (Config): Configuration object containing settings for the translation engine.
        """
        raise NotImplementedError

    @abstractmethod
    async def translation(self, text: str, source_language: str, target_language: str) -> TranslationResult:
        """Translate text between two canonical languages.

        Args:
            text (str): Text to be translated.
            source_language (str): Canonical source language.
            target_language (str): Canonical target language.

        Returns:
            TranslationResult: Translation result with method 'remote'.

        Raises:
            ExternalServiceUnavailableError: If the service fails, times out or returns a malformed payload.
        """
        raise NotImplementedError

    @abstractmethod
    async def close(self) -> None:
        """Release resources held by the translation engine."""
        raise NotImplementedError

    def get_authentication_key(self) -> str:
        """Retrieve the authentication key from environment variables.

        The variable is named after the engine's distinguished name with the suffix "_API_OAUTH".
        For example, the engine "remote" reads "REMOTE_API_OAUTH".

        Returns:
            str: The authentication key, or an empty string if the environment variable is not set.
        """
        return os.getenv(f"{self.fetch_engine_name().upper()}_API_OAUTH", "")
