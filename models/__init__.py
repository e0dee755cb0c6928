"""Data models for scriptbridge.

This package contains dataclass definitions for configuration, languages and scripts, translation
results and tasks, cache entries, remote service payloads, and the regular expression patterns
used throughout the application.
"""

from __future__ import annotations

from models.cache_models import CacheEntry, CacheStatistics
from models.config_models import Config
from models.language_models import DetectionResult, LanguageProfile, ScriptBlock
from models.remote_models import RemoteTranslationRequest, RemoteTranslationResponse
from models.translation_models import (
    BatchMessage,
    ChatMessageViews,
    PreviewState,
    QueueStatus,
    TranslationResult,
    TranslationTask,
)

__all__: list[str] = [
    "BatchMessage",
    "CacheEntry",
    "CacheStatistics",
    "ChatMessageViews",
    "Config",
    "DetectionResult",
    "LanguageProfile",
    "PreviewState",
    "QueueStatus",
    "RemoteTranslationRequest",
    "RemoteTranslationResponse",
    "ScriptBlock",
    "TranslationResult",
    "TranslationTask",
]
