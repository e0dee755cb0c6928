"""Configuration data models for the translation and transliteration engine.

Each data class maps to one section of the INI file. Field names match the INI keys and the
default values double as the type declaration used by the loader when converting values.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__: list[str] = [
    "Cache",
    "Config",
    "Dictionary",
    "General",
    "Preview",
    "Queue",
    "Remote",
    "Translation",
]


@dataclass
class General:
    DEBUG: bool = False
    LOG_FILE: str = ""
    LOG_LEVEL: str = "INFO"
    SCRIPT_NAME: str = ""


@dataclass
class Translation:
    FALLBACK_CONFIDENCE: float = 0.85
    PREVIEW_PRIORITY: str = "normal"
    BATCH_PRIORITY: str = "low"


@dataclass
class Cache:
    TTL_SEC: float = 300.0
    MAX_ENTRIES: int = 2000
    KEY_TEXT_LENGTH: int = 100


@dataclass
class Queue:
    CONCURRENCY_LIMIT: int = 5


@dataclass
class Preview:
    DEBOUNCE_MS: int = 300


@dataclass
class Remote:
    ENABLED: bool = False
    ENGINE: str = "remote"
    URL: str = ""
    TIMEOUT: float = 5.0
    MIN_CONFIDENCE: float = 0.8


@dataclass
class Dictionary:
    PATH: str = ""
    PHRASE_DIC: list[str] = field(default_factory=list)


@dataclass
class Config:
    GENERAL: General = field(default_factory=General)
    TRANSLATION: Translation = field(default_factory=Translation)
    CACHE: Cache = field(default_factory=Cache)
    QUEUE: Queue = field(default_factory=Queue)
    PREVIEW: Preview = field(default_factory=Preview)
    REMOTE: Remote = field(default_factory=Remote)
    DICTIONARY: Dictionary = field(default_factory=Dictionary)
