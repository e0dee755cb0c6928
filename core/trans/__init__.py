"""Translation and transliteration management.

This package provides the dictionary pivot translator, the priority task queue, the live preview
debouncer, the TransManager facade and the pluggable remote fallback engine interface.
"""

from core.trans.interface import (
    EngineAttributes,
    ExternalServiceUnavailableError,
    QueueTaskFailedError,
    TransInterface,
    TranslateExceptionError,
)
from core.trans.manager import TransManager
from core.trans.pivot import PivotTranslator
from core.trans.preview import LivePreviewDebouncer
from core.trans.queue import TranslationQueue

__all__: list[str] = [
    "EngineAttributes",
    "ExternalServiceUnavailableError",
    "LivePreviewDebouncer",
    "PivotTranslator",
    "QueueTaskFailedError",
    "TransInterface",
    "TransManager",
    "TranslateExceptionError",
    "TranslationQueue",
]
