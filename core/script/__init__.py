"""Script handling: language registry, detection and transliteration.

This package resolves language identifiers, classifies text by Unicode script and converts
between romanized and native spellings using static, read-only tables.
"""

from core.script.detector import ScriptDetector
from core.script.registry import LanguageRegistry
from core.script.tables import ReverseTable, ScriptTableStore
from core.script.transliterator import Transliterator

__all__: list[str] = [
    "LanguageRegistry",
    "ReverseTable",
    "ScriptDetector",
    "ScriptTableStore",
    "Transliterator",
]
