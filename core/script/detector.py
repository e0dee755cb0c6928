"""Script detection.

Classifies text by the first Unicode script block found in it. Patterns are tried in a fixed
priority order, so mixed-script text resolves deterministically:

1. South Asian: Devanagari, Bengali, Gurmukhi, Gujarati, Odia, Tamil, Telugu, Kannada, Malayalam, Sinhala
2. CJK: Kana, Hangul, Han (Japanese mixes kana with Han characters, so kana is tried first)
3. Thai, Lao, Myanmar, Khmer, Tibetan
4. Arabic, Hebrew
5. Cyrillic, Greek
6. Georgian, Armenian, Ethiopic
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, NamedTuple

from core.script.const_languages import DEFAULT_LANGUAGE
from handlers.emoji import EmojiHandler
from models.language_models import DetectionResult
from models.re_models import (
    ARABIC_PATTERN,
    ARMENIAN_PATTERN,
    BENGALI_PATTERN,
    CYRILLIC_PATTERN,
    DEVANAGARI_PATTERN,
    ETHIOPIC_PATTERN,
    GEORGIAN_PATTERN,
    GREEK_PATTERN,
    GUJARATI_PATTERN,
    GURMUKHI_PATTERN,
    HAN_PATTERN,
    HANGUL_PATTERN,
    HEBREW_PATTERN,
    KANA_PATTERN,
    KANNADA_PATTERN,
    KHMER_PATTERN,
    LAO_PATTERN,
    LATIN_LETTER_PATTERN,
    MALAYALAM_PATTERN,
    MYANMAR_PATTERN,
    ODIA_PATTERN,
    SINHALA_PATTERN,
    TAMIL_PATTERN,
    TELUGU_PATTERN,
    THAI_PATTERN,
    TIBETAN_PATTERN,
)
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging
    from re import Pattern

    from models.language_models import ScriptFamily

__all__: list[str] = ["ScriptDetector"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class _ScriptPattern(NamedTuple):
    pattern: Pattern[str]
    script: ScriptFamily
    language: str


SCRIPT_PATTERNS: Final[tuple[_ScriptPattern, ...]] = (
    _ScriptPattern(DEVANAGARI_PATTERN, "Devanagari", "hindi"),
    _ScriptPattern(BENGALI_PATTERN, "Bengali", "bengali"),
    _ScriptPattern(GURMUKHI_PATTERN, "Gurmukhi", "punjabi"),
    _ScriptPattern(GUJARATI_PATTERN, "Gujarati", "gujarati"),
    _ScriptPattern(ODIA_PATTERN, "Odia", "odia"),
    _ScriptPattern(TAMIL_PATTERN, "Tamil", "tamil"),
    _ScriptPattern(TELUGU_PATTERN, "Telugu", "telugu"),
    _ScriptPattern(KANNADA_PATTERN, "Kannada", "kannada"),
    _ScriptPattern(MALAYALAM_PATTERN, "Malayalam", "malayalam"),
    _ScriptPattern(SINHALA_PATTERN, "Sinhala", "sinhala"),
    _ScriptPattern(KANA_PATTERN, "CJK", "japanese"),
    _ScriptPattern(HANGUL_PATTERN, "CJK", "korean"),
    _ScriptPattern(HAN_PATTERN, "CJK", "chinese"),
    _ScriptPattern(THAI_PATTERN, "Thai", "thai"),
    _ScriptPattern(LAO_PATTERN, "Lao", "lao"),
    _ScriptPattern(MYANMAR_PATTERN, "Myanmar", "burmese"),
    _ScriptPattern(KHMER_PATTERN, "Khmer", "khmer"),
    _ScriptPattern(TIBETAN_PATTERN, "Tibetan", "tibetan"),
    _ScriptPattern(ARABIC_PATTERN, "Arabic", "arabic"),
    _ScriptPattern(HEBREW_PATTERN, "Hebrew", "hebrew"),
    _ScriptPattern(CYRILLIC_PATTERN, "Cyrillic", "russian"),
    _ScriptPattern(GREEK_PATTERN, "Greek", "greek"),
    _ScriptPattern(GEORGIAN_PATTERN, "Georgian", "georgian"),
    _ScriptPattern(ARMENIAN_PATTERN, "Armenian", "armenian"),
    _ScriptPattern(ETHIOPIC_PATTERN, "Ethiopic", "amharic"),
)

SCRIPT_MATCH_CONFIDENCE: Final[float] = 0.95
LATIN_CONFIDENCE: Final[float] = 0.7
AMBIGUOUS_CONFIDENCE: Final[float] = 0.5
LATIN_RATIO_THRESHOLD: Final[float] = 0.7


class ScriptDetector:
    """Pure, stateless script classifier."""

    @staticmethod
    def is_latin_text(text: str) -> bool:
        """Check whether text is predominantly written in Latin letters.

        URLs, emojis, whitespace, digits and punctuation are ignored. Text with nothing left after
        filtering counts as Latin.

        Args:
            text (str): The text to inspect.

        Returns:
            bool: True if more than 70% of the remaining characters are Latin letters.
        """
        letters: str = StringUtils.strip_non_letters(EmojiHandler.strip_emoji(StringUtils.remove_url(text)))
        if not letters:
            return True
        latin_count: int = len(LATIN_LETTER_PATTERN.findall(letters))
        return latin_count / len(letters) > LATIN_RATIO_THRESHOLD

    @staticmethod
    def detect(text: str) -> DetectionResult:
        """Detect the script and a default language for the text.

        Args:
            text (str): The text to classify.

        Returns:
            DetectionResult: The first matching script in priority order, Latin/English for
            predominantly Latin text, or an ambiguous Latin result when nothing can be determined.
        """
        text = StringUtils.require_str(text)
        for candidate in SCRIPT_PATTERNS:
            if candidate.pattern.search(text):
                return DetectionResult(
                    language=candidate.language,
                    script=candidate.script,
                    confidence=SCRIPT_MATCH_CONFIDENCE,
                )

        letters: str = StringUtils.strip_non_letters(EmojiHandler.strip_emoji(text))
        if letters and ScriptDetector.is_latin_text(text):
            return DetectionResult(language=DEFAULT_LANGUAGE, script="Latin", confidence=LATIN_CONFIDENCE)

        logger.debug("Script detection ambiguous for text of length %d", len(text))
        return DetectionResult(
            language=DEFAULT_LANGUAGE,
            script="Latin",
            confidence=AMBIGUOUS_CONFIDENCE,
            ambiguous=True,
        )
