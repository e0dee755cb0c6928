"""Regular expressions for script detection and chat text handling.

Unicode block patterns used by the script detector, the Latin-letter test used to decide whether
text is predominantly romanized, and patterns for spans that must survive transliteration untouched.
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

__all__: list[str] = [
    "ARABIC_PATTERN",
    "ARMENIAN_PATTERN",
    "BENGALI_PATTERN",
    "CYRILLIC_PATTERN",
    "DEVANAGARI_PATTERN",
    "ETHIOPIC_PATTERN",
    "GEORGIAN_PATTERN",
    "GREEK_PATTERN",
    "GUJARATI_PATTERN",
    "GURMUKHI_PATTERN",
    "HANGUL_PATTERN",
    "HAN_PATTERN",
    "HEBREW_PATTERN",
    "KANA_PATTERN",
    "KANNADA_PATTERN",
    "KHMER_PATTERN",
    "LAO_PATTERN",
    "LATIN_LETTER_PATTERN",
    "MALAYALAM_PATTERN",
    "MYANMAR_PATTERN",
    "ODIA_PATTERN",
    "PROTECTED_SPAN_PATTERN",
    "ROMAN_WORD_PATTERN",
    "SINHALA_PATTERN",
    "TAMIL_PATTERN",
    "TELUGU_PATTERN",
    "THAI_PATTERN",
    "TIBETAN_PATTERN",
    "URL_PATTERN",
]

# South Asian (Brahmic) blocks
DEVANAGARI_PATTERN: Final[Pattern[str]] = re.compile(r"[ऀ-ॿ]")
BENGALI_PATTERN: Final[Pattern[str]] = re.compile(r"[ঀ-৿]")
GURMUKHI_PATTERN: Final[Pattern[str]] = re.compile(r"[਀-੿]")
GUJARATI_PATTERN: Final[Pattern[str]] = re.compile(r"[઀-૿]")
ODIA_PATTERN: Final[Pattern[str]] = re.compile(r"[଀-୿]")
TAMIL_PATTERN: Final[Pattern[str]] = re.compile(r"[஀-௿]")
TELUGU_PATTERN: Final[Pattern[str]] = re.compile(r"[ఀ-౿]")
KANNADA_PATTERN: Final[Pattern[str]] = re.compile(r"[ಀ-೿]")
MALAYALAM_PATTERN: Final[Pattern[str]] = re.compile(r"[ഀ-ൿ]")
SINHALA_PATTERN: Final[Pattern[str]] = re.compile(r"[඀-෿]")

# CJK: Hiragana/Katakana, Hangul syllables and Jamo, CJK Unified Ideographs and Extension A
KANA_PATTERN: Final[Pattern[str]] = re.compile(r"[぀-ヿ]")
HANGUL_PATTERN: Final[Pattern[str]] = re.compile(r"[가-힯ᄀ-ᇿ]")
HAN_PATTERN: Final[Pattern[str]] = re.compile(r"[一-鿿㐀-䶿]")

# Mainland South-East Asia and Tibet
THAI_PATTERN: Final[Pattern[str]] = re.compile(r"[฀-๿]")
LAO_PATTERN: Final[Pattern[str]] = re.compile(r"[຀-໿]")
MYANMAR_PATTERN: Final[Pattern[str]] = re.compile(r"[က-႟]")
KHMER_PATTERN: Final[Pattern[str]] = re.compile(r"[ក-៿]")
TIBETAN_PATTERN: Final[Pattern[str]] = re.compile(r"[ༀ-࿿]")

# Right-to-left: Arabic with Arabic Supplement, Hebrew
ARABIC_PATTERN: Final[Pattern[str]] = re.compile(r"[؀-ۿݐ-ݿ]")
HEBREW_PATTERN: Final[Pattern[str]] = re.compile(r"[֐-׿]")

# Alphabets
CYRILLIC_PATTERN: Final[Pattern[str]] = re.compile(r"[Ѐ-ӿԀ-ԯ]")
GREEK_PATTERN: Final[Pattern[str]] = re.compile(r"[Ͱ-Ͽ]")
GEORGIAN_PATTERN: Final[Pattern[str]] = re.compile(r"[Ⴀ-ჿ]")
ARMENIAN_PATTERN: Final[Pattern[str]] = re.compile(r"[԰-֏]")
ETHIOPIC_PATTERN: Final[Pattern[str]] = re.compile(r"[ሀ-፿]")

# Basic Latin letters plus Latin-1 Supplement and Latin Extended-A/B letters
LATIN_LETTER_PATTERN: Final[Pattern[str]] = re.compile(r"[a-zA-ZÀ-ɏ]")

# Regular expressions that match URLs and URL-like appearances
# Examples: "http://example.com", "https://www.example.com/path", "www.example.com", "example.com/path"
# A bare dotted word such as "acha.thik" needs a scheme, "www." or a path to count as a URL
URL_PATTERN: Final[Pattern[str]] = re.compile(
    r"((?i:https?://|www\.)[a-zA-Z0-9\-]+(?:\.[a-zA-Z0-9\-]+)*(?::\d+)?(?:[/?#][^\s]*)?"
    r"|[a-zA-Z0-9\-]+(?:\.[a-zA-Z0-9\-]+)+/[^\s]*)"
)

# Spans copied verbatim by the transliterator: URLs and @mentions
# Example: "see www.example.com @friend_01"
PROTECTED_SPAN_PATTERN: Final[Pattern[str]] = re.compile(
    rf"{URL_PATTERN.pattern}|(?:(?<!\S)@[A-Za-z0-9_]{{2,25}})",
)

# A whole ASCII word of romanised text, not part of a longer word or contraction
# Example: "namste" in "namste, ji!" but not "ap" in "ap2" or "don't"
ROMAN_WORD_PATTERN: Final[Pattern[str]] = re.compile(r"(?<!\w)(?<!\w')[A-Za-z]+(?!\w)(?!'\w)")
