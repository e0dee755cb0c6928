from __future__ import annotations

import re
import unicodedata
from typing import Any, Final

from models.re_models import URL_PATTERN

__all__: list[str] = ["StringUtils"]

CACHE_KEY_TEXT_LENGTH: Final[int] = 100  # Number of characters. Set to 0 or negative for no limit.

# Unicode general categories removed before measuring the share of Latin letters.
# P: punctuation, S: symbols, Z: separators, N: numbers, C: control/format/unassigned.
_NON_LETTER_CATEGORIES: Final[tuple[str, ...]] = ("P", "S", "Z", "N", "C")


class StringUtils:
    """Utility class for string manipulation and processing.

    Provides static methods for common string operations such as ensuring string type,
    compressing spaces, splitting off punctuation, removing URLs and building cache keys.
    """

    @staticmethod
    def ensure_str(value: str | None) -> str:
        """Ensure that the value is a string, returning an empty string if None.

        Note: Does not use strip() to preserve significant whitespace.

        Args:
            value (str | None): The value to ensure as a string.

        Returns:
            str: The value as a string, or empty string if None.
        """
        if not isinstance(value, str):
            value = str(value) if value is not None else ""
        return value

    @staticmethod
    def require_str(value: object, name: str = "text") -> str:
        """Return the value if it is a string.

        Args:
            value (object): The value to check.
            name (str): Argument name used in the error message.

        Returns:
            str: The value itself.

        Raises:
            TypeError: If the value is not a string.
        """
        if not isinstance(value, str):
            msg: str = f"'{name}' must be str, not {type(value).__name__}"
            raise TypeError(msg)
        return value

    @staticmethod
    def compress_blanks(value: str) -> str:
        """Compress multiple consecutive spaces into a single space.

        Ensures the input is a string and removes leading and trailing whitespace.

        Args:
            value (str): The string to compress.

        Returns:
            str: The string with multiple spaces compressed to single spaces.
        """
        value = StringUtils.ensure_str(value)
        return " ".join(value.split())

    @staticmethod
    def normalize_phrase(value: str) -> str:
        """Normalize a phrase for dictionary lookup.

        Applies NFC normalization, compresses blanks and case-folds the result.

        Args:
            value (str): The phrase to normalize.

        Returns:
            str: The lookup form of the phrase.
        """
        return StringUtils.compress_blanks(StringUtils.normalize_text(StringUtils.ensure_str(value))).casefold()

    @staticmethod
    def split_punctuation(token: str) -> tuple[str, str, str]:
        """Split leading and trailing punctuation off a token.

        Example:
            '"hello!"' -> ('"', 'hello', '!"')

        Args:
            token (str): A whitespace-free token.

        Returns:
            tuple[str, str, str]: Leading punctuation, core, trailing punctuation.
        """
        start: int = 0
        end: int = len(token)
        while start < end and unicodedata.category(token[start]).startswith("P"):
            start += 1
        while end > start and unicodedata.category(token[end - 1]).startswith("P"):
            end -= 1
        return token[:start], token[start:end], token[end:]

    @staticmethod
    def strip_non_letters(value: str) -> str:
        """Remove whitespace, digits, punctuation and symbols.

        Letters and combining marks are kept, so vowel signs of Brahmic scripts survive.

        Args:
            value (str): The string to filter.

        Returns:
            str: Only the letter-like characters of the input.
        """
        return "".join(
            char for char in value if not unicodedata.category(char).startswith(_NON_LETTER_CATEGORIES)
        )

    @staticmethod
    def remove_url(value: str) -> str:
        """Remove URL-like strings from the given string.

        Finds and removes URLs while preserving the string length by replacing
        URL characters with spaces.

        Args:
            value (str): The string to process.

        Returns:
            str: The string with URLs replaced by spaces.
        """
        value = StringUtils.ensure_str(value)
        if not value:
            return value

        urls: set[str | Any] = {match.group(1) for match in re.finditer(URL_PATTERN, value)}
        for url in sorted(urls, key=len, reverse=True):
            value = value.replace(url, " " * len(url))
        return value

    @staticmethod
    def generate_cache_key(
        text: str,
        source_lang: str,
        target_lang: str,
        text_length: int = CACHE_KEY_TEXT_LENGTH,
    ) -> str:
        """Generate a cache key for a transformation request.

        The key has the form ``"<source>:<target>:<case-folded text prefix>"``. Case variants and long
        messages with a common prefix share a key, so a cached result must be checked against its
        original text before use.

        Args:
            text (str): The source text.
            source_lang (str): Canonical source language.
            target_lang (str): Canonical target language.
            text_length (int): Maximum number of characters of text in the key. 0 or negative for no limit.

        Returns:
            str: The cache key.
        """
        folded: str = StringUtils.normalize_text(StringUtils.ensure_str(text)).casefold()
        if text_length > 0:
            folded = folded[:text_length]
        return f"{source_lang}:{target_lang}:{folded}"

    @staticmethod
    def normalize_text(text: str) -> str:
        """Normalize text using Unicode NFC normalization.

        Args:
            text (str): Text to normalize.

        Returns:
            str: Normalized text.
        """
        return unicodedata.normalize("NFC", text)
