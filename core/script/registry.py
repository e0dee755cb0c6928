"""Language registry.

Resolves user-facing language identifiers (names, ISO codes, native names and common alternates)
to canonical LanguageProfile entries and answers script questions about them.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, cast

from core.script.const_languages import DIALECT_FALLBACKS, LANGUAGE_ALIASES, LANGUAGE_ROWS
from models.language_models import SCRIPT_FAMILIES, LanguageProfile
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterator, Mapping

    from models.language_models import ScriptFamily

__all__: list[str] = ["LanguageRegistry"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class LanguageRegistry:
    """Read-only table of supported languages.

    Unknown identifiers are not an error: they normalise to themselves and are treated as
    Latin-script languages without a phrase dictionary.
    """

    def __init__(
        self,
        rows: tuple[tuple[str, str, str, str, str], ...] = LANGUAGE_ROWS,
        aliases: Mapping[str, str] = LANGUAGE_ALIASES,
        dialect_fallbacks: Mapping[str, str] = DIALECT_FALLBACKS,
    ) -> None:
        profiles: dict[str, LanguageProfile] = {}
        lookup: dict[str, str] = {}

        for name, code, native_name, script, direction in rows:
            if script not in SCRIPT_FAMILIES:
                msg: str = f"Unknown script family '{script}' for language '{name}'"
                raise ValueError(msg)
            extra: tuple[str, ...] = tuple(alias for alias, target in aliases.items() if target == name)
            profiles[name] = LanguageProfile(
                name=name,
                code=code,
                native_name=native_name,
                script=cast("ScriptFamily", script),
                direction="rtl" if direction == "rtl" else "ltr",
                aliases=extra,
            )

        # Later assignments win: canonical name > code > alias > native name
        for profile in profiles.values():
            lookup.setdefault(profile.native_name.casefold(), profile.name)
        for alias, target in aliases.items():
            if target in profiles:
                lookup[alias.casefold()] = target
            else:
                logger.warning("Alias '%s' refers to unknown language '%s'", alias, target)
        for profile in profiles.values():
            lookup[profile.code.casefold()] = profile.name
        for profile in profiles.values():
            lookup[profile.name] = profile.name

        self._profiles: Mapping[str, LanguageProfile] = MappingProxyType(profiles)
        self._lookup: Mapping[str, str] = MappingProxyType(lookup)
        self._dialect_fallbacks: Mapping[str, str] = MappingProxyType(dict(dialect_fallbacks))
        logger.debug("Language registry built with %d languages and %d identifiers", len(profiles), len(lookup))

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, language: object) -> bool:
        return isinstance(language, str) and self.normalize(language) in self._profiles

    def normalize(self, language: str) -> str:
        """Resolve a language identifier to its canonical name.

        Args:
            language (str): Name, ISO code, native name or alternate spelling.

        Returns:
            str: The canonical name, or the trimmed lower-case input when it is unknown.

        Raises:
            TypeError: If language is not a string.
            ValueError: If language is empty.
        """
        if not isinstance(language, str):
            msg: str = f"Language identifier must be str, not {type(language).__name__}"
            raise TypeError(msg)
        key: str = language.strip().casefold()
        if not key:
            msg = "Language identifier must not be empty"
            raise ValueError(msg)
        return self._lookup.get(key, key)

    def get(self, language: str) -> LanguageProfile | None:
        return self._profiles.get(self.normalize(language))

    def script_of(self, language: str) -> ScriptFamily:
        """Return the script family of a language. Unknown languages are treated as Latin."""
        profile: LanguageProfile | None = self.get(language)
        return profile.script if profile is not None else "Latin"

    def is_latin_language(self, language: str) -> bool:
        return self.script_of(language) == "Latin"

    def is_rtl(self, language: str) -> bool:
        profile: LanguageProfile | None = self.get(language)
        return profile is not None and profile.is_rtl

    def is_same_language(self, first: str, second: str) -> bool:
        return self.normalize(first) == self.normalize(second)

    def needs_script_conversion(self, language: str) -> bool:
        """Check whether Latin input must be converted to display in the language's script."""
        return not self.is_latin_language(language)

    def dictionary_language(self, language: str) -> str:
        """Choose the language whose phrase dictionary serves the given language.

        Args:
            language (str): Any language identifier.

        Returns:
            str: The dialect fallback language, or the canonical language itself.
        """
        canonical: str = self.normalize(language)
        return self._dialect_fallbacks.get(canonical, canonical)

    def languages(self) -> Iterator[LanguageProfile]:
        yield from self._profiles.values()
