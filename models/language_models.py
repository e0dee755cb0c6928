"""Models for languages, scripts and script detection.

Defines LanguageProfile, ScriptBlock and DetectionResult together with the closed set of
script families known to the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Final, Literal

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__: list[str] = [
    "SCRIPT_FAMILIES",
    "DetectionResult",
    "Direction",
    "LanguageProfile",
    "ScriptBlock",
    "ScriptFamily",
]

type ScriptFamily = Literal[
    "Latin",
    "Devanagari",
    "Bengali",
    "Tamil",
    "Telugu",
    "Kannada",
    "Malayalam",
    "Gujarati",
    "Gurmukhi",
    "Odia",
    "Sinhala",
    "Arabic",
    "Hebrew",
    "CJK",
    "Thai",
    "Lao",
    "Khmer",
    "Myanmar",
    "Tibetan",
    "Cyrillic",
    "Greek",
    "Armenian",
    "Georgian",
    "Ethiopic",
]

type Direction = Literal["ltr", "rtl"]

SCRIPT_FAMILIES: Final[tuple[str, ...]] = (
    "Latin",
    "Devanagari",
    "Bengali",
    "Tamil",
    "Telugu",
    "Kannada",
    "Malayalam",
    "Gujarati",
    "Gurmukhi",
    "Odia",
    "Sinhala",
    "Arabic",
    "Hebrew",
    "CJK",
    "Thai",
    "Lao",
    "Khmer",
    "Myanmar",
    "Tibetan",
    "Cyrillic",
    "Greek",
    "Armenian",
    "Georgian",
    "Ethiopic",
)


@dataclass(frozen=True)
class LanguageProfile:
    """Static description of a supported language.

    Attributes:
        name (str): Canonical lower-case language name, e.g. 'hindi'.
        code (str): ISO 639-1 or ISO 639-3 code.
        native_name (str): Name of the language in its own script.
        script (ScriptFamily): Script family used to write the language.
        direction (Direction): Writing direction.
        aliases (tuple[str, ...]): Additional identifiers that resolve to this language.
    """

    name: str
    code: str
    native_name: str
    script: ScriptFamily
    direction: Direction = "ltr"
    aliases: tuple[str, ...] = ()

    @property
    def is_latin(self) -> bool:
        return self.script == "Latin"

    @property
    def is_rtl(self) -> bool:
        return self.direction == "rtl"


@dataclass(frozen=True)
class ScriptBlock:
    """Latin-to-native mapping tables for one script family.

    The mappings are wrapped in read-only proxies on construction. Key lengths are derived once
    so that the transliterator can try the longest cluster first.

    Attributes:
        name (str): Table name, the script family or a sub-script such as 'Kana'.
        consonants (Mapping[str, str]): Latin cluster to native consonant.
        vowels (Mapping[str, str]): Latin vowel cluster to independent vowel.
        modifiers (Mapping[str, str]): Latin vowel cluster to dependent vowel sign.
        virama (str | None): Vowel killer sign, if the script has one.
        max_consonant_len (int): Length of the longest consonant key.
        max_vowel_len (int): Length of the longest vowel or modifier key.
    """

    name: str
    consonants: Mapping[str, str]
    vowels: Mapping[str, str]
    modifiers: Mapping[str, str] = field(default_factory=dict)
    virama: str | None = None
    max_consonant_len: int = field(init=False)
    max_vowel_len: int = field(init=False)

    def __post_init__(self) -> None:
        # Frozen dataclass: assign through object.__setattr__
        object.__setattr__(self, "consonants", MappingProxyType(dict(self.consonants)))
        object.__setattr__(self, "vowels", MappingProxyType(dict(self.vowels)))
        object.__setattr__(self, "modifiers", MappingProxyType(dict(self.modifiers)))
        object.__setattr__(self, "max_consonant_len", max(map(len, self.consonants), default=0))
        object.__setattr__(
            self, "max_vowel_len", max(map(len, (*self.vowels, *self.modifiers)), default=0)
        )


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of script detection.

    Attributes:
        language (str): Default language of the detected script.
        script (ScriptFamily): Detected script family.
        confidence (float): Detection confidence (0.0 to 1.0).
        ambiguous (bool): True when no script could be determined.
    """

    language: str
    script: ScriptFamily
    confidence: float
    ambiguous: bool = False
