"""Dictionary pivot translation.

Text is translated in two legs through English: source to English with the source language's
phrase dictionary, then English to target with the target language's reverse dictionary. Each leg
first tries the whole phrase, then substitutes sub-phrases longest first and finally single words.
When the target leg finds nothing, script conversion is used so the reader at least sees the text
in a familiar script. Romanised source text is spell corrected before either step.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, NamedTuple

from core.script.const_languages import DEFAULT_LANGUAGE
from core.script.detector import ScriptDetector
from models.translation_models import TranslationResult
from utils.logger_utils import LoggerUtils
from utils.string_utils import StringUtils

if TYPE_CHECKING:
    import logging

    from core.dictionary.corrections import SpellCorrector
    from core.dictionary.store import PhraseDictionary, PhraseDictionaryStore, PhraseTable
    from core.script.registry import LanguageRegistry
    from core.script.transliterator import Transliterator
    from models.language_models import DetectionResult
    from models.translation_models import TranslationMethod

__all__: list[str] = ["PivotTranslator"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class _LegResult(NamedTuple):
    text: str
    exact: bool
    hits: int


class PivotTranslator:
    """Pure, reentrant English-pivot translator.

    Attributes:
        EXACT_CONFIDENCE (float): Confidence when both legs were full-phrase hits.
        PASSTHROUGH_CONFIDENCE (float): Confidence when nothing could be changed.
        SAME_LANGUAGE_CONFIDENCE (float): Confidence of a same-language pass-through.
        registry (LanguageRegistry): Language resolution.
        dictionaries (PhraseDictionaryStore): Phrase dictionaries.
        transliterator (Transliterator): Script converter used by the fallbacks.
        fallback_confidence (float): Confidence of partial, transliterated or romanised output.
        corrector (SpellCorrector | None): Spell correction applied to romanised source text.
    """

    EXACT_CONFIDENCE: ClassVar[float] = 1.0
    PASSTHROUGH_CONFIDENCE: ClassVar[float] = 0.5
    SAME_LANGUAGE_CONFIDENCE: ClassVar[float] = 1.0
    BLANK_CONFIDENCE: ClassVar[float] = 0.0

    def __init__(
        self,
        registry: LanguageRegistry,
        dictionaries: PhraseDictionaryStore,
        transliterator: Transliterator,
        fallback_confidence: float = 0.85,
        corrector: SpellCorrector | None = None,
    ) -> None:
        self.registry: LanguageRegistry = registry
        self.dictionaries: PhraseDictionaryStore = dictionaries
        self.transliterator: Transliterator = transliterator
        self.fallback_confidence: float = fallback_confidence
        self.corrector: SpellCorrector | None = corrector

    def translate(self, text: str, source_language: str, target_language: str) -> TranslationResult:
        """Translate text from the source language to the target language.

        Args:
            text (str): Text to translate.
            source_language (str): Source language identifier.
            target_language (str): Target language identifier.

        Returns:
            TranslationResult: The translation. Never raises for unknown words or languages.

        Raises:
            TypeError: If text or a language identifier is not a string.
            ValueError: If a language identifier is empty.
        """
        text = StringUtils.require_str(text)
        source: str = self.registry.normalize(source_language)
        target: str = self.registry.normalize(target_language)

        if source == target:
            return TranslationResult.passthrough(text, source, target, confidence=self.SAME_LANGUAGE_CONFIDENCE)
        if not text.strip():
            return TranslationResult.passthrough(text, source, target, confidence=self.BLANK_CONFIDENCE)

        working: str = text
        if self.corrector is not None and source != DEFAULT_LANGUAGE:
            working = self.corrector.correct(text, source)

        to_english: _LegResult
        if source == DEFAULT_LANGUAGE:
            to_english = _LegResult(working, exact=True, hits=0)
        else:
            to_english = self._run_leg(self._table(source, to_english=True), working)

        from_english: _LegResult
        if target == DEFAULT_LANGUAGE:
            from_english = _LegResult(to_english.text, exact=True, hits=0)
        else:
            from_english = self._run_leg(self._table(target, to_english=False), to_english.text)

        output: str = from_english.text
        method: TranslationMethod = "dictionary"
        target_hits: int = to_english.hits if target == DEFAULT_LANGUAGE else from_english.hits
        keeps_english: bool = to_english.hits > 0 and self.registry.is_latin_language(target)
        if target_hits == 0 and not keeps_english:
            fallback: tuple[str, TranslationMethod] | None = self._script_fallback(working, source, target)
            if fallback is not None:
                output, method = fallback
                logger.warning("Dictionary miss for %s -> %s, using %s", source, target, method)

        # A spelling correction alone is not a translation
        if output in {text, working}:
            logger.debug("No translation achieved for %s -> %s", source, target)
            return TranslationResult.passthrough(text, source, target, confidence=self.PASSTHROUGH_CONFIDENCE)

        confidence: float = self.fallback_confidence
        if to_english.exact and from_english.exact and method == "dictionary":
            confidence = self.EXACT_CONFIDENCE
        return TranslationResult(
            text=output,
            original_text=text,
            source_language=source,
            target_language=target,
            is_translated=True,
            confidence=confidence,
            method=method,
        )

    def _table(self, language: str, *, to_english: bool) -> PhraseTable | None:
        dictionary: PhraseDictionary | None = self.dictionaries.get(language)
        if dictionary is None:
            return None
        return dictionary.to_english if to_english else dictionary.from_english

    @staticmethod
    def _run_leg(table: PhraseTable | None, text: str) -> _LegResult:
        """Translate one leg with a phrase table.

        Returns:
            _LegResult: The text of the leg, whether it was a full-phrase hit, and the number of
            substitutions. Without substitutions the text is returned unchanged.
        """
        if table is None or not table.max_words:
            return _LegResult(text, exact=False, hits=0)

        compressed: str = StringUtils.compress_blanks(text)
        whole: str | None = table.lookup(StringUtils.normalize_phrase(compressed))
        if whole is not None:
            return _LegResult(whole, exact=True, hits=1)

        lead, core, trail = StringUtils.split_punctuation(compressed)
        if core and core != compressed:
            whole = table.lookup(StringUtils.normalize_phrase(core))
            if whole is not None:
                return _LegResult(f"{lead}{whole}{trail}", exact=True, hits=1)

        tokens: list[tuple[str, str, str]] = [StringUtils.split_punctuation(token) for token in compressed.split(" ")]
        output: list[str] = []
        hits: int = 0
        index: int = 0
        while index < len(tokens):
            span: int = PivotTranslator._match_span(table, tokens, index)
            if span:
                cores: str = " ".join(token[1] for token in tokens[index : index + span])
                translation: str = table.entries[StringUtils.normalize_phrase(cores)]
                output.append(f"{tokens[index][0]}{translation}{tokens[index + span - 1][2]}")
                hits += 1
                index += span
            else:
                output.append("".join(tokens[index]))
                index += 1

        if not hits:
            return _LegResult(text, exact=False, hits=0)
        return _LegResult(" ".join(output), exact=False, hits=hits)

    @staticmethod
    def _match_span(table: PhraseTable, tokens: list[tuple[str, str, str]], start: int) -> int:
        """Find the longest run of tokens from start that is a dictionary key.

        Punctuation may surround the run but not split it.

        Returns:
            int: The number of tokens matched, 0 when nothing matched.
        """
        longest: int = min(table.max_words, len(tokens) - start)
        for span in range(longest, 0, -1):
            window: list[tuple[str, str, str]] = tokens[start : start + span]
            if any(not core for _, core, _ in window):
                continue
            if any(trail for _, _, trail in window[:-1]) or any(lead for lead, _, _ in window[1:]):
                continue
            key: str = StringUtils.normalize_phrase(" ".join(core for _, core, _ in window))
            if table.lookup(key) is not None:
                return span
        return 0

    def _script_fallback(self, text: str, source: str, target: str) -> tuple[str, TranslationMethod] | None:
        """Render the original text in the target's script when no translation was found."""
        target_is_latin: bool = self.registry.is_latin_language(target)
        if ScriptDetector.is_latin_text(text):
            if target_is_latin:
                return None
            return self.transliterator.transliterate(text, target), "transliteration"

        romanised: str = self.transliterator.to_latin(text, self._romanisation_language(text, source))
        if target_is_latin:
            return romanised, "romanization"
        if self.registry.script_of(target) == self.registry.script_of(source):
            return None
        return self.transliterator.transliterate(romanised, target), "transliteration"

    def _romanisation_language(self, text: str, source: str) -> str:
        """Choose the table used to romanise text, trusting the text's script over the declared source."""
        detected: DetectionResult = ScriptDetector.detect(text)
        if detected.ambiguous or detected.script == self.registry.script_of(source):
            return source
        return detected.language
