"""Language classifier for short, live-typed text.

Each profile scores the input in three passes:

1. +2 per character whose code point falls inside one of the profile's
   script ranges (at most once per character, first matching range wins)
2. +3 per occurrence of each character sequence in the lower-cased text
3. +5 per whole-word occurrence of each word form

The highest score wins; ties go to the profile declared first. Inputs shorter
than MIN_TEXT_LENGTH and inputs nothing matches fall back to English.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import NamedTuple

from keylang.models import DEFAULT_DISPLAY_NAME, DEFAULT_LANGUAGE, LanguageInfo, LanguageProfile
from keylang.profiles import BUILTIN_TABLE, ProfileTable
from keylang.utils.logging import get_logger

log = get_logger(__name__)

MIN_TEXT_LENGTH = 3

SCRIPT_WEIGHT = 2
SEQUENCE_WEIGHT = 3
WORD_WEIGHT = 5


class _CompiledProfile(NamedTuple):
    code: str
    ranges: tuple[tuple[int, int], ...]
    sequences: tuple[str, ...]
    words: tuple[re.Pattern[str], ...]


def _compile_word(word: str) -> re.Pattern[str]:
    # Boundary = string edge or any non-word neighbour, Unicode-aware
    return re.compile(rf"(?<!\w){re.escape(word)}(?!\w)")


def _compile(profile: LanguageProfile) -> _CompiledProfile:
    return _CompiledProfile(
        code=profile.code,
        ranges=profile.script_ranges,
        sequences=profile.char_sequences,
        words=tuple(_compile_word(w) for w in profile.word_forms),
    )


class LanguageClassifier:
    """Scores text against every profile of a table.

    Matchers are compiled once here; ``detect`` and ``score`` are pure and
    safe to call from any thread.
    """

    def __init__(self, table: ProfileTable | None = None) -> None:
        self.table = table if table is not None else BUILTIN_TABLE
        self._compiled = tuple(_compile(p) for p in self.table)

    def score(self, text: str) -> dict[str, int]:
        """Return the score of every profile, in table order."""
        scores = {p.code: 0 for p in self._compiled}
        if not text:
            return scores

        # Identical characters score identically, so count each one once
        char_counts = Counter(ord(ch) for ch in text)
        lowered = text.lower()

        for profile in self._compiled:
            total = 0
            for cp, count in char_counts.items():
                if any(low <= cp <= high for low, high in profile.ranges):
                    total += SCRIPT_WEIGHT * count
            for seq in profile.sequences:
                total += SEQUENCE_WEIGHT * lowered.count(seq)
            for pattern in profile.words:
                total += WORD_WEIGHT * len(pattern.findall(lowered))
            scores[profile.code] = total

        return scores

    def detect(self, text: str) -> str:
        """Return the code of the best matching language."""
        if len(text) < MIN_TEXT_LENGTH:
            return DEFAULT_LANGUAGE

        scores = self.score(text)
        best_code = DEFAULT_LANGUAGE
        best_score = 0
        for code, value in scores.items():
            if value > best_score:
                best_code, best_score = code, value

        log.debug("detect: %s (%s) scores=%s", best_code, best_score, scores)
        return best_code

    def format_name(self, code: str) -> str:
        profile = self.table.lookup(code)
        if profile is not None:
            return profile.display_name
        fallback = self.table.lookup(DEFAULT_LANGUAGE)
        return fallback.display_name if fallback is not None else DEFAULT_DISPLAY_NAME

    def supported_languages(self) -> list[LanguageInfo]:
        return [LanguageInfo(code=p.code, display_name=p.display_name) for p in self.table]


_default = LanguageClassifier()


def get_classifier(table: ProfileTable | None = None) -> LanguageClassifier:
    """Classifier for ``table``, or the shared one over the built-in table."""
    if table is None or table is BUILTIN_TABLE:
        return _default
    return LanguageClassifier(table)


def detect(text: str) -> str:
    return _default.detect(text)


def score(text: str) -> dict[str, int]:
    return _default.score(text)


def format_name(code: str) -> str:
    """Display name for a language code, falling back to English."""
    return _default.format_name(code)


def list_supported_languages() -> list[LanguageInfo]:
    return _default.supported_languages()
