"""Language profile table.

Built-in profiles are declared below as plain data and validated into an
immutable ``ProfileTable`` at import. Custom tables can be loaded from a
YAML file; they go through the same validation and a broken file never
yields a partial table.

YAML layout (a bare list of profiles is accepted too):

    profiles:
      - code: eo
        display_name: Esperanto
        script_ranges: [[65, 90], [97, 122], [264, 265]]
        char_sequences: [aj, oj]
        word_forms: [kaj, estas]
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

import yaml
from pydantic import ValidationError

from keylang.models import DEFAULT_DISPLAY_NAME, DEFAULT_LANGUAGE, LanguageProfile
from keylang.utils.logging import BOLD, RESET, get_logger

log = get_logger(__name__)

_BASIC_LATIN = [(65, 90), (97, 122)]  # A-Z, a-z
_LATIN_1_LETTERS = [(192, 255)]  # À-ÿ

BUILTIN_PROFILES: list[dict] = [
    {
        "code": "en",
        "display_name": "English",
        "script_ranges": _BASIC_LATIN,
        "char_sequences": ["th", "he", "in", "er", "an", "ed", "nd", "to", "en", "ti", "ing", "wh"],
        "word_forms": [
            "the", "and", "you", "that", "was", "for", "are", "with", "his", "they",
            "this", "is", "of", "it", "have", "what",
        ],
    },
    {
        "code": "es",
        "display_name": "Spanish",
        "script_ranges": _BASIC_LATIN + _LATIN_1_LETTERS,
        "char_sequences": ["ión", "ado", "eda", "que", "con", "ent", "est", "par", "ero", "ada"],
        "word_forms": [
            "que", "una", "con", "para", "los", "del", "las", "por", "son", "sus",
            "el", "la", "es", "y", "en", "un", "este", "muy", "pero",
        ],
    },
    {
        "code": "fr",
        "display_name": "French",
        "script_ranges": _BASIC_LATIN + _LATIN_1_LETTERS,
        "char_sequences": ["ent", "tion", "ait", "que", "les", "eur", "ant", "lle", "ment", "ou", "ais", "eau", "oi"],
        "word_forms": [
            "que", "les", "des", "une", "pour", "avec", "son", "sur", "tout", "par",
            "le", "la", "et", "est", "un", "ce", "ceci", "je", "il", "pas", "dans", "qui",
        ],
    },
    {
        "code": "de",
        "display_name": "German",
        # A-Z, a-z, Ä Ö Ü ä ö ü ß
        "script_ranges": _BASIC_LATIN + [
            (196, 196), (214, 214), (220, 220), (228, 228), (246, 246), (252, 252), (223, 223),
        ],
        "char_sequences": ["der", "die", "und", "ich", "ist", "das", "sie", "den", "mit", "ein", "sch", "cht", "ei"],
        "word_forms": [
            "der", "die", "und", "ich", "ist", "das", "sie", "den", "mit", "ein",
            "nicht", "auf", "eine", "zu", "auch", "dies", "es",
        ],
    },
    {
        "code": "it",
        "display_name": "Italian",
        "script_ranges": _BASIC_LATIN + _LATIN_1_LETTERS,
        "char_sequences": ["ino", "ato", "nte", "che", "con", "per", "una", "del", "ell", "ess", "zio", "gli", "sto"],
        "word_forms": [
            "che", "una", "con", "per", "del", "gli", "dalla", "alla", "sono", "come",
            "il", "di", "è", "questo", "non", "della", "anche",
        ],
    },
    {
        "code": "pt",
        "display_name": "Portuguese",
        "script_ranges": _BASIC_LATIN + _LATIN_1_LETTERS,
        "char_sequences": ["ção", "ado", "que", "com", "por", "para", "uma", "dos", "ent", "est", "ão", "ões", "nh", "lh"],
        "word_forms": [
            "que", "uma", "com", "para", "dos", "por", "são", "sua", "como", "pela",
            "um", "em", "é", "não", "os", "mais", "este",
        ],
    },
    {
        "code": "ru",
        "display_name": "Russian",
        "script_ranges": [(1040, 1103)],  # А-я
        "char_sequences": ["ов", "ен", "ст", "то", "на", "не", "от", "ко", "но", "по"],
        "word_forms": ["что", "это", "как", "его", "она", "так", "все", "был", "том", "на", "не", "и", "в", "он", "мы"],
    },
    {
        "code": "zh",
        "display_name": "Chinese",
        # CJK Unified Ideographs, Extension A
        "script_ranges": [(19968, 40959), (13312, 19903)],
        "char_sequences": ["的", "一", "是", "在", "不", "了", "有", "和", "人", "这"],
        "word_forms": ["的", "一", "是", "在", "不", "了", "有", "和", "人", "这"],
    },
    {
        "code": "ja",
        "display_name": "Japanese",
        # Hiragana, Katakana, Kanji
        "script_ranges": [(12352, 12447), (12448, 12543), (19968, 40959)],
        "char_sequences": ["の", "に", "は", "を", "と", "が", "で", "て", "た", "し"],
        "word_forms": ["の", "に", "は", "を", "と", "が", "で", "て", "た", "し"],
    },
    {
        "code": "ar",
        "display_name": "Arabic",
        "script_ranges": [(1536, 1791)],
        "char_sequences": ["ال", "في", "من", "إلى", "على", "هذا", "هذه", "التي", "الذي", "أن"],
        "word_forms": ["في", "من", "إلى", "على", "هذا", "هذه", "التي", "الذي", "أن", "كان"],
    },
]


class ProfileTableError(ValueError):
    """Raised when profile data cannot be turned into a valid table."""


class ProfileTable:
    """Read-only, ordered collection of language profiles."""

    def __init__(self, profiles: Iterable[LanguageProfile | dict]) -> None:
        validated: list[LanguageProfile] = []
        for index, raw in enumerate(profiles):
            if isinstance(raw, LanguageProfile):
                validated.append(raw)
                continue
            try:
                validated.append(LanguageProfile.model_validate(raw))
            except ValidationError as e:
                raise ProfileTableError(f"Invalid profile at index {index}: {e}") from e

        by_code: dict[str, LanguageProfile] = {}
        for profile in validated:
            if profile.code in by_code:
                raise ProfileTableError(f"Duplicate language code: {profile.code!r}")
            by_code[profile.code] = profile

        self._profiles = tuple(validated)
        self._by_code = by_code

    def lookup(self, code: str) -> LanguageProfile | None:
        return self._by_code.get(code)

    def all(self) -> tuple[LanguageProfile, ...]:
        return self._profiles

    @property
    def codes(self) -> list[str]:
        return [p.code for p in self._profiles]

    def __iter__(self) -> Iterator[LanguageProfile]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def __repr__(self) -> str:
        return f"ProfileTable({', '.join(self.codes)})"


BUILTIN_TABLE = ProfileTable(BUILTIN_PROFILES)


def load_profile_table(path: str | Path, include_builtin: bool = False) -> ProfileTable:
    """Build a table from a YAML profile file.

    With include_builtin the built-in profiles come first, so they keep
    winning ties against custom ones.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ProfileTableError(f"Cannot read profile file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ProfileTableError(f"Malformed YAML in {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get("profiles")
    if not isinstance(data, list):
        raise ProfileTableError(f"{path} must contain a list of profiles")

    profiles: list[LanguageProfile | dict] = list(BUILTIN_TABLE) if include_builtin else []
    profiles.extend(data)
    table = ProfileTable(profiles)
    log.info(f"{BOLD}Loaded {len(data)} profile(s){RESET} from {path} ({len(table)} total)")
    return table
