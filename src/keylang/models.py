"""Pydantic models shared by the profile table, classifier and tracker."""

from __future__ import annotations

from pydantic import BaseModel, field_validator

MAX_CODE_POINT = 0x10FFFF

DEFAULT_LANGUAGE = "en"
DEFAULT_DISPLAY_NAME = "English"


def _unique_lowered(values: tuple[str, ...], field: str) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for value in values:
        if not value:
            raise ValueError(f"{field} entries must be non-empty")
        seen.setdefault(value.lower(), None)
    return tuple(seen)


class LanguageProfile(BaseModel):
    """Static reference data for one language.

    Sequences and words are stored lower-cased and de-duplicated in
    declaration order, since matching runs against lower-cased text.
    """

    code: str
    display_name: str
    script_ranges: tuple[tuple[int, int], ...] = ()
    char_sequences: tuple[str, ...] = ()
    word_forms: tuple[str, ...] = ()

    model_config = {"frozen": True}

    @field_validator("code", "display_name")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("script_ranges")
    @classmethod
    def _valid_ranges(cls, ranges: tuple[tuple[int, int], ...]) -> tuple[tuple[int, int], ...]:
        for low, high in ranges:
            if not 0 <= low <= high <= MAX_CODE_POINT:
                raise ValueError(f"invalid code point range ({low}, {high})")
        return ranges

    @field_validator("char_sequences")
    @classmethod
    def _valid_sequences(cls, values: tuple[str, ...]) -> tuple[str, ...]:
        return _unique_lowered(values, "char_sequences")

    @field_validator("word_forms")
    @classmethod
    def _valid_words(cls, values: tuple[str, ...]) -> tuple[str, ...]:
        return _unique_lowered(values, "word_forms")


class LanguageInfo(BaseModel):
    code: str
    display_name: str


class KeyEvent(BaseModel):
    """A single key press or release as reported by the keyboard source."""

    key: str
    caps_lock: bool = False
    ctrl: bool = False
    alt: bool = False
    meta: bool = False

    @property
    def is_character(self) -> bool:
        # Named keys ("Enter", "Shift", ...) and chords never reach the window
        return len(self.key) == 1 and not (self.ctrl or self.alt or self.meta)


class KeyboardStatus(BaseModel):
    caps_lock: bool = False
    language: str = DEFAULT_LANGUAGE
    is_typing: bool = False
    last_input: str = ""
