import logging

import pytest

from keylang.models import DEFAULT_LANGUAGE, KeyboardStatus
from keylang.profiles import BUILTIN_TABLE, ProfileTable
from keylang.samples import SAMPLE_TEXTS
from keylang.text.classifier import (
    LanguageClassifier,
    detect,
    format_name,
    get_classifier,
    list_supported_languages,
    score,
)

LATIN_CODES = ["es", "fr", "de", "it", "pt"]


def test_deterministic(sample_french_text):
    assert detect(sample_french_text) == detect(sample_french_text)
    assert score(sample_french_text) == score(sample_french_text)


@pytest.mark.parametrize("text", ["", "a", "ж", "你好", "ab", "\U0001F600\U0001F600"])
def test_short_input_defaults_to_english(text):
    assert detect(text) == "en"


def test_no_match_defaults_to_english():
    assert all(v == 0 for v in score("123456").values())
    assert detect("123456") == "en"
    assert detect("!!! ??? ...") == "en"


def test_unknown_script_is_harmless():
    # Hangul is in no profile
    assert detect("안녕하세요 세계") == "en"


def test_script_dominance(sample_cyrillic_run):
    assert detect(sample_cyrillic_run) == "ru"
    assert score(sample_cyrillic_run)["ru"] == 100


def test_word_matches_outweigh_script_overlap():
    scores = score("the the the")
    # 9 Latin letters, "th" and "he" three times each, "the" three times
    assert scores["en"] == 9 * 2 + 6 * 3 + 3 * 5
    for code in LATIN_CODES:
        assert scores["en"] > scores[code]
    assert detect("the the the") == "en"


def test_script_range_counts_once_per_character():
    table = ProfileTable([
        {"code": "xx", "display_name": "Overlap", "script_ranges": [(97, 122), (97, 97)]},
    ])
    assert LanguageClassifier(table).score("aaa")["xx"] == 6


def test_astral_characters_count_once():
    table = ProfileTable([
        {"code": "xx", "display_name": "Emoji", "script_ranges": [(0x1F600, 0x1F64F)]},
    ])
    assert LanguageClassifier(table).score("\U0001F600\U0001F601\U0001F602")["xx"] == 6


def test_sequences_count_non_overlapping(word_only_table):
    classifier = LanguageClassifier(word_only_table)
    assert classifier.score("xyxyxy")["bb"] == 9
    assert classifier.score("XYZ")["bb"] == 3


def test_word_boundary(word_only_table):
    classifier = LanguageClassifier(word_only_table)
    assert classifier.score("reason")["aa"] == 0
    assert classifier.score("sonnet")["aa"] == 0
    assert classifier.score("son")["aa"] == 5
    assert classifier.score("son, reason. Son!")["aa"] == 10


def test_builtin_word_boundary():
    # "son" is a Spanish and French word form; "reason" only earns script points
    scores = score("reason")
    assert scores["es"] == 12
    assert scores["fr"] == 12
    assert score("son")["es"] == 6 + 5


def test_tie_goes_to_first_declared():
    table = ProfileTable([
        {"code": "aa", "display_name": "A", "script_ranges": [(97, 122)]},
        {"code": "bb", "display_name": "B", "script_ranges": [(97, 122)]},
    ])
    assert LanguageClassifier(table).detect("hello") == "aa"


def test_latin_tie_resolves_in_table_order():
    # Accented letters score equally for es, fr, it and pt
    assert detect("ààà") == "es"


def test_all_zero_custom_table_falls_back():
    table = ProfileTable([{"code": "zz", "display_name": "Zed", "word_forms": ["zed"]}])
    assert LanguageClassifier(table).detect("nothing here") == "en"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Bonjour le monde! Ceci est un exemple de texte en français.", "fr"),
        ("Hallo Welt! Dies ist ein Beispieltext auf Deutsch.", "de"),
        ("你好世界！这是中文示例文本。", "zh"),
    ],
)
def test_end_to_end(text, expected):
    assert detect(text) == expected


@pytest.mark.parametrize("sample", SAMPLE_TEXTS, ids=lambda s: s.code)
def test_demo_samples(sample):
    assert detect(sample.text) == sample.code


def test_detect_ignores_case():
    assert detect("HALLO WELT! DIES IST EIN BEISPIELTEXT AUF DEUTSCH.") == "de"


def test_score_has_every_profile_in_order():
    assert list(score("hola").keys()) == BUILTIN_TABLE.codes


def test_format_name_round_trip():
    for profile in BUILTIN_TABLE:
        assert format_name(profile.code) == profile.display_name


def test_format_name_unknown_code():
    assert format_name("xx") == "English"
    assert format_name("") == "English"


def test_format_name_without_english_profile(word_only_table):
    assert LanguageClassifier(word_only_table).format_name("xx") == "English"


def test_list_supported_languages():
    languages = list_supported_languages()
    assert [lang.code for lang in languages] == BUILTIN_TABLE.codes
    assert languages[0].display_name == "English"
    assert list_supported_languages() == languages


def test_get_classifier_reuses_default():
    assert get_classifier() is get_classifier(BUILTIN_TABLE)


def test_detect_logs_scores_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="keylang")
    detect("Hallo Welt! Dies ist ein Beispieltext auf Deutsch.")
    record = next(r for r in caplog.records if r.name == "keylang.text.classifier")
    assert record.args[0] == "de"
    assert record.getMessage().startswith("detect: de (")


def test_detect_defers_formatting_when_debug_off(caplog):
    caplog.set_level(logging.INFO, logger="keylang")
    detect("Hallo Welt! Dies ist ein Beispieltext auf Deutsch.")
    assert not [r for r in caplog.records if r.name == "keylang.text.classifier"]


def test_status_default_language_matches_table_default():
    assert KeyboardStatus().language == DEFAULT_LANGUAGE == "en"
    assert DEFAULT_LANGUAGE in BUILTIN_TABLE
