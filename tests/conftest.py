import pytest

from keylang.profiles import ProfileTable


@pytest.fixture
def sample_french_text():
    return "Bonjour le monde! Ceci est un exemple de texte en français."


@pytest.fixture
def sample_cyrillic_run():
    return "о" * 50


@pytest.fixture
def word_only_table():
    """Two profiles without script ranges, so only lexical matches score."""
    return ProfileTable([
        {"code": "aa", "display_name": "First", "word_forms": ["son"]},
        {"code": "bb", "display_name": "Second", "char_sequences": ["xy"]},
    ])


@pytest.fixture
def profiles_yaml(tmp_path):
    path = tmp_path / "profiles.yaml"
    path.write_text(
        "profiles:\n"
        "  - code: eo\n"
        "    display_name: Esperanto\n"
        "    script_ranges: [[65, 90], [97, 122], [264, 265], [284, 285], [364, 365]]\n"
        "    char_sequences: [aj, oj, ĉ, ŝ]\n"
        "    word_forms: [kaj, estas, la, mi]\n",
        encoding="utf-8",
    )
    return path
