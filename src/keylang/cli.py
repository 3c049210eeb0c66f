"""Click CLI entry point.

Usage:
    keylang detect "Bonjour le monde"
    keylang detect "Hallo Welt" --scores
    keylang detect "saluton mondo" --profiles extra_profiles.yaml
    keylang languages
    keylang samples
    echo "Привет мир" | keylang stream
"""

from __future__ import annotations

import click

from keylang.config import settings
from keylang.models import KeyEvent
from keylang.profiles import BUILTIN_TABLE, ProfileTable, ProfileTableError, load_profile_table
from keylang.samples import SAMPLE_TEXTS
from keylang.text.classifier import LanguageClassifier, get_classifier
from keylang.tracker import KeyboardTracker
from keylang.utils.logging import BOLD, DIM, GREEN, RED, RESET, YELLOW, get_logger

log = get_logger(__name__)

_profiles_option = click.option(
    "--profiles",
    default=None,
    type=click.Path(dir_okay=False),
    help="YAML file with custom language profiles (default: KEYLANG_PROFILES_PATH or built-in)",
)


@click.group()
@click.option("--log-level", default=None, help="Override KEYLANG_LOG_LEVEL (debug, info, warning)")
def cli(log_level: str | None) -> None:
    """Keyboard language detection CLI."""
    get_logger(level=log_level or settings.log_level)


def _load_table(profiles: str | None) -> ProfileTable:
    path = profiles or settings.profiles_path
    if not path:
        return BUILTIN_TABLE
    try:
        return load_profile_table(path, include_builtin=settings.profiles_include_builtin)
    except ProfileTableError as e:
        log.debug("Profile table load failed", exc_info=True)
        click.echo(f"{RED}Error: {e}{RESET}", err=True)
        raise SystemExit(1)


def _classifier(profiles: str | None) -> LanguageClassifier:
    return get_classifier(_load_table(profiles))


@cli.command()
@click.argument("text")
@click.option("--scores", is_flag=True, help="Print the score of every language")
@_profiles_option
def detect(text: str, scores: bool, profiles: str | None) -> None:
    """Detect the language of TEXT."""
    classifier = _classifier(profiles)
    code = classifier.detect(text)
    click.echo(f"{code}\t{classifier.format_name(code)}")

    if scores:
        vector = classifier.score(text)
        click.echo(f"\n  {'Lang':<6} {'Name':<14} {'Score':>6}")
        click.echo(f"  {'─' * 6} {'─' * 14} {'─' * 6}")
        for lang, value in vector.items():
            marker = f"{GREEN}*{RESET}" if lang == code else " "
            click.echo(f"  {lang:<6} {classifier.format_name(lang):<14} {value:>6} {marker}")


@cli.command()
@_profiles_option
def languages(profiles: str | None) -> None:
    """List supported languages in table order."""
    classifier = _classifier(profiles)
    for info in classifier.supported_languages():
        click.echo(f"{info.code}\t{info.display_name}")


@cli.command()
def samples() -> None:
    """Run the demo sentences through the detector."""
    classifier = get_classifier()
    misses = 0
    for sample in SAMPLE_TEXTS:
        detected = classifier.detect(sample.text)
        if detected == sample.code:
            status = f"{GREEN}ok{RESET}  "
        else:
            status = f"{RED}MISS{RESET}"
            misses += 1
        click.echo(f"  {status} {sample.code} → {detected:<3} {DIM}{sample.text}{RESET}")

    total = len(SAMPLE_TEXTS)
    color = GREEN if misses == 0 else YELLOW
    click.echo(f"\n  {color}{total - misses}/{total} detected{RESET}")
    if misses:
        raise SystemExit(1)


@cli.command()
@_profiles_option
def stream(profiles: str | None) -> None:
    """Type stdin through a keystroke tracker, printing language changes."""
    tracker = KeyboardTracker(classifier=_classifier(profiles))
    stdin = click.get_text_stream("stdin")
    current = tracker.status().language
    typed = 0

    for line in stdin:
        for char in line:
            # Line breaks arrive as the named "Enter" key, not a character
            key = "Enter" if char in "\r\n" else char
            status = tracker.key_down(KeyEvent(key=key))
            typed += 1
            if status.language != current:
                current = status.language
                click.echo(f"{typed:>6}  {BOLD}{current}{RESET}\t{tracker.classifier.format_name(current)}")

    log.info(f"{typed} keys, window={len(tracker.window)} chars, final language: {current}")


if __name__ == "__main__":
    cli()
