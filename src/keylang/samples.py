"""Demo sentences, one per built-in language."""

from __future__ import annotations

from typing import NamedTuple


class Sample(NamedTuple):
    code: str
    text: str


SAMPLE_TEXTS: list[Sample] = [
    Sample("en", "Hello world! This is a sample text in English."),
    Sample("es", "Hola mundo! Este es un texto de ejemplo en español."),
    Sample("fr", "Bonjour le monde! Ceci est un exemple de texte en français."),
    Sample("de", "Hallo Welt! Dies ist ein Beispieltext auf Deutsch."),
    Sample("it", "Ciao mondo! Questo è un testo di esempio in italiano."),
    Sample("pt", "Olá mundo! Este é um texto de exemplo em português."),
    Sample("ru", "Привет мир! Это пример текста на русском языке."),
    Sample("zh", "你好世界！这是中文示例文本。"),
    Sample("ja", "こんにちは世界！これは日本語のサンプルテキストです。"),
    Sample("ar", "مرحبا بالعالم! هذا نص تجريبي باللغة العربية."),
]
