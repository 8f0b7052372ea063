from __future__ import annotations

from collections.abc import Iterator
from importlib.resources import files

from epigram.generators.base import PhraseGenerator


def load_dictionary_text(path: str | None = None) -> str:
    """Load dictionary text from file path, or bundled default."""
    if path is None:
        resource = files("epigram").joinpath("dictionaries", "default.toml")
        return resource.read_text(encoding="utf-8")
    with open(path, encoding="utf-8") as f:
        return f.read()


def example_dictionary_text() -> str:
    """Return the bundled example dictionary, a starting point for custom ones."""
    return files("epigram").joinpath("dictionaries", "example.toml").read_text(encoding="utf-8")


def generate_phrases(generator: PhraseGenerator, count: int) -> list[str]:
    """Return count random phrases."""
    if count < 0:
        raise ValueError(f"Phrase count must not be negative, got {count}.")
    return [generator.generate() for _ in range(count)]


def iter_phrases(generator: PhraseGenerator) -> Iterator[str]:
    """Yield random phrases forever."""
    while True:
        yield generator.generate()
