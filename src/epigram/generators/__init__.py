"""Phrase generator registry — get_generator_type, list_generators, register_generator."""

from __future__ import annotations

from epigram.errors import UnknownGeneratorError
from epigram.generators.base import PhraseGenerator

_REGISTRY: dict[str, type] = {}


def register_generator(name: str, cls: type) -> None:
    """Register a PhraseGenerator implementation under a config.type name.

    Raises TypeError if cls has no from_table() to build it from a dictionary.
    """
    if not callable(getattr(cls, "from_table", None)):
        raise TypeError(f"Generator '{name}' must define a from_table() classmethod")
    _REGISTRY[name] = cls


def get_generator_type(name: str) -> type:
    """Return the generator class for a config.type. Raises UnknownGeneratorError if unknown."""
    if name not in _REGISTRY:
        raise UnknownGeneratorError(name, list_generators())
    return _REGISTRY[name]


def list_generators() -> list[str]:
    """Return sorted list of registered generator kinds."""
    return sorted(_REGISTRY.keys())


# Register built-in generators
from epigram.generators.static import TemplateExpander  # noqa: E402

register_generator("static", TemplateExpander)

__all__ = [
    "PhraseGenerator",
    "TemplateExpander",
    "get_generator_type",
    "list_generators",
    "register_generator",
]
