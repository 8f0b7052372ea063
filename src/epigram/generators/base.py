"""Base protocol for phrase generators."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class PhraseGenerator(Protocol):
    """Protocol for phrase generators. Implement generate() to add a new kind."""

    @property
    def name(self) -> str:
        ...

    @classmethod
    def from_table(cls, table: Mapping, **kwargs) -> PhraseGenerator:
        """Build a generator from a parsed dictionary table."""
        ...

    def generate(self) -> str:
        """Return one random phrase. Raises EmptyClassError if a needed class is empty."""
        ...
