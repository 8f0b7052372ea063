"""Word bank — read-only mapping from word class name to candidate words."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class WordBank:
    """Word classes and their candidate words.

    Values are copied into tuples on construction and the mapping is
    exposed through a read-only proxy. A class may have no words; that is
    only reported when a phrase actually needs one of its words.
    """

    classes: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {str(name): tuple(words) for name, words in self.classes.items()}
        object.__setattr__(self, "classes", MappingProxyType(frozen))

    def get(self, class_name: str) -> tuple[str, ...]:
        """Return the words for class_name, or () if the class is unknown."""
        return self.classes.get(class_name, ())

    def names(self) -> list[str]:
        """Return class names sorted, the order classes are processed in."""
        return sorted(self.classes)

    def __contains__(self, class_name: object) -> bool:
        return class_name in self.classes

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self.classes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WordBank):
            return NotImplemented
        return dict(self.classes) == dict(other.classes)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.classes.items())))
