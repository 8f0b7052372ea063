"""Static template generator — fills {{class}} placeholders in a fixed format."""

from __future__ import annotations

import logging
import random
import re
from collections.abc import Mapping

from epigram.errors import EmptyClassError, MissingFieldError, WrongFieldTypeError
from epigram.wordbank import WordBank

logger = logging.getLogger(__name__)

SUBSTITUTION_MODES = ("segments", "textual")


def placeholder(class_name: str) -> str:
    """Return the literal placeholder token for a class, e.g. '{{noun}}'."""
    return "{{" + class_name + "}}"


class TemplateExpander:
    """Generates phrases by substituting words into a format string.

    Every ``{{name}}`` whose name is a class in the bank is replaced by a
    word drawn uniformly from that class, independently per occurrence.
    Placeholders for unknown classes are left as they are.

    Two substitution modes are available:

    segments
        The format is scanned once, left to right. Words that were put
        into the phrase are never scanned again.
    textual
        Classes are processed in sorted order and the leftmost literal
        token is replaced until none is left. A word containing a token
        of the class being processed is expanded again, which can loop
        forever on self-referencing words.
    """

    def __init__(self, format: str, bank: WordBank, rng: random.Random | None = None,
                 substitution: str = "segments"):
        if substitution not in SUBSTITUTION_MODES:
            raise ValueError(
                f"Unknown substitution mode: '{substitution}'. "
                f"Available: {', '.join(SUBSTITUTION_MODES)}"
            )
        self._format = format
        self._bank = bank
        self._rng = rng if rng is not None else random.Random()
        self._substitution = substitution
        self._pattern = self._compile(bank)

    @staticmethod
    def _compile(bank: WordBank) -> re.Pattern | None:
        if not len(bank):
            return None
        # Longest first so a class name that prefixes another can't shadow it
        names = sorted(bank.names(), key=len, reverse=True)
        alternation = "|".join(re.escape(name) for name in names)
        return re.compile(r"\{\{(" + alternation + r")\}\}")

    @classmethod
    def from_table(cls, table: Mapping, rng: random.Random | None = None,
                   substitution: str = "segments") -> TemplateExpander:
        """Build an expander from a parsed dictionary table.

        Reads ``config.format`` and the ``classes`` table. Class values may
        be a newline separated string or a list of strings.
        """
        config = table.get("config")
        if config is None:
            raise MissingFieldError("config")
        if not isinstance(config, Mapping):
            raise WrongFieldTypeError("config")

        fmt = config.get("format")
        if fmt is None:
            raise MissingFieldError("config.format")
        if not isinstance(fmt, str):
            raise WrongFieldTypeError("config.format")

        classes = table.get("classes")
        if classes is None:
            raise MissingFieldError("classes")
        if not isinstance(classes, Mapping):
            raise WrongFieldTypeError("classes")

        words = {}
        for class_name, value in classes.items():
            words[str(class_name)] = _words_from_value(value, f"classes.{class_name}")

        return cls(fmt, WordBank(words), rng=rng, substitution=substitution)

    @property
    def name(self) -> str:
        return "static"

    @property
    def format(self) -> str:
        return self._format

    @property
    def bank(self) -> WordBank:
        return self._bank

    @property
    def substitution(self) -> str:
        return self._substitution

    def generate(self) -> str:
        """Return a phrase with every known placeholder filled in.

        Raises EmptyClassError if a placeholder's class has no words; no
        partial phrase is returned in that case.
        """
        if self._substitution == "textual":
            return self._generate_textual()
        return self._generate_segments()

    def _draw(self, class_name: str) -> str:
        words = self._bank.get(class_name)
        if not words:
            logger.debug("No words for class '%s' in format %r", class_name, self._format)
            raise EmptyClassError(class_name)
        return self._rng.choice(words)

    def _generate_segments(self) -> str:
        if self._pattern is None:
            return self._format
        return self._pattern.sub(lambda m: self._draw(m.group(1)), self._format)

    def _generate_textual(self) -> str:
        out = self._format
        for class_name in self._bank.names():
            token = placeholder(class_name)
            while token in out:
                out = out.replace(token, self._draw(class_name), 1)
        return out

    def __repr__(self) -> str:
        return (
            f"TemplateExpander(format={self._format!r}, classes={self._bank.names()!r}, "
            f"substitution={self._substitution!r})"
        )


def _words_from_value(value: object, field: str) -> list[str]:
    """Turn a class value into a word list.

    Strings are split on newlines; a trailing newline does not add an
    empty word but blank lines in between do.
    """
    if isinstance(value, str):
        lines = value.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return lines
    if isinstance(value, list) and all(isinstance(w, str) for w in value):
        return list(value)
    raise WrongFieldTypeError(field)
