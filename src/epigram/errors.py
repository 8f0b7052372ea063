"""Exceptions raised while building generators and generating phrases."""

from __future__ import annotations


class EmptyClassError(LookupError):
    """A placeholder referenced a word class that has no words."""

    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(f"word class '{class_name}' has no words")


class DictionaryError(ValueError):
    """A dictionary file could not be turned into a phrase generator."""


class DictionarySyntaxError(DictionaryError):
    def __init__(self, fmt: str, detail: str):
        self.fmt = fmt
        self.detail = detail
        super().__init__(f"Could not parse {fmt}: {detail}")


class MissingFieldError(DictionaryError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"'{field}' is missing")


class WrongFieldTypeError(DictionaryError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"'{field}' doesn't have the expected type")


class UnknownGeneratorError(DictionaryError):
    def __init__(self, type_name: str, available: list[str]):
        self.type_name = type_name
        super().__init__(
            f"Unknown generator type: '{type_name}'. Available: {', '.join(available)}"
        )
