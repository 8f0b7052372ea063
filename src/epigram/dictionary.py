"""Dictionary files — parse TOML/YAML word dictionaries into phrase generators."""

from __future__ import annotations

import logging
import random
import tomllib
from collections.abc import Mapping
from pathlib import Path

import yaml

from epigram.errors import (
    DictionarySyntaxError,
    MissingFieldError,
    WrongFieldTypeError,
)
from epigram.generators import get_generator_type
from epigram.generators.base import PhraseGenerator

logger = logging.getLogger(__name__)

FORMATS = ("toml", "yaml")


def detect_format(path: str | Path) -> str:
    """Return 'yaml' for .yaml/.yml files, 'toml' for anything else."""
    if Path(path).suffix.lower() in (".yaml", ".yml"):
        return "yaml"
    return "toml"


def load_table(text: str, fmt: str = "toml") -> dict:
    """Parse dictionary text into a table. Raises DictionarySyntaxError on bad input."""
    if fmt == "toml":
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise DictionarySyntaxError("toml", str(e)) from e
    if fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DictionarySyntaxError("yaml", str(e)) from e
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise DictionarySyntaxError("yaml", "top level is not a mapping")
        return data
    raise ValueError(f"Unknown dictionary format: '{fmt}'. Available: {', '.join(FORMATS)}")


def get_config_type(table: Mapping) -> str | None:
    """Return config.type as a string, or None if it is absent or not a string."""
    config = table.get("config")
    if not isinstance(config, Mapping):
        return None
    value = config.get("type")
    return value if isinstance(value, str) else None


def build_generator(table: Mapping, rng: random.Random | None = None,
                    substitution: str = "segments") -> PhraseGenerator:
    """Build the generator named by config.type from a parsed table."""
    config = table.get("config")
    if config is None:
        raise MissingFieldError("config")
    if not isinstance(config, Mapping):
        raise WrongFieldTypeError("config")
    if "type" not in config:
        raise MissingFieldError("config.type")

    type_name = get_config_type(table)
    if type_name is None:
        raise WrongFieldTypeError("config.type")

    cls = get_generator_type(type_name)
    generator = cls.from_table(table, rng=rng, substitution=substitution)
    logger.debug("Built '%s' generator: %r", type_name, generator)
    return generator


def parse_dictionary(text: str, fmt: str = "toml", rng: random.Random | None = None,
                     substitution: str = "segments") -> PhraseGenerator:
    """Parse dictionary text and return the phrase generator it describes."""
    return build_generator(load_table(text, fmt), rng=rng, substitution=substitution)
