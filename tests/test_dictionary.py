"""Tests for dictionary file parsing."""

import random
import textwrap

import pytest

from epigram.dictionary import (
    build_generator,
    detect_format,
    get_config_type,
    load_table,
    parse_dictionary,
)
from epigram.errors import (
    DictionaryError,
    DictionarySyntaxError,
    EmptyClassError,
    MissingFieldError,
    UnknownGeneratorError,
    WrongFieldTypeError,
)
from epigram.generators import TemplateExpander


SIMPLE_TOML = textwrap.dedent('''\
    [config]
    type = "static"
    format = "The {{adjective}} {{noun}} {{verb}} {{adverb}}."

    [classes]
    adjective = """
    quick
    """
    noun = ["fox"]
    verb = "jumps"
    adverb = """
    quietly
    """
''')

SIMPLE_YAML = textwrap.dedent('''\
    config:
      type: static
      format: "The {{adjective}} {{noun}}."
    classes:
      adjective: |
        quick
        lazy
      noun:
        - fox
        - dog
''')


def _toml(body: str) -> str:
    return textwrap.dedent(body)


def test_parse_toml_dictionary():
    gen = parse_dictionary(SIMPLE_TOML, rng=random.Random(0))
    assert isinstance(gen, TemplateExpander)
    assert gen.generate() == "The quick fox jumps quietly."


def test_parse_yaml_dictionary():
    gen = parse_dictionary(SIMPLE_YAML, fmt="yaml", rng=random.Random(0))
    assert gen.bank.get("adjective") == ("quick", "lazy")
    assert gen.bank.get("noun") == ("fox", "dog")
    adjective, noun = gen.generate()[len("The "):-1].split()
    assert adjective in ("quick", "lazy")
    assert noun in ("fox", "dog")


def test_multiline_string_split_into_words():
    gen = parse_dictionary(_toml('''\
        [config]
        type = "static"
        format = "{{noun}}"
        [classes]
        noun = "fox\\n\\ndog\\n"
    '''))
    # A trailing newline adds nothing; a blank line in between is an empty word
    assert gen.bank.get("noun") == ("fox", "", "dog")


def test_empty_string_class_is_empty():
    gen = parse_dictionary(_toml('''\
        [config]
        type = "static"
        format = "A {{adjective}} thing"
        [classes]
        adjective = ""
    '''))
    assert gen.bank.get("adjective") == ()
    with pytest.raises(EmptyClassError):
        gen.generate()


def test_substitution_mode_is_passed_through():
    gen = parse_dictionary(SIMPLE_TOML, substitution="textual")
    assert gen.substitution == "textual"


def test_missing_config_table():
    with pytest.raises(MissingFieldError) as excinfo:
        parse_dictionary("[classes]\nnoun = 'fox'\n")
    assert excinfo.value.field == "config"
    assert str(excinfo.value) == "'config' is missing"


def test_config_wrong_type():
    with pytest.raises(WrongFieldTypeError) as excinfo:
        parse_dictionary("config = 3\n")
    assert excinfo.value.field == "config"
    assert "expected type" in str(excinfo.value)


def test_missing_config_type():
    with pytest.raises(MissingFieldError, match="config.type"):
        parse_dictionary('[config]\nformat = "x"\n[classes]\n')


def test_config_type_wrong_type():
    with pytest.raises(WrongFieldTypeError, match="config.type"):
        parse_dictionary('[config]\ntype = 5\nformat = "x"\n[classes]\n')


def test_unknown_config_type():
    with pytest.raises(UnknownGeneratorError, match="grammar"):
        parse_dictionary('[config]\ntype = "grammar"\nformat = "x"\n[classes]\n')


def test_missing_format():
    with pytest.raises(MissingFieldError, match="config.format"):
        parse_dictionary('[config]\ntype = "static"\n[classes]\n')


def test_format_wrong_type():
    with pytest.raises(WrongFieldTypeError, match="config.format"):
        parse_dictionary('[config]\ntype = "static"\nformat = ["x"]\n[classes]\n')


def test_missing_classes():
    with pytest.raises(MissingFieldError, match="'classes'"):
        parse_dictionary('[config]\ntype = "static"\nformat = "x"\n')


def test_classes_wrong_type():
    with pytest.raises(WrongFieldTypeError, match="'classes'"):
        parse_dictionary('classes = "nope"\n[config]\ntype = "static"\nformat = "x"\n')


def test_class_value_wrong_type():
    with pytest.raises(WrongFieldTypeError, match="classes.noun"):
        parse_dictionary('[config]\ntype = "static"\nformat = "x"\n[classes]\nnoun = 3\n')


def test_class_list_with_non_strings():
    with pytest.raises(WrongFieldTypeError, match="classes.noun"):
        parse_dictionary('[config]\ntype = "static"\nformat = "x"\n[classes]\nnoun = ["a", 1]\n')


def test_invalid_toml_raises_syntax_error():
    with pytest.raises(DictionarySyntaxError, match="Could not parse toml"):
        parse_dictionary("[config\ntype = ")


def test_invalid_yaml_raises_syntax_error():
    with pytest.raises(DictionarySyntaxError, match="Could not parse yaml"):
        parse_dictionary("config: [unclosed", fmt="yaml")


def test_yaml_top_level_must_be_mapping():
    with pytest.raises(DictionarySyntaxError, match="mapping"):
        parse_dictionary("- a\n- b\n", fmt="yaml")


def test_empty_yaml_is_missing_config():
    with pytest.raises(MissingFieldError, match="config"):
        parse_dictionary("", fmt="yaml")


def test_dictionary_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_dictionary("config = 3\n")
    assert issubclass(DictionarySyntaxError, DictionaryError)


def test_unknown_format_raises():
    with pytest.raises(ValueError, match="format"):
        load_table("x = 1", fmt="json")


def test_detect_format():
    assert detect_format("words.yaml") == "yaml"
    assert detect_format("words.YML") == "yaml"
    assert detect_format("words.toml") == "toml"
    assert detect_format("<stdin>") == "toml"


def test_get_config_type():
    assert get_config_type({"config": {"type": "static"}}) == "static"
    assert get_config_type({"config": {"type": 1}}) is None
    assert get_config_type({"config": "static"}) is None
    assert get_config_type({}) is None


def test_build_generator_from_table():
    table = {
        "config": {"type": "static", "format": "{{noun}}"},
        "classes": {"noun": ["fox"]},
    }
    gen = build_generator(table)
    assert gen.generate() == "fox"


def test_bundled_dictionaries_parse():
    from epigram.phrases import example_dictionary_text, load_dictionary_text

    for text in (load_dictionary_text(), example_dictionary_text()):
        gen = parse_dictionary(text)
        assert len(gen.bank) > 0
        assert all(gen.bank.get(name) for name in gen.bank.names())
        assert gen.generate()
