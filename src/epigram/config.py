"""Presets — named YAML files holding default options for `epigram generate`."""

from __future__ import annotations

from pathlib import Path

import yaml

from epigram.generators.static import SUBSTITUTION_MODES


_BUNDLED_DIR = Path(__file__).parent / "presets"
_SUFFIXES = (".yaml", ".yml")

PRESET_KEYS = ("count", "infinite", "seed", "substitution", "dictionary")


def user_preset_dir() -> Path:
    """Return the user presets directory."""
    return Path.home() / ".config" / "epigram" / "presets"


def _search_dirs(search_dirs: list[Path] | None) -> list[Path]:
    # User directories shadow bundled presets
    return [Path(d) for d in (search_dirs or [])] + [_BUNDLED_DIR]


def load_preset(name: str, search_dirs: list[Path] | None = None) -> dict:
    """Load a preset by name, searching search_dirs before the bundled presets.

    Raises FileNotFoundError if preset not found.
    """
    dirs = _search_dirs(search_dirs)
    for d in dirs:
        for suffix in _SUFFIXES:
            path = d / f"{name}{suffix}"
            if path.exists():
                with open(path, encoding="utf-8") as f:
                    return validate_preset(yaml.safe_load(f) or {}, name)
    raise FileNotFoundError(
        f"Preset '{name}' not found. Searched: {', '.join(str(d) for d in dirs)}"
    )


def validate_preset(preset: object, name: str = "preset") -> dict:
    """Check the types of known preset values. Raises ValueError on bad values.

    Unknown keys are left alone; see unknown_keys().
    """
    if not isinstance(preset, dict):
        raise ValueError(f"Preset '{name}' must be a mapping, got {type(preset).__name__}")

    def _fail(key: str, expected: str) -> ValueError:
        return ValueError(f"Preset '{name}': '{key}' must be {expected}, got {preset[key]!r}")

    # bool is an int subclass, so reject it explicitly
    count = preset.get("count")
    if "count" in preset and (isinstance(count, bool) or not isinstance(count, int) or count < 0):
        raise _fail("count", "a non-negative integer")
    if "infinite" in preset and not isinstance(preset["infinite"], bool):
        raise _fail("infinite", "true or false")
    seed = preset.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise _fail("seed", "an integer")
    if "substitution" in preset and preset["substitution"] not in SUBSTITUTION_MODES:
        raise _fail("substitution", " or ".join(SUBSTITUTION_MODES))
    if "dictionary" in preset and not isinstance(preset["dictionary"], str):
        raise _fail("dictionary", "a file path")
    return preset


def unknown_keys(preset: dict) -> list[str]:
    """Return the preset keys epigram doesn't understand, sorted."""
    return sorted(str(k) for k in set(preset) - set(PRESET_KEYS))


def merge_config(preset: dict, overrides: dict) -> dict:
    """Merge preset config with CLI overrides. None values in overrides are ignored."""
    result = dict(preset)
    result.update({k: v for k, v in overrides.items() if v is not None})
    return result


def list_presets(search_dirs: list[Path] | None = None) -> list[str]:
    """List available preset names from bundled and user directories."""
    names = set()
    for d in _search_dirs(search_dirs):
        if d.is_dir():
            names.update(f.stem for f in d.iterdir() if f.suffix in _SUFFIXES)
    return sorted(names)
