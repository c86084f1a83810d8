"""Converter settings, optionally read from a YAML file.

A settings file is a single mapping; every key is optional::

    default_detection_limit_library: MDA01.LIB
    input_suffix: .DAT
    output_suffix: .INP

Values given on the command line take precedence over the file.
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

import yaml

from dat2inp.fields import ENCODING
from dat2inp.io import DEFAULT_INPUT_SUFFIX, DEFAULT_OUTPUT_SUFFIX

_KNOWN_KEYS = (
    "default_detection_limit_library",
    "input_suffix",
    "output_suffix",
)


def check_library_name(value: str) -> None:
    """Check that a library name can be written to an ``.INP`` file.

    ``.INP`` files hold one byte per character, so every character
    must have a latin-1 form.

    Raises:
        ValueError: If *value* holds a character outside latin-1.
    """
    try:
        value.encode(ENCODING)
    except UnicodeEncodeError as exc:
        bad = value[exc.start:exc.end]
        raise ValueError(
            f"Detection limit library {value!r} contains {bad!r}, "
            "which cannot be written to an .INP file"
        ) from exc


@dataclass(frozen=True)
class ConverterConfig:
    """Settings for a batch conversion.

    Attributes:
        default_detection_limit_library: Library name written to
            ``lim_file`` when a ``.DAT`` file leaves it blank, or
            ``None`` to keep the blank.
        input_suffix: File name ending of instrument exports.
        output_suffix: File name ending of the written records.
    """

    default_detection_limit_library: Optional[str] = None
    input_suffix: str = DEFAULT_INPUT_SUFFIX
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX

    def __post_init__(self) -> None:
        if self.default_detection_limit_library is not None:
            check_library_name(self.default_detection_limit_library)

    def with_overrides(self, **overrides: Optional[str]) -> "ConverterConfig":
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def validate_config_yaml(data: object) -> None:
    """Validate parsed YAML settings.

    Checks that the document is a mapping (or empty), that it only
    uses known keys and that every value is a string.  Suffixes must
    also be non-empty, and the library name must fit in latin-1.

    Args:
        data: The object returned by ``yaml.safe_load()``.

    Raises:
        ValueError: Describing the first problem found.
    """
    if data is None:
        return
    if not isinstance(data, dict):
        raise ValueError(
            "Invalid config YAML: expected a mapping, "
            f"got {type(data).__name__}"
        )

    for key, value in data.items():
        if key not in _KNOWN_KEYS:
            raise ValueError(
                f"Invalid config YAML: unknown key {key!r} "
                f"(expected one of {', '.join(_KNOWN_KEYS)})"
            )
        if not isinstance(value, str):
            raise ValueError(
                f"Invalid config YAML: {key!r} must be a string "
                f"(got {type(value).__name__})"
            )
        if key.endswith("_suffix") and not value:
            raise ValueError(f"Invalid config YAML: {key!r} is empty")
        if key == "default_detection_limit_library":
            try:
                check_library_name(value)
            except ValueError as exc:
                raise ValueError(f"Invalid config YAML: {exc}") from exc


def load_config(path: Union[str, Path]) -> ConverterConfig:
    """Load converter settings from a YAML file.

    Args:
        path: Path to the settings file.

    Returns:
        A :class:`ConverterConfig` with defaults for missing keys.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the file is not valid settings YAML.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid config YAML: {exc}") from exc

    validate_config_yaml(data)
    return ConverterConfig(**(data or {}))
