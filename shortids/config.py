"""Generator configuration: defaults, schema validation and JSON loading.

The schema resource lives at ``shortids/schemas/config.schema.json`` and is
loaded via ``importlib.resources``.
"""

from __future__ import annotations

import json
import re
from dataclasses import asdict, dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Union, cast

import jsonschema
from jsonschema.exceptions import best_match

from .exceptions import ConfigValidationError

SCHEMA_FILENAME = "config.schema.json"

DEFAULT_DELIMITER = "_"
DEFAULT_PREFIX_MAX_LENGTH = 4
DEFAULT_INVALID_CHARS_PATTERN = "[^A-Za-z0-9]+"


def load_schema() -> Dict[str, Any]:
    """Load the generator configuration JSON schema."""
    resource = resources.files("shortids").joinpath("schemas").joinpath(SCHEMA_FILENAME)
    return cast(Dict[str, Any], json.loads(resource.read_text(encoding="utf-8")))


def validate_config(payload: Dict[str, Any]) -> None:
    """Validate a configuration mapping.

    Raises:
        ConfigValidationError: ``CFG001`` for schema violations, ``CFG002``
            when ``invalid_chars_pattern`` is not a valid regular expression.
    """
    if not isinstance(payload, dict):
        raise ConfigValidationError("CFG001", "Generator config must be a JSON object.", path="$")

    validator = jsonschema.Draft7Validator(load_schema())
    error = best_match(validator.iter_errors(payload))
    if error is not None:
        path = "$" + "".join(f".{part}" for part in error.absolute_path)
        raise ConfigValidationError("CFG001", error.message, path=path)

    pattern = payload.get("invalid_chars_pattern")
    if pattern is not None:
        try:
            re.compile(pattern)
        except re.error as exc:
            raise ConfigValidationError(
                "CFG002",
                f"invalid_chars_pattern is not a valid regular expression: {exc}",
                path="$.invalid_chars_pattern",
            ) from exc


@dataclass(frozen=True)
class GeneratorConfig:
    """Options fixed for the lifetime of a generator."""

    delimiter: str = DEFAULT_DELIMITER
    avoid_camel_cases: bool = False
    prefix_max_length: int = DEFAULT_PREFIX_MAX_LENGTH
    invalid_chars_pattern: str = DEFAULT_INVALID_CHARS_PATTERN

    def __post_init__(self) -> None:
        validate_config(self.to_dict())

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GeneratorConfig":
        validate_config(payload)
        return cls(**payload)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(path: Union[str, Path]) -> GeneratorConfig:
    """Read a JSON configuration file into a :class:`GeneratorConfig`."""
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigValidationError("CFG003", f"Config file {path} cannot be read: {exc}") from exc
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigValidationError("CFG003", f"Config file {path} is not valid JSON: {exc}") from exc
    return GeneratorConfig.from_dict(payload)
