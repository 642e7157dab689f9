"""shortids package exports."""

from .config import GeneratorConfig, load_config, validate_config
from .exceptions import ConfigValidationError, InvalidArgumentError, ShortIdsError
from .generator import Generator
from .registry import UniquenessRegistry
from .shrinker import shrink, split_into_parts, to_camel_case

__version__ = "0.1.0"

__all__ = [
    "Generator",
    "GeneratorConfig",
    "UniquenessRegistry",
    "shrink",
    "split_into_parts",
    "to_camel_case",
    "load_config",
    "validate_config",
    "ShortIdsError",
    "InvalidArgumentError",
    "ConfigValidationError",
]
