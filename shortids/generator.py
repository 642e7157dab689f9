"""Short, readable, unique identifier generation.

Example:
    >>> from shortids import Generator
    >>> generator = Generator()
    >>> generator.generate_typed("TestEntity", "duplicate")
    'tsEn_duplicate'
    >>> generator.generate_typed("TestEntity", "duplicate")
    'tsEn_duplicate_2'
    >>> generator.generate_custom("order", "A-17", "draft")
    'order_A17_draft'
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Dict, List, Optional, Union

from .config import (
    DEFAULT_DELIMITER,
    DEFAULT_INVALID_CHARS_PATTERN,
    DEFAULT_PREFIX_MAX_LENGTH,
    GeneratorConfig,
)
from .exceptions import InvalidArgumentError
from .registry import UniquenessRegistry
from .shrinker import shrink

logger = logging.getLogger(__name__)

Kind = Union[str, type]


class Generator:
    """Builds ``prefix[_content]`` identifiers and deduplicates them.

    One instance owns a prefix cache, the per-base-id usage counters and the
    set of issued identifiers. All three are safe to share between threads.
    See :mod:`shortids.registry` for the caveat on concurrent ``reset()``.
    """

    def __init__(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        avoid_camel_cases: bool = False,
        prefix_max_length: int = DEFAULT_PREFIX_MAX_LENGTH,
        invalid_chars_pattern: str = DEFAULT_INVALID_CHARS_PATTERN,
    ):
        """Initialize the generator.

        Args:
            delimiter: Separator between prefix, content segments and numbers.
            avoid_camel_cases: Keep kind-derived prefixes out of camel case;
                the shrunk prefix is lowercased instead.
            prefix_max_length: Maximum length of kind-derived prefixes.
            invalid_chars_pattern: Regular expression whose matches are
                deleted from ids and suffixes.

        Raises:
            ConfigValidationError: If the options fail validation.
        """
        self.config = GeneratorConfig(
            delimiter=delimiter,
            avoid_camel_cases=avoid_camel_cases,
            prefix_max_length=prefix_max_length,
            invalid_chars_pattern=invalid_chars_pattern,
        )
        self._invalid_chars = re.compile(invalid_chars_pattern)
        self._prefix_cache: Dict[str, str] = {}
        self._prefix_lock = threading.Lock()
        self._registry = UniquenessRegistry(delimiter=delimiter)

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "Generator":
        return cls(**config.to_dict())

    @property
    def delimiter(self) -> str:
        return self.config.delimiter

    @property
    def registry(self) -> UniquenessRegistry:
        return self._registry

    def prefix_for(self, kind: Kind) -> str:
        """Return the shrunk prefix for ``kind``, computing it on first use.

        ``kind`` is a kind name or a class, in which case its ``__name__`` is
        used.
        """
        name = kind.__name__ if isinstance(kind, type) else kind
        if not name or not name.strip():
            raise InvalidArgumentError("kind", "Kind name cannot be empty.", value=name)

        with self._prefix_lock:
            cached = self._prefix_cache.get(name)
            if cached is not None:
                return cached

            prefix = shrink(
                name,
                self.config.prefix_max_length,
                preserve_casing=self.config.avoid_camel_cases,
            )
            if self.config.avoid_camel_cases:
                prefix = "".join(
                    char.lower() if len(char.lower()) == 1 else char for char in prefix
                )
            if not prefix:
                raise InvalidArgumentError(
                    "kind", f"Kind name {name!r} yields an empty prefix.", value=name
                )
            self._prefix_cache[name] = prefix

        logger.debug("Computed prefix %r for kind %r", prefix, name)
        return prefix

    def generate_typed(
        self, kind: Kind, item_id: Optional[str] = None, *suffixes: Optional[str]
    ) -> str:
        """Generate a unique id whose prefix is derived from ``kind``.

        Example:
            >>> Generator().generate_typed("OrderItem", "42", "eu")
            'ordI_42_eu'
        """
        return self._generate(self.prefix_for(kind), item_id, suffixes)

    def generate_custom(
        self, prefix: Optional[str], item_id: Optional[str] = None, *suffixes: Optional[str]
    ) -> str:
        """Generate a unique id using ``prefix`` literally.

        Raises:
            InvalidArgumentError: If ``prefix`` is empty or None.
        """
        if not prefix:
            raise InvalidArgumentError("prefix", "Prefix cannot be empty.", value=prefix)
        return self._generate(prefix, item_id, suffixes)

    def reset(self) -> None:
        """Clear cached prefixes, usage counters and issued identifiers."""
        with self._prefix_lock:
            self._prefix_cache.clear()
        self._registry.reset()
        logger.debug("Generator state reset")

    def _generate(self, prefix: str, item_id: Optional[str], suffixes) -> str:
        content = self._build_content_part(item_id, suffixes)
        base_id = f"{prefix}{self.delimiter}{content}" if content else prefix
        return self._registry.ensure_unique(base_id)

    def _clean(self, value: Optional[str]) -> str:
        if not value:
            return ""
        return self._invalid_chars.sub("", value.strip())

    def _build_content_part(self, item_id: Optional[str], suffixes) -> str:
        segments: List[str] = [self._clean(item_id)]
        segments.extend(self._clean(suffix) for suffix in suffixes)
        return self.delimiter.join(segment for segment in segments if segment)
