"""Readable string shrinking for identifier prefixes.

Example:
    >>> from shortids.shrinker import shrink
    >>> shrink("ProductCategory", 8)
    'prdcCtgr'
    >>> shrink("OrderItem", 0)
    'ordrItm'
"""

from __future__ import annotations

import re
from typing import List, Optional


VOWELS = frozenset(
    "AEIOUaeiou"
    "ÁÀÄÂĂĀĄÅÃÆáàäâăāąåãæ"
    "ÉÈËÊĔĚĒĘéèëêĕěēę"
    "ÍÌÏÎĬĪĮĨíìïîĭīįĩ"
    "ÓÒÖÔŎŌØÕŐóòöôŏōøõő"
    "ÚÙÜÛŬŪŲŨúùüûŭūųũ"
)

# Whitespace, underscore and every non-word character separate words.
_SEPARATORS = re.compile(r"[\W_]+")


def split_into_parts(value: str) -> List[str]:
    """Split ``value`` at separators and at lower-to-upper case boundaries.

    Separators are dropped; camel-case boundaries keep both letters, the
    lowercase one ending a part and the uppercase one starting the next.
    Returned parts are never empty.
    """
    parts: List[str] = []
    for chunk in _SEPARATORS.split(value):
        if not chunk:
            continue
        start = 0
        for index in range(1, len(chunk)):
            if chunk[index - 1].islower() and chunk[index].isupper():
                parts.append(chunk[start:index])
                start = index
        parts.append(chunk[start:])
    return parts


def _case_char(char: str, upper: bool) -> str:
    # Multi-character mappings ('ß' -> 'SS') would change the length; keep the original.
    cased = char.upper() if upper else char.lower()
    return cased if len(cased) == 1 else char


def _strip_vowels(part: str, preserve_casing: bool) -> str:
    # The first character and uppercase characters always survive.
    kept = [
        char
        for index, char in enumerate(part)
        if index == 0 or char.isupper() or char not in VOWELS
    ]
    if not preserve_casing and kept:
        kept[0] = _case_char(kept[0], upper=False)
    return "".join(kept)


def _allocate(parts: List[str], max_length: int) -> List[str]:
    """Truncate parts so that together they fit ``max_length`` characters.

    Every part but the last gets a share proportional to its length, rounded
    up and capped by the remaining budget and by its own length. The last
    part takes whatever budget is left.
    """
    total = sum(len(part) for part in parts)
    remaining = max_length
    allocated: List[str] = []

    for part in parts[:-1]:
        share = -(-len(part) * max_length // total)
        share = min(share, remaining, len(part))
        if share <= 0:
            allocated.append("")
            continue
        allocated.append(part[:share])
        remaining -= share

    last = parts[-1]
    allocated.append(last[: min(remaining, len(last))])
    return allocated


def _camel_case_style(parts: List[str]) -> str:
    result: List[str] = []
    for part in parts:
        if not part:
            continue
        head = _case_char(part[0], upper=bool(result))
        result.append(head + part[1:])
    return "".join(result)


def shrink(value: Optional[str], max_length: int, preserve_casing: bool = False) -> str:
    """Shrink ``value`` to at most ``max_length`` characters, keeping it readable.

    Internal vowels are removed from each word part, then, if the result is
    still too long, each part is cut proportionally to its length.
    ``max_length`` of 0 (or below) means no limit. Unless ``preserve_casing``
    is set the output is camel-cased: first part lowercase, later parts
    capitalized. Never raises.
    """
    max_length = max(max_length, 0)
    if not value:
        return ""

    parts = split_into_parts(value.strip())
    if not parts:
        return ""

    parts = [
        _strip_vowels(part, preserve_casing=preserve_casing or index > 0)
        for index, part in enumerate(parts)
    ]

    if max_length and sum(len(part) for part in parts) > max_length:
        parts = _allocate(parts, max_length)

    return "".join(parts) if preserve_casing else _camel_case_style(parts)


def to_camel_case(value: Optional[str]) -> str:
    """Camel-case ``value`` using the same word splitting as :func:`shrink`.

    Example:
        >>> to_camel_case("order_item id")
        'orderItemId'
    """
    if not value:
        return ""
    return _camel_case_style(split_into_parts(value))
