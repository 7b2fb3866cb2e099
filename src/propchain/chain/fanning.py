"""
Expansion of hierarchical property names.

A hierarchical name such as ``a.b.c`` stands for a position in a hierarchy
running from general to specific. Fanning produces one candidate property
name per level of that hierarchy, each framed by an optional prefix and
suffix. For prefix ``x``, suffix ``y`` and name ``a.b.c``:

    x.y
    x.a.y
    x.a.b.y
    x.a.b.c.y

Empty segments (``a..b``) are kept as they are. Splitting and rejoining a
name always gives back the original string.
"""

from __future__ import annotations

import logging as _logging

import propchain.constants as constants
import propchain.errors as errors

_logger = _logging.getLogger(__name__)


def _check_delimiter(delimiter: object) -> str:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise errors.InvalidArgumentError(
            f"delimiter must be a single character, got {delimiter!r}"
        )
    return delimiter


def _check_affix(label: str, value: object) -> str | None:
    if value is not None and not isinstance(value, str):
        raise errors.InvalidArgumentError(
            f"{label} must be a string or None, got {type(value).__name__}"
        )
    return value


def fan_property_name(
    prefix: str | None,
    name: str,
    suffix: str | None,
    *,
    delimiter: str = constants.DEFAULT_DELIMITER,
) -> list[str]:
    """
    Assemble the candidate property names for a hierarchical name.

    Args:
        prefix: Leading part of every candidate, or None for no prefix.
        name: Hierarchical name, split on ``delimiter`` into segments.
        suffix: Trailing part of every candidate, or None for no suffix.
        delimiter: Single character separating segments and parts.

    Returns:
        ``len(segments) + 1`` names, least specific first. Entry ``n`` holds
        the prefix, the first ``n`` segments and the suffix.

    Raises:
        InvalidArgumentError: If ``name`` is None or not a string, if the
            prefix or suffix is not a string, or if ``delimiter`` is not a
            single character.
    """
    if name is None:
        raise errors.InvalidArgumentError("property name must not be None")
    if not isinstance(name, str):
        raise errors.InvalidArgumentError(
            f"property name must be a string, got {type(name).__name__}"
        )
    delimiter = _check_delimiter(delimiter)
    prefix = _check_affix("prefix", prefix)
    suffix = _check_affix("suffix", suffix)
    head = [] if prefix is None else [prefix]
    tail = [] if suffix is None else [suffix]

    segments = name.split(delimiter)
    names = [
        delimiter.join(head + segments[:n] + tail) for n in range(len(segments) + 1)
    ]
    _logger.debug("Fanned %r into %d candidate names: %s", name, len(names), names)
    return names
