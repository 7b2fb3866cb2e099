"""Fan a hierarchical name and derive its fallback chain in one step."""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import propchain.chain.derivation as derivation
import propchain.chain.fanning as fanning
import propchain.constants as constants

PW = _typing.TypeVar("PW")
CL = _typing.TypeVar("CL")


def derive_property_chain(
    name: str,
    root: PW,
    root_wrap: _abc.Callable[[str, PW], CL],
    link_wrap: _abc.Callable[[str, CL], CL],
    *,
    prefix: str | None = None,
    suffix: str | None = None,
    delimiter: str = constants.DEFAULT_DELIMITER,
) -> CL:
    """
    Build the fallback chain for a hierarchical property name.

    The candidate names from ``fan_property_name`` are handed to
    ``derive_chain`` unchanged and in order, so the returned node is the
    most specific property and the root node the most general one.

    Raises:
        InvalidArgumentError: If the name, prefix, suffix, or delimiter is
            invalid. No node is built.
    """
    names = fanning.fan_property_name(prefix, name, suffix, delimiter=delimiter)
    return derivation.derive_chain(names, root, root_wrap, link_wrap)
