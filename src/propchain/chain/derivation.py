"""
Fallback chain derivation.

Folds an ordered sequence of property names into a singly-linked chain of
caller-constructed nodes. The first (most general) name becomes the root
node, wrapping the caller's root value. Every following name becomes a link
node wrapping the node built just before it. The node for the last, most
specific, name is returned; the caller owns it and through it the whole
chain.

This module never looks inside the root value or the nodes. What a node
holds and how it resolves a value is entirely up to the caller's wrappers.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import propchain.errors as errors

_logger = _logging.getLogger(__name__)

PW = _typing.TypeVar("PW")
CL = _typing.TypeVar("CL")
PW_contra = _typing.TypeVar("PW_contra", contravariant=True)


class ChainWrapper(_typing.Protocol[PW_contra, CL]):
    """
    Node factory for a fallback chain.

    Interface form of the ``root_wrap``/``link_wrap`` callback pair taken by
    ``derive_chain``. Implement it when both constructors belong to one
    object, e.g. a property factory carrying shared lookup state.
    """

    def wrap_root(self, name: str, root: PW_contra) -> CL:
        """Build the node for the most general property name."""
        ...

    def wrap_link(self, name: str, previous: CL) -> CL:
        """Build the node for ``name`` falling back to ``previous``."""
        ...


def derive_chain(
    names: _abc.Iterable[str],
    root: PW,
    root_wrap: _abc.Callable[[str, PW], CL],
    link_wrap: _abc.Callable[[str, CL], CL],
) -> CL:
    """
    Create the chain of nodes for a set of property names.

    Args:
        names: Property names, most general first and most specific last.
            Consumed exactly once, so a generator is fine.
        root: The caller's value for the most general property. Passed to
            ``root_wrap`` by reference.
        root_wrap: Builds the root node from the first name and ``root``.
        link_wrap: Builds a link node from a name and the previous node.

    Returns:
        The node for the most specific name. Walking back through the
        references stored by ``link_wrap`` visits every node once and ends
        at the root node.

    Raises:
        PreconditionFailedError: If ``names`` is empty. No wrapper is called.
    """
    iterator = iter(names)
    try:
        first = next(iterator)
    except StopIteration:
        raise errors.PreconditionFailedError(
            "cannot derive a property chain from an empty set of names"
        ) from None

    chain = root_wrap(first, root)
    last, length = first, 1
    for last in iterator:
        chain = link_wrap(last, chain)
        length += 1

    _logger.debug("Derived property chain of %d node(s) ending at %r", length, last)
    return chain


def derive_chain_with(
    names: _abc.Iterable[str],
    root: PW,
    wrapper: ChainWrapper[PW, CL],
) -> CL:
    """Derive a chain using the node constructors of ``wrapper``."""
    return derive_chain(names, root, wrapper.wrap_root, wrapper.wrap_link)
