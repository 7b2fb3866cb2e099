"""
Immutable reference nodes for fallback chains.

``derive_chain`` works with any node type the caller supplies. These two
dataclasses cover callers that only need the structure: a ``RootLink`` holds
the most general name and the root value, and a ``ChainLink`` holds a more
specific name and the node it falls back to.

Example:
    >>> chain = derive_links(["x.y", "x.a.y", "x.a.b.y"], "default")
    >>> chain_names(chain)
    ['x.a.b.y', 'x.a.y', 'x.y']
    >>> chain_root(chain)
    'default'
"""

from __future__ import annotations

import collections.abc as _abc
import dataclasses as _dataclasses
import typing as _typing

import propchain.chain.derivation as derivation


@_dataclasses.dataclass(frozen=True)
class RootLink:
    """Most general node of a chain, wrapping the caller's root value."""

    name: str
    root: _typing.Any


@_dataclasses.dataclass(frozen=True)
class ChainLink:
    """Node for a more specific name, falling back to ``previous``."""

    name: str
    previous: ChainLink | RootLink


def iter_links(node: ChainLink | RootLink) -> _abc.Iterator[ChainLink | RootLink]:
    """Yield every node from ``node`` back to the root node, inclusive."""
    current: ChainLink | RootLink = node
    while isinstance(current, ChainLink):
        yield current
        current = current.previous
    yield current


def chain_names(node: ChainLink | RootLink) -> list[str]:
    """Property names in fallback order, most specific first."""
    return [link.name for link in iter_links(node)]


def chain_root(node: ChainLink | RootLink) -> _typing.Any:
    """Root value held by the chain's root node."""
    *_, last = iter_links(node)
    assert isinstance(last, RootLink)
    return last.root


def derive_links(names: _abc.Iterable[str], root: _typing.Any) -> ChainLink | RootLink:
    """Derive a chain built from ``RootLink`` and ``ChainLink`` nodes."""
    return derivation.derive_chain(names, root, RootLink, ChainLink)
