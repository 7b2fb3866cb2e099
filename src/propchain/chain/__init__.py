"""
Chain assembly for hierarchical properties.

- fanning: expand a dotted name into candidate property names
- derivation: fold candidate names into a fallback chain of caller nodes
- assembly: the two steps combined
- links: ready-made immutable node types for callers without their own
"""

from propchain.chain.assembly import derive_property_chain
from propchain.chain.derivation import ChainWrapper, derive_chain, derive_chain_with
from propchain.chain.fanning import fan_property_name
from propchain.chain.links import (
    ChainLink,
    RootLink,
    chain_names,
    chain_root,
    derive_links,
    iter_links,
)

__all__ = [
    "ChainLink",
    "ChainWrapper",
    "RootLink",
    "chain_names",
    "chain_root",
    "derive_chain",
    "derive_chain_with",
    "derive_links",
    "derive_property_chain",
    "fan_property_name",
    "iter_links",
]
