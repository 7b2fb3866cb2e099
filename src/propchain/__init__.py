"""
propchain - hierarchical property chains with fallback

Expands dotted property names into candidate names ordered from general to
specific, and assembles those names into fallback chains of caller nodes.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("propchain")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "propchain Contributors"

from propchain.chain import (  # noqa: E402
    ChainWrapper,
    derive_chain,
    derive_chain_with,
    derive_property_chain,
    fan_property_name,
)
from propchain.errors import (  # noqa: E402
    InvalidArgumentError,
    PreconditionFailedError,
    PropchainError,
)

__all__ = [
    "__version__",
    "__version_info__",
    "ChainWrapper",
    "InvalidArgumentError",
    "PreconditionFailedError",
    "PropchainError",
    "derive_chain",
    "derive_chain_with",
    "derive_property_chain",
    "fan_property_name",
]
