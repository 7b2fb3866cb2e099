"""
Exception types raised by propchain.

Both concrete errors are precondition checks on arguments. They are raised
before any node is built and never carry a partial result.
"""


class PropchainError(Exception):
    """Base class for all propchain errors."""

    pass


class InvalidArgumentError(PropchainError, ValueError):
    """A property name, prefix, suffix, or delimiter is absent or malformed."""

    pass


class PreconditionFailedError(PropchainError, ValueError):
    """An operation was given an empty sequence of property names."""

    pass
