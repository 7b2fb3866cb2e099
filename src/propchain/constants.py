"""
Shared constants for propchain.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

DEFAULT_DELIMITER = "."
"""Separator between segments of a hierarchical property name."""

DEFAULT_LOG_LEVEL = "WARNING"
"""Default level for the root logger configured by the CLI."""

ENV_PREFIX = "PROPCHAIN_"
"""Prefix for environment variables read by Settings."""
