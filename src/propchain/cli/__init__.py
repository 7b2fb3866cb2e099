"""
Command-line interface for propchain.

Uses Click for command parsing.
"""

from propchain.cli.main import cli

__all__ = ["cli"]
