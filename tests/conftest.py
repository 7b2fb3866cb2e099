"""
Shared pytest fixtures for propchain tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import pathlib as _pathlib
import typing as _typing
import unittest.mock as _mock

import pytest as _pytest

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "PROPCHAIN_CONFIG_DIR",
    "PROPCHAIN_DELIMITER",
    "PROPCHAIN_LOG_LEVEL",
]


def clean_env() -> dict[str, str]:
    """Return environment dict with propchain keys removed."""
    return {k: v for k, v in _os.environ.items() if k not in ENV_KEYS_TO_CLEAR}


@_pytest.fixture
def config_dir(tmp_path: _pathlib.Path) -> _typing.Iterator[_pathlib.Path]:
    """Isolated environment whose user config directory is an empty temp dir."""
    env = clean_env()
    env["PROPCHAIN_CONFIG_DIR"] = str(tmp_path)
    with _mock.patch.dict(_os.environ, env, clear=True):
        yield tmp_path

