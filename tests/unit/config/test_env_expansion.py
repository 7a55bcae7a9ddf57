"""Tests for environment variable placeholder expansion."""

import os
from unittest.mock import patch

from pattern_showcase.config.utils.env_expansion import expand_env_vars


class TestEnvironmentVariableExpansion:
    """Test environment variable expansion functionality."""

    def test_expand_braced_env_var(self):
        with patch.dict(os.environ, {"TEST_VAR": "/test/path"}):
            assert expand_env_vars("${TEST_VAR}/subdir") == "/test/path/subdir"

    def test_default_used_when_unset(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${LEVEL:INFO}") == "INFO"

    def test_empty_default(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("x${HOST:}y") == "xy"

    def test_environment_wins_over_default(self):
        with patch.dict(os.environ, {"LEVEL": "DEBUG"}):
            assert expand_env_vars("${LEVEL:INFO}") == "DEBUG"

    def test_unset_without_default_is_left_alone(self):
        with patch.dict(os.environ, {}, clear=True):
            assert expand_env_vars("${NONEXISTENT_VAR}") == "${NONEXISTENT_VAR}"

    def test_nested_structures(self):
        with patch.dict(os.environ, {"TEST_VAR": "v"}):
            config = {"a": {"b": ["${TEST_VAR}", 1]}, "n": None, "flag": True}
            assert expand_env_vars(config) == {"a": {"b": ["v", 1]}, "n": None, "flag": True}
