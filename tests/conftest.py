# tests/conftest.py
# This file is part of Tableaux - A Propositional Tableau Solver
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the tableau solver tests.

This module provides pytest configuration, fixtures, and utilities shared by
all test modules. It ensures the project packages can be imported when the
tests are run from a source checkout.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import core
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def a():
    """Provide the propositional variable `a`."""
    from parser.ast_nodes import Variable

    return Variable("a")


@pytest.fixture
def b():
    """Provide the propositional variable `b`."""
    from parser.ast_nodes import Variable

    return Variable("b")


@pytest.fixture
def formula_file(tmp_path):
    """Provide a factory writing formula files into a temporary directory.

    Returns:
        Callable[[str], Path]: Writes the given content and returns its path
    """

    def _write(content: str, name: str = "formulas.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fresh_logger(capsys):
    """Recreate the global logger so its handler writes to the captured stdout.

    The logger is dropped again afterwards so later tests do not write to the
    closed capture stream.

    Yields:
        None: The global logger is rebuilt on first use inside the test
    """
    import utils.logger as logger_module

    logger_module._global_logger = None
    yield
    logger_module._global_logger = None
