# tests/conftest.py
# This file is part of Wffkit - Propositional Formula Rewriting
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Wffkit tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common formula fixtures
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
        import wff
        import rewrite
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def basic_formula():
    """Provide a simple binary formula.

    Returns:
        str: Conjunction of two propositions
    """
    return "(p ^ q)"


@pytest.fixture
def complex_formula():
    """Provide a nested formula using every connective.

    Returns:
        str: Formula with negation, conjunction, disjunction, conditional
            and biconditional
    """
    return "((p v (q ^ r)) <=> ~((p v q) => ~(p v r)))"
