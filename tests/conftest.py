"""
Shared pytest fixtures for the densematrix test suite.

This module provides:
- A factory for building matrices from nested rows
- A tolerance-based assertion helper for floating-point results
- Isolation of the package logger between tests
"""

import logging

import pytest

from densematrix.math.matrix import Matrix


@pytest.fixture
def matrix_factory():
    """Factory for creating matrices from nested row lists."""
    def _factory(rows):
        return Matrix.from_rows(rows)
    return _factory


@pytest.fixture
def assert_matrix_close():
    """Helper to assert that two matrices agree element-wise within a tolerance."""
    def _assert_close(actual: Matrix, expected, tolerance: float = 1e-9) -> None:
        """
        Assert that ``actual`` matches ``expected`` within ``tolerance``.

        Args:
            actual: Matrix under test
            expected: Matrix or nested row list
            tolerance: Absolute tolerance per element
        """
        if not isinstance(expected, Matrix):
            expected = Matrix.from_rows(expected)

        assert actual.shape == expected.shape, f"Shapes differ: {actual.shape} != {expected.shape}"
        assert actual.is_close(expected, tolerance=tolerance, mode="absolute"), (
            f"Matrices not close:\n{actual}\n!=\n{expected}"
        )

    return _assert_close


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Undo any handlers or propagation changes made by setup_logging()."""
    yield
    package_logger = logging.getLogger("densematrix")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
