"""Tests for predicate and search utilities."""

import pytest

from densematrix.math.search import exists, find, find_all, index_of, true_for_all


@pytest.fixture
def sample(matrix_factory):
    """A 2x3 matrix with a repeated value."""
    return matrix_factory([[1, -2, 3], [4, 3, -6]])


class TestExistsAndTrueForAll:
    """Test boolean predicate scans."""

    def test_exists_true(self, sample):
        """Test exists finds a matching element."""
        assert exists(sample, lambda value: value > 3) is True

    def test_exists_false(self, sample):
        """Test exists returns False when nothing matches."""
        assert exists(sample, lambda value: value > 100) is False

    def test_exists_short_circuits(self, sample):
        """Test exists stops at the first match in row-major order."""
        visited = []

        def predicate(value):
            visited.append(value)
            return value < 0

        assert exists(sample, predicate) is True
        assert visited == [1.0, -2.0]

    def test_true_for_all(self, sample):
        """Test true_for_all over every element."""
        assert true_for_all(sample, lambda value: abs(value) >= 1) is True
        assert true_for_all(sample, lambda value: value > 0) is False

    def test_true_for_all_short_circuits(self, sample):
        """Test true_for_all stops at the first failure."""
        visited = []

        def predicate(value):
            visited.append(value)
            return value > 0

        true_for_all(sample, predicate)
        assert visited == [1.0, -2.0]


class TestFind:
    """Test find and find_all."""

    def test_find_returns_first_match(self, sample):
        """Test find returns the first match in row-major order."""
        assert find(sample, lambda value: value > 2) == 3.0

    def test_find_returns_none_when_absent(self, sample):
        """Test find returns None when nothing matches."""
        assert find(sample, lambda value: value == 42) is None

    def test_find_can_return_zero(self, matrix_factory):
        """Test a matching 0.0 is returned rather than treated as absent."""
        matrix = matrix_factory([[5, 0], [0, 5]])
        assert find(matrix, lambda value: value < 1) == 0.0

    def test_find_all_preserves_scan_order(self, sample):
        """Test find_all returns matches in row-major order."""
        assert find_all(sample, lambda value: value > 0) == [1.0, 3.0, 4.0, 3.0]

    def test_find_all_empty(self, sample):
        """Test find_all returns an empty list when nothing matches."""
        assert find_all(sample, lambda value: value > 100) == []


class TestIndexOf:
    """Test index_of."""

    def test_index_of_first_occurrence(self, sample):
        """Test index_of returns the first (row, column) of a repeated value."""
        assert index_of(sample, 3) == [0, 2]

    def test_index_of_second_row(self, sample):
        """Test index_of in a later row."""
        assert index_of(sample, -6.0) == [1, 2]

    def test_index_of_missing_is_none(self, sample):
        """Test index_of returns None for an absent value."""
        assert index_of(sample, 7) is None

    def test_index_of_uses_exact_equality(self, matrix_factory):
        """Test index_of does not match values that are merely close."""
        matrix = matrix_factory([[0.1 + 0.2]])
        assert index_of(matrix, 0.3) is None
