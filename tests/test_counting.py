"""Tests for majority/counting.py."""
import pytest

from majority.counting import InvalidElementError, count_occurrences


class TestCountOccurrences:
    def test_counts_matching_ints(self):
        assert count_occurrences([1, 2, 1, 2, 1, 2, 1], 1) == 4

    def test_empty_sequence_is_zero(self):
        assert count_occurrences([], 1) == 0

    def test_absent_target_is_zero(self):
        assert count_occurrences([1, 2, 3], 9) == 0

    def test_all_match(self):
        assert count_occurrences(("a", "a", "a"), "a") == 3

    def test_equality_is_structural(self):
        # distinct tuple objects with equal contents still match
        assert count_occurrences([(True,), (True, False), tuple([True])], (True,)) == 2

    def test_plain_objects_compare_by_identity(self):
        o = object()
        assert count_occurrences([o, object(), o], o) == 2

    def test_none_target_allowed(self):
        assert count_occurrences([1, 2], None) == 0

    def test_none_element_raises(self):
        with pytest.raises(InvalidElementError) as exc_info:
            count_occurrences([1, None, 1], 1)
        assert exc_info.value.index == 1

    def test_invalid_element_is_type_error(self):
        with pytest.raises(TypeError):
            count_occurrences([None], 1)

    def test_uses_element_equality(self):
        class AlwaysEqual:
            def __eq__(self, other):
                return True

            __hash__ = object.__hash__

        assert count_occurrences([AlwaysEqual(), AlwaysEqual()], 42) == 2
