"""
Level ordering tests.

Levels form a strict total order by declaration rank:
    DEBUG < INFO < WARN < ERROR
"""

from __future__ import annotations

import itertools
import logging

import pytest

from scarlet_logger import InvalidLevelError, Level, Ordering, compare


class TestLevelOrder:
    """Rank and comparison"""

    def test_values_in_rank_order(self) -> None:
        assert Level.values() == (Level.DEBUG, Level.INFO, Level.WARN, Level.ERROR)
        assert [level.rank for level in Level.values()] == [0, 1, 2, 3]

    def test_compare_equal_to_itself(self) -> None:
        for level in Level:
            assert compare(level, level) is Ordering.EQUAL

    def test_compare_consistent_with_rank(self) -> None:
        for a, b in itertools.permutations(Level, 2):
            expected = Ordering.LESS if a.rank < b.rank else Ordering.GREATER
            assert compare(a, b) is expected

    def test_antisymmetric(self) -> None:
        for a, b in itertools.product(Level, repeat=2):
            assert compare(a, b) == -compare(b, a)

    def test_transitive(self) -> None:
        for a, b, c in itertools.product(Level, repeat=3):
            if compare(a, b) is Ordering.LESS and compare(b, c) is Ordering.LESS:
                assert compare(a, c) is Ordering.LESS

    def test_operators_use_rank_not_string(self) -> None:
        # Alphabetically "ERROR" < "INFO"; by severity it is the other way round.
        assert Level.ERROR > Level.INFO
        assert Level.DEBUG < Level.WARN
        assert Level.WARN >= Level.WARN
        assert sorted([Level.ERROR, Level.DEBUG, Level.WARN, Level.INFO]) == list(Level.values())

    def test_operators_parse_plain_strings(self) -> None:
        assert Level.ERROR > "INFO"
        assert Level.DEBUG < "warning"
        assert "INFO" < Level.ERROR
        with pytest.raises(InvalidLevelError):
            Level.INFO < "LOUD"

    def test_operators_reject_other_types(self) -> None:
        with pytest.raises(TypeError):
            Level.INFO < 3  # type: ignore[operator]

    def test_compare_method(self) -> None:
        assert Level.INFO.compare(Level.WARN) is Ordering.LESS

    def test_compare_rejects_non_level(self) -> None:
        with pytest.raises(InvalidLevelError):
            compare(Level.INFO, "INFO")  # type: ignore[arg-type]


class TestLevelNames:
    """Names and conversions"""

    def test_name(self) -> None:
        assert Level.WARN.name == "WARN"
        assert str(Level.ERROR) == "ERROR"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("debug", Level.DEBUG),
            (" Info ", Level.INFO),
            ("WARN", Level.WARN),
            ("warning", Level.WARN),
            ("Error", Level.ERROR),
        ],
    )
    def test_from_string(self, raw: str, expected: Level) -> None:
        assert Level.from_string(raw) is expected

    def test_from_string_unknown(self) -> None:
        with pytest.raises(InvalidLevelError) as excinfo:
            Level.from_string("verbose")
        assert excinfo.value.code == "INVALID_LEVEL"
        assert isinstance(excinfo.value, ValueError)

    def test_to_stdlib_level(self) -> None:
        assert Level.DEBUG.to_stdlib_level() == logging.DEBUG
        assert Level.WARN.to_stdlib_level() == logging.WARNING
        assert Level.ERROR.to_stdlib_level() == logging.ERROR
