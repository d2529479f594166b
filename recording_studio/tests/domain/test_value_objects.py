"""
Тесты для объектов-значений TimeInterval и UnionCard.
"""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from recording_studio.domain.exceptions import InvalidCredential, InvalidInterval
from recording_studio.domain.value_objects import TimeInterval, UnionCard

BASE = datetime(2025, 1, 1, 10, 0, 0)


def interval(start_hours: float, end_hours: float) -> TimeInterval:
    return TimeInterval(
        start=BASE + timedelta(hours=start_hours),
        end=BASE + timedelta(hours=end_hours),
    )


class TestTimeInterval:
    """Тесты для TimeInterval."""

    def test_creation_success(self):
        ti = interval(0, 2)
        assert ti.start == BASE
        assert ti.end == BASE + timedelta(hours=2)
        assert ti.duration == timedelta(hours=2)

    def test_start_after_end_fails(self):
        with pytest.raises(InvalidInterval, match="Начало интервала"):
            interval(0, -1)

    def test_start_equals_end_fails(self):
        with pytest.raises(InvalidInterval):
            TimeInterval(start=BASE, end=BASE)

    def test_is_immutable(self):
        ti = interval(0, 2)
        with pytest.raises(ValidationError):
            ti.start = BASE - timedelta(hours=1)

    def test_structural_equality(self):
        assert interval(0, 2) == interval(0, 2)
        assert interval(0, 2) is not interval(0, 2)
        assert hash(interval(0, 2)) == hash(interval(0, 2))
        assert interval(0, 2) != interval(0, 3)

    # Базовый интервал: [10:00 --- 12:00)

    def test_overlaps_when_completely_inside(self):
        base, inner = interval(0, 2), interval(0.5, 1)
        assert base.overlaps(inner)
        assert inner.overlaps(base)

    def test_overlaps_when_starts_before_and_ends_inside(self):
        assert interval(0, 2).overlaps(interval(-1, 1))

    def test_overlaps_when_starts_inside_and_ends_after(self):
        assert interval(0, 2).overlaps(interval(1, 3))

    def test_overlaps_when_completely_wraps(self):
        assert interval(0, 2).overlaps(interval(-1, 3))

    def test_overlaps_identical(self):
        assert interval(0, 2).overlaps(interval(0, 2))

    def test_no_overlap_when_completely_before(self):
        assert not interval(0, 2).overlaps(interval(-2, -1))

    def test_no_overlap_when_touching(self):
        # Сессия может начаться ровно тогда, когда закончилась другая
        base, after = interval(0, 2), interval(2, 3)
        assert not base.overlaps(after)
        assert not after.overlaps(base)

    @pytest.mark.parametrize(
        "other",
        [(0.5, 1), (-1, 1), (1, 3), (-1, 3), (2, 3), (-2, 0), (-2, -1), (3, 4)],
    )
    def test_overlap_is_symmetric(self, other):
        a, b = interval(0, 2), interval(*other)
        assert a.overlaps(b) == b.overlaps(a)


class TestUnionCard:
    """Тесты для UnionCard."""

    def test_valid_number(self):
        card = UnionCard(number="OMB-12345")
        assert card.number == "OMB-12345"

    @pytest.mark.parametrize("number", [None, "", " "])
    def test_empty_number_fails(self, number):
        with pytest.raises(
            InvalidCredential, match="Номер профсоюзного билета не может быть пустым"
        ):
            UnionCard(number=number)

    def test_invalid_format_fails(self):
        with pytest.raises(InvalidCredential, match="должен начинаться с 'OMB-'"):
            UnionCard(number="INVALID-123")

    def test_prefix_is_case_sensitive(self):
        with pytest.raises(InvalidCredential):
            UnionCard(number="omb-1")

    def test_equality_by_value(self):
        card1 = UnionCard(number="OMB-777")
        card2 = UnionCard(number="OMB-777")
        assert card1 == card2
        assert card1 is not card2
        assert hash(card1) == hash(card2)
        assert card1 != UnionCard(number="OMB-778")
