"""
Тесты для сущности Session.
"""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from recording_studio.domain.exceptions import (
    DuplicateParticipant,
    EmptySessionParticipants,
    MissingInterval,
    NilParticipantList,
)
from recording_studio.domain.musician import Musician
from recording_studio.domain.session import Session
from recording_studio.domain.value_objects import TimeInterval


@pytest.fixture
def valid_interval() -> TimeInterval:
    start = datetime(2025, 1, 1, 12, 0, 0)
    return TimeInterval(start=start, end=start + timedelta(hours=2))


@pytest.fixture
def john() -> Musician:
    return Musician(name="John")


@pytest.fixture
def paul() -> Musician:
    return Musician(name="Paul")


def test_session_with_valid_participants(valid_interval, john, paul):
    session = Session(interval=valid_interval, participants=[john, paul])
    assert session.interval == valid_interval
    assert session.participants == (john, paul)


def test_session_preserves_input_order(valid_interval, john, paul):
    george = Musician(name="George")
    session = Session(interval=valid_interval, participants=[paul, george, john])
    assert [m.name for m in session.participants] == ["Paul", "George", "John"]


def test_session_keeps_musician_instances(valid_interval, john):
    session = Session(interval=valid_interval, participants=[john])
    assert session.participants[0] is john


def test_session_without_interval_fails(john):
    with pytest.raises(MissingInterval, match="интервал"):
        Session(interval=None, participants=[john])


def test_session_with_none_participants_fails(valid_interval):
    with pytest.raises(NilParticipantList):
        Session(interval=valid_interval, participants=None)


def test_missing_interval_checked_before_participants():
    with pytest.raises(MissingInterval):
        Session(interval=None, participants=None)


def test_session_with_empty_participants_fails(valid_interval):
    with pytest.raises(
        EmptySessionParticipants, match="Сессия должна иметь хотя бы одного участника"
    ):
        Session(interval=valid_interval, participants=[])


def test_session_with_duplicate_participants_fails(valid_interval, john, paul):
    with pytest.raises(DuplicateParticipant, match="повторяющийся музыкант: John") as exc:
        Session(interval=valid_interval, participants=[john, paul, john])
    assert exc.value.musician is john


def test_duplicate_detection_uses_id_not_name(valid_interval):
    """Тест: тезки - разные участники, а один id под разными именами - дубликат."""
    first, namesake = Musician(name="John"), Musician(name="John")
    session = Session(interval=valid_interval, participants=[first, namesake])
    assert len(session.participants) == 2

    alias = Musician(id=first.id, name="Johnny")
    with pytest.raises(DuplicateParticipant, match="Johnny"):
        Session(interval=valid_interval, participants=[first, alias])


def test_session_is_immutable(valid_interval, john, paul):
    session = Session(interval=valid_interval, participants=[john])
    with pytest.raises(ValidationError):
        session.participants = (john, paul)
    assert isinstance(session.participants, tuple)


def test_sessions_compare_by_id(valid_interval, john):
    s1 = Session(interval=valid_interval, participants=[john])
    s2 = Session(interval=valid_interval, participants=[john])
    assert s1 != s2
    assert s1 == s1
