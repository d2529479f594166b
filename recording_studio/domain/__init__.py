"""
Доменная модель студии звукозаписи.

Комната (Room) является корнем агрегата и владеет своими сессиями.
"""

from .events import SessionBooked
from .exceptions import (
    BookingCollision,
    DuplicateParticipant,
    EmptySessionParticipants,
    InvalidCredential,
    InvalidInterval,
    InvalidParticipant,
    InvalidRoomName,
    MissingInterval,
    NilParticipantList,
    RoomNotFound,
)
from .musician import Musician
from .room import Room
from .session import Session
from .value_objects import TimeInterval, UnionCard

__all__ = [
    "BookingCollision",
    "DuplicateParticipant",
    "EmptySessionParticipants",
    "InvalidCredential",
    "InvalidInterval",
    "InvalidParticipant",
    "InvalidRoomName",
    "MissingInterval",
    "Musician",
    "NilParticipantList",
    "Room",
    "RoomNotFound",
    "Session",
    "SessionBooked",
    "TimeInterval",
    "UnionCard",
]
