"""
Сервисы приложения для планирования сессий в студии.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from ..domain.exceptions import RoomNotFound
from ..domain.musician import Musician
from ..domain.room import Room
from ..domain.session import Session
from ..domain.value_objects import TimeInterval
from ..shared_kernel import DomainException, EntityId
from . import interfaces as ports

# DTO (Data Transfer Objects) для входящих данных


class OpenRoomRequest(BaseModel):
    """Запрос на открытие комнаты."""

    name: str


class BookSessionRequest(BaseModel):
    """Запрос на бронирование сессии."""

    room_id: EntityId
    start: datetime
    end: datetime
    participants: List[Musician]


# DTO для исходящих данных


class SessionDTO(BaseModel):
    """DTO для представления сессии."""

    id: EntityId
    start: datetime
    end: datetime
    participant_ids: List[EntityId]
    participant_names: List[str]

    @classmethod
    def from_domain(cls, session: Session) -> "SessionDTO":
        """Создает DTO из доменной модели."""
        return cls(
            id=session.id,
            start=session.interval.start,
            end=session.interval.end,
            participant_ids=[m.id for m in session.participants],
            participant_names=[m.name for m in session.participants],
        )


class RoomDTO(BaseModel):
    """DTO для представления комнаты."""

    id: EntityId
    name: str
    sessions: List[SessionDTO]

    @classmethod
    def from_domain(cls, room: Room) -> "RoomDTO":
        return cls(
            id=room.id,
            name=room.name,
            sessions=[SessionDTO.from_domain(s) for s in room.sessions],
        )


class StudioSchedulingService:
    """Сервис приложения для управления комнатами и их расписанием."""

    def __init__(
        self,
        rooms: ports.RoomRepository,
        event_bus: ports.IEventBus,
        logger: ports.ILogger,
        session_index: Optional[ports.ISessionIndex] = None,
    ):
        self._rooms = rooms
        self._event_bus = event_bus
        self._logger = logger
        self._session_index = session_index

    @property
    def rooms(self) -> ports.RoomRepository:
        return self._rooms

    def open_room(self, request: OpenRoomRequest) -> RoomDTO:
        """Открывает новую комнату для бронирования."""
        room = Room(name=request.name)
        self._rooms.add(room)
        self._logger.info(f"Открыта комната {room.name}", room_id=room.id)
        return RoomDTO.from_domain(room)

    def book_session(self, request: BookSessionRequest) -> SessionDTO:
        """Бронирует сессию в комнате."""
        room = self._get_room(request.room_id)
        try:
            interval = TimeInterval(start=request.start, end=request.end)
            session = room.book_session(interval, request.participants)
        except DomainException as e:
            # Бизнес-отказ: повторять бессмысленно, только фиксируем и пробрасываем
            self._logger.warning(
                f"Бронирование отклонено: {e}",
                room_id=room.id,
                error=type(e).__name__,
            )
            raise

        self._rooms.save(room)
        for event in room.pull_domain_events():
            self._event_bus.publish(event)

        self._logger.info(
            f"Сессия забронирована в комнате {room.name}",
            room_id=room.id,
            session_id=session.id,
        )
        return SessionDTO.from_domain(session)

    def get_schedule(self, room_id: EntityId) -> List[SessionDTO]:
        """Возвращает расписание комнаты в порядке бронирования."""
        room = self._get_room(room_id)
        return [SessionDTO.from_domain(s) for s in room.sessions]

    def find_room_of_session(self, session_id: EntityId) -> Optional[EntityId]:
        """Находит комнату, которой принадлежит сессия."""
        if self._session_index is None:
            return None
        return self._session_index.room_of(session_id)

    def _get_room(self, room_id: EntityId) -> Room:
        room = self._rooms.get_by_id(room_id)
        if room is None:
            raise RoomNotFound(room_id)
        return room
