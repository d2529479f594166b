"""
Комната звукозаписи - корень агрегата.

Комната ведёт собственный календарь сессий и защищает инвариант:
никакие две её сессии не пересекаются по времени.
"""

import threading
from typing import Any, Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from ..shared_kernel import DomainEvent, EntityId, generate_id
from .events import SessionBooked
from .exceptions import BookingCollision, InvalidRoomName
from .musician import Musician
from .session import Session
from .value_objects import TimeInterval


class Room(BaseModel):
    """Агрегат "Комната". Единственная точка создания новых сессий."""

    id: EntityId = Field(default_factory=generate_id, frozen=True)
    name: str = Field(frozen=True)

    _sessions: List[Session] = PrivateAttr(default_factory=list)
    _domain_events: List[DomainEvent] = PrivateAttr(default_factory=list)
    # Проверка коллизий и добавление сессии выполняются под одной блокировкой
    _lock: Any = PrivateAttr(default_factory=threading.Lock)

    @field_validator("name", mode="before")
    @classmethod
    def name_not_blank(cls, v: Any) -> Any:
        if not isinstance(v, str) or not v.strip():
            raise InvalidRoomName("Название комнаты не может быть пустым.")
        return v

    @property
    def sessions(self) -> Tuple[Session, ...]:
        return tuple(self._sessions)

    def is_available(self, interval: TimeInterval) -> bool:
        """Проверяет, свободна ли комната на указанный интервал."""
        return not any(s.interval.overlaps(interval) for s in self._sessions)

    def book_session(
        self,
        interval: Optional[TimeInterval],
        participants: Optional[Iterable[Musician]],
    ) -> Session:
        """
        Бронирует новую сессию.

        Ошибки создания самой сессии (участники, интервал) пробрасываются
        без изменений: правила участников принадлежат Session, а не Room.
        """
        with self._lock:
            # Без интервала проверять нечего, MissingInterval выбросит Session
            if interval is not None and not self.is_available(interval):
                raise BookingCollision(interval)

            session = Session(
                interval=interval,
                participants=list(participants) if participants is not None else None,
            )
            self._sessions.append(session)
            self._domain_events.append(
                SessionBooked(
                    aggregate_id=self.id,
                    room_id=self.id,
                    session_id=session.id,
                    start=session.interval.start,
                    end=session.interval.end,
                    participant_ids=tuple(m.id for m in session.participants),
                )
            )
        return session

    def pull_domain_events(self) -> List[DomainEvent]:
        with self._lock:
            events = list(self._domain_events)
            self._domain_events.clear()
        return events

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if not isinstance(other, Room):
            return NotImplemented
        return self.id == other.id
