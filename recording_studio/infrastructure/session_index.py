"""
Внешний индекс принадлежности сессий комнатам.

Сессия не хранит ссылку на свою комнату, поэтому поиск владельца
выполняется через этот индекс, который обновляется по событиям.
"""

from typing import Dict, Optional

from ..application import interfaces as ports
from ..domain.events import SessionBooked
from ..shared_kernel import EntityId


class SessionRoomIndex(ports.ISessionIndex):
    """Индекс "сессия -> комната", построенный по событиям SessionBooked."""

    def __init__(self) -> None:
        self._room_by_session: Dict[EntityId, EntityId] = {}

    def on_session_booked(self, event: SessionBooked) -> None:
        self._room_by_session[event.session_id] = event.room_id

    def room_of(self, session_id: EntityId) -> Optional[EntityId]:
        return self._room_by_session.get(session_id)

    def __len__(self) -> int:
        return len(self._room_by_session)
