from typing import Dict, List, Optional

from ..application import interfaces as ports
from ..domain.room import Room
from ..shared_kernel import EntityId


class InMemoryRoomRepository(ports.RoomRepository):
    """Реализация репозитория в памяти для хранения агрегатов Room."""

    def __init__(self, logger: ports.ILogger) -> None:
        self._rooms: Dict[EntityId, Room] = {}
        self._logger = logger

    def add(self, room: Room) -> None:
        if room.id in self._rooms:
            raise ValueError(f"Комната с ID {room.id} уже существует")
        self._rooms[room.id] = room
        self._logger.debug(f"Комната {room.id} добавлена в репозиторий")

    def save(self, room: Room) -> None:
        """Сохраняет или обновляет комнату в словаре."""
        self._rooms[room.id] = room
        self._logger.debug(f"Сохранение комнаты {room.id} в репозиторий")

    def get_by_id(self, room_id: EntityId) -> Optional[Room]:
        return self._rooms.get(room_id)

    def list_all(self) -> List[Room]:
        return list(self._rooms.values())
