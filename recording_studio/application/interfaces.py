"""
Интерфейсы (порты) прикладного слоя.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Protocol, Type, TypeVar

from ..domain.room import Room
from ..shared_kernel import DomainEvent, EntityId

T_Event = TypeVar("T_Event", bound=DomainEvent)


class ILogger(Protocol):
    """Интерфейс для логгера."""

    def info(self, message: str, **kwargs: Any) -> None: ...
    def error(self, message: str, **kwargs: Any) -> None: ...
    def warning(self, message: str, **kwargs: Any) -> None: ...
    def debug(self, message: str, **kwargs: Any) -> None: ...


class IEventBus(Protocol):
    """Интерфейс для шины событий."""

    def publish(self, event: DomainEvent) -> None: ...
    def subscribe(
        self, event_type: Type[T_Event], handler: Callable[[T_Event], None]
    ) -> None: ...


class RoomRepository(ABC):
    """Абстрактный репозиторий для агрегата Room."""

    @abstractmethod
    def add(self, room: Room) -> None:
        """Добавляет новую комнату."""
        raise NotImplementedError

    @abstractmethod
    def save(self, room: Room) -> None:
        """Сохраняет состояние агрегата."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, room_id: EntityId) -> Optional[Room]:
        """Находит агрегат по его идентификатору."""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> List[Room]:
        raise NotImplementedError


class ISessionIndex(Protocol):
    """Внешний индекс "сессия -> комната"."""

    def room_of(self, session_id: EntityId) -> Optional[EntityId]: ...
