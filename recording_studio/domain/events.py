from datetime import datetime
from typing import Tuple

from ..shared_kernel import DomainEvent, EntityId


class SessionBooked(DomainEvent):
    """Событие бронирования сессии в комнате."""

    room_id: EntityId
    session_id: EntityId
    start: datetime
    end: datetime
    participant_ids: Tuple[EntityId, ...]
