from typing import Any, Dict, Optional

from .application.services import StudioSchedulingService
from .config import StudioSettings
from .domain.events import SessionBooked
from .infrastructure.console_logger import ConsoleLogger
from .infrastructure.event_bus import InMemoryEventBus
from .infrastructure.repositories import InMemoryRoomRepository
from .infrastructure.session_index import SessionRoomIndex


def bootstrap_app(settings: Optional[StudioSettings] = None) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or StudioSettings.from_env()

    # 1. Логгер по настройкам
    logger = ConsoleLogger(level=settings.log_level, show_context=settings.log_context)

    # 2. Инфраструктура
    rooms = InMemoryRoomRepository(logger)
    event_bus = InMemoryEventBus(logger)

    # 3. Индекс "сессия -> комната" подписываем на события бронирования
    session_index = SessionRoomIndex()
    event_bus.subscribe(SessionBooked, session_index.on_session_booked)

    scheduling_service = StudioSchedulingService(
        rooms=rooms,
        event_bus=event_bus,
        logger=logger,
        session_index=session_index,
    )

    return {
        "settings": settings,
        "logger": logger,
        "event_bus": event_bus,
        "session_index": session_index,
        "scheduling_service": scheduling_service,
    }
