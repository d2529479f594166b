"""
Исключения доменной модели студии.

Ни одно из них не наследуется от ValueError: валидаторы pydantic
пропускают такие исключения наружу без обёртки в ValidationError.
"""

from ..shared_kernel import BusinessRuleValidationException, DomainException


class InvalidInterval(BusinessRuleValidationException):
    """Начало интервала не раньше его конца."""


class InvalidCredential(BusinessRuleValidationException):
    """Некорректный номер профсоюзного билета."""


class InvalidParticipant(BusinessRuleValidationException):
    """Некорректные данные музыканта."""


class InvalidRoomName(BusinessRuleValidationException):
    """Пустое название комнаты."""


class MissingInterval(BusinessRuleValidationException):
    """Сессия создаётся без интервала времени."""


class NilParticipantList(DomainException):
    """Список участников не передан вовсе.

    Это нарушение контракта вызывающей стороной, а не бизнес-правило,
    поэтому класс не наследует BusinessRuleValidationException.
    """


class EmptySessionParticipants(BusinessRuleValidationException):
    """У сессии нет ни одного участника."""


class DuplicateParticipant(BusinessRuleValidationException):
    """Один и тот же музыкант указан в сессии дважды."""

    def __init__(self, musician):
        self.musician = musician
        super().__init__(f"Обнаружен повторяющийся музыкант: {musician.name}")


class BookingCollision(BusinessRuleValidationException):
    """Интервал пересекается с уже забронированной сессией."""

    def __init__(self, interval):
        self.interval = interval
        super().__init__(
            "Обнаружена коллизия бронирования. "
            "Комната уже забронирована на этот интервал."
        )


class RoomNotFound(DomainException):
    """Комната с указанным идентификатором не найдена."""

    def __init__(self, room_id):
        self.room_id = room_id
        super().__init__(f"Комната с ID {room_id} не найдена")
