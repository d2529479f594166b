"""
Объекты-значения студии: интервал времени и профсоюзный билет.

Оба неизменяемы и сравниваются по значению.
"""

from datetime import datetime, timedelta
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .exceptions import InvalidCredential, InvalidInterval


class TimeInterval(BaseModel):
    """
    Полуоткрытый интервал времени [start, end).
    Начало входит в интервал, конец - нет, поэтому соседние
    бронирования могут касаться друг друга.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @model_validator(mode="after")
    def start_before_end(self) -> "TimeInterval":
        if self.start >= self.end:
            raise InvalidInterval("Начало интервала должно быть раньше его конца.")
        return self

    @property
    def duration(self) -> timedelta:
        """Длительность интервала."""
        return self.end - self.start

    def overlaps(self, other: "TimeInterval") -> bool:
        """Проверяет, пересекаются ли два интервала (касание границ - не пересечение)."""
        return self.start < other.end and other.start < self.end


class UnionCard(BaseModel):
    """Профсоюзный билет музыканта."""

    model_config = ConfigDict(frozen=True)

    PREFIX: ClassVar[str] = "OMB-"

    number: str

    @field_validator("number", mode="before")
    @classmethod
    def number_has_prefix(cls, v: Any) -> Any:
        if not isinstance(v, str) or not v.strip():
            raise InvalidCredential("Номер профсоюзного билета не может быть пустым.")
        if not v.startswith(cls.PREFIX):
            raise InvalidCredential(
                f"Некорректный формат профсоюзного билета. "
                f"Номер должен начинаться с '{cls.PREFIX}'."
            )
        return v
