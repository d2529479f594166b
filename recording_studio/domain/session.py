"""
Сессия звукозаписи.

Сессия полностью валидируется при создании и больше не меняется.
Ссылки на свою комнату у сессии нет: навигация только Room -> Session.
"""

from typing import Any, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..shared_kernel import EntityId, generate_id
from .exceptions import (
    DuplicateParticipant,
    EmptySessionParticipants,
    MissingInterval,
    NilParticipantList,
)
from .musician import Musician
from .value_objects import TimeInterval


class Session(BaseModel):
    """Сессия: один интервал времени и непустой набор различных музыкантов."""

    model_config = ConfigDict(frozen=True)

    id: EntityId = Field(default_factory=generate_id)
    interval: TimeInterval
    participants: Tuple[Musician, ...]

    @model_validator(mode="before")
    @classmethod
    def require_interval_and_participants(cls, data: Any) -> Any:
        if isinstance(data, dict):
            if data.get("interval") is None:
                raise MissingInterval("Сессия должна иметь интервал времени.")
            if data.get("participants") is None:
                raise NilParticipantList("Список участников не передан.")
        return data

    @field_validator("participants")
    @classmethod
    def participants_unique_and_not_empty(
        cls, v: Tuple[Musician, ...]
    ) -> Tuple[Musician, ...]:
        seen: Set[EntityId] = set()
        accepted = []
        for musician in v:
            if musician.id in seen:
                raise DuplicateParticipant(musician)
            seen.add(musician.id)
            accepted.append(musician)

        if not accepted:
            raise EmptySessionParticipants(
                "Сессия должна иметь хотя бы одного участника."
            )
        return tuple(accepted)

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if not isinstance(other, Session):
            return NotImplemented
        return self.id == other.id
