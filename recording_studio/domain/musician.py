"""
Музыкант - участник сессии звукозаписи.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..shared_kernel import EntityId, generate_id
from .exceptions import InvalidParticipant
from .value_objects import UnionCard


class Musician(BaseModel):
    """Музыкант. Может иметь профсоюзный билет (0..1)."""

    model_config = ConfigDict(frozen=True)

    id: EntityId = Field(default_factory=generate_id)
    name: str
    card: Optional[UnionCard] = None

    @field_validator("name", mode="before")
    @classmethod
    def name_not_blank(cls, v: Any) -> Any:
        if not isinstance(v, str) or not v.strip():
            raise InvalidParticipant("Имя музыканта не может быть пустым.")
        return v

    def __hash__(self):
        return hash(self.id)

    def __eq__(self, other):
        if not isinstance(other, Musician):
            return NotImplemented
        return self.id == other.id
