"""Domain models for theater billing statements.

These dataclasses are the canonical in-memory shape of plays, performances and
invoices, whatever document they were loaded from.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import UnknownPlayTypeError


class PlayType(Enum):
    """Play genres the pricing rules know about."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

    @classmethod
    def from_tag(cls, tag: str) -> PlayType:
        try:
            return cls(tag)
        except ValueError:
            raise UnknownPlayTypeError(tag) from None


@dataclass(frozen=True)
class Play:
    """Reference data for a play.

    ``type`` keeps the raw tag as supplied; a ``PlayType`` member is stored as its tag.
    """

    name: str
    type: str | PlayType

    def __post_init__(self) -> None:
        if isinstance(self.type, PlayType):
            object.__setattr__(self, "type", self.type.value)

    @property
    def play_type(self) -> PlayType:
        return PlayType.from_tag(self.type)


@dataclass(frozen=True)
class Performance:
    """One priced occurrence of a play."""

    play_id: str
    audience: int


@dataclass(frozen=True)
class Invoice:
    """A customer's bill. Performance order is statement line order."""

    customer: str
    performances: tuple[Performance, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "performances", tuple(self.performances))
